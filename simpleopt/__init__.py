from .errors import (
    ArgumentTooLongError,
    BadArgumentError,
    MalformedTableError,
    MissingArgumentError,
    OptionException,
    OptionParseException,
    OptionSpecException,
    OptionValueError,
    TooManyArgumentsError,
    UnrecognizedOptionError,
)
from .options import (
    DEFAULT_LIMITS,
    MAX_ARGC,
    OPT_ARG_MAX_WIDTH,
    OPT_MAX_WIDTH,
    USAGE_PRINT_BUFFER_WIDTH,
    Limits,
    Option,
    OptionType,
    Value,
    reset_options,
)
from .parser import ParseResult, ResultType, parse
from .table import check_table, match_option, validate_table
from .usage import format_error, format_usage, print_error, print_usage, wrap_print
from .values import parse_value

__version__ = "0.1.0"
