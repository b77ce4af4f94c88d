"""
Parsing of argv against an option table.

    options = [
        Option(OptionType.FLAG, "h", "help", description="print help"),
        Option(OptionType.INT, "n", "count", True),
        Option.end(),
    ]
    result = parse(sys.argv, options)
    if result.result_type is not ResultType.SUCCESS:
        print_error(sys.stderr, sys.argv[0], result)

After a successful parse, options[1].seen tells whether -n/--count was
given and options[1].val_int holds its value. result.argv holds the
non-option arguments, in order. Everything after a lone "--" is a
non-option argument.

Parsing stops at the first error. Options handled before that point keep
what was written to them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .errors import (
    ArgumentTooLongError,
    BadArgumentError,
    MalformedTableError,
    MissingArgumentError,
    TooManyArgumentsError,
    UnrecognizedOptionError,
)
from .options import DEFAULT_LIMITS, Limits, Option, OptionType
from .table import find_table_error, match_option
from .values import parse_value

logger = logging.getLogger(__name__)


class ResultType(Enum):
    SUCCESS = 0
    UNRECOGNIZED_OPTION = 1
    BAD_ARG = 2
    MISSING_ARG = 3
    ARG_TOO_LONG = 4
    TOO_MANY_POSITIONALS = 5
    MALFORMED_TABLE = 6


@dataclass(frozen=True)
class ParseResult:
    result_type: ResultType
    option_type: Optional[OptionType] = None
    option_string: str = ""
    argument_string: str = ""
    argv: Tuple[str, ...] = ()
    table_error: str = ""

    @property
    def ok(self) -> bool:
        return self.result_type is ResultType.SUCCESS

    def raise_for_error(self) -> None:
        t = self.result_type
        if t is ResultType.SUCCESS:
            return
        if t is ResultType.UNRECOGNIZED_OPTION:
            raise UnrecognizedOptionError(self.option_string)
        if t is ResultType.BAD_ARG:
            raise BadArgumentError(self.option_string, self.argument_string)
        if t is ResultType.MISSING_ARG:
            raise MissingArgumentError(self.option_string)
        if t is ResultType.ARG_TOO_LONG:
            raise ArgumentTooLongError(self.option_string)
        if t is ResultType.TOO_MANY_POSITIONALS:
            raise TooManyArgumentsError(self.argument_string)
        raise MalformedTableError(self.table_error)


class Positionals:
    """Non-option arguments, refusing to grow past capacity."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.items: List[str] = []

    def add(self, arg: str) -> bool:
        if len(self.items) + 1 > self.capacity:
            return False
        self.items.append(arg)
        return True

    def __len__(self):
        return len(self.items)


def option_text(token: str, limits: Limits) -> str:
    """The option part of token, up to any "=", cut to fit the buffer."""
    name = token.split("=", 1)[0]
    return name[:limits.opt_max_width - 1]


def argument_text(arg: str, limits: Limits) -> str:
    return arg[:limits.opt_arg_max_width - 1]


class _Scan:
    def __init__(self, argv: Sequence[str], options: List[Option], limits: Limits):
        self.argv = argv
        self.options = options
        self.limits = limits
        self.positionals = Positionals(limits.max_argc)

    def fail(self, result_type: ResultType, i: int, option: Optional[Option] = None,
             arg: Optional[str] = None) -> ParseResult:
        logger.debug("parse stopped at argv[%d] %r: %s", i, self.argv[i], result_type.name)
        return ParseResult(
            result_type,
            option_type=option.type if option is not None else None,
            option_string=option_text(self.argv[i], self.limits),
            argument_string=argument_text(arg, self.limits) if arg is not None else "",
            argv=tuple(self.positionals.items),
        )

    def too_many(self, arg: str) -> ParseResult:
        logger.debug("more than %d non-option arguments", self.limits.max_argc)
        return ParseResult(
            ResultType.TOO_MANY_POSITIONALS,
            argument_string=argument_text(arg, self.limits),
            argv=tuple(self.positionals.items),
        )

    def run(self) -> ParseResult:
        argv = self.argv
        options = self.options

        i = 1
        while i < len(argv):
            arg = argv[i]

            # the rest are non-options
            if arg == "--":
                i += 1
                break

            if not arg.startswith("-"):
                if not self.positionals.add(arg):
                    return self.too_many(arg)
                i += 1
                continue

            if len(arg) < 2:
                return self.fail(ResultType.UNRECOGNIZED_OPTION, i)

            opt_i = match_option(arg, options)
            if opt_i == -1:
                return self.fail(ResultType.UNRECOGNIZED_OPTION, i)

            o = options[opt_i]
            o.seen = True

            if o.type is OptionType.FLAG:
                i += 1
                continue

            # "--name=value"
            inline = None
            if arg[1] == "-":
                after = arg[2 + len(o.long_name):]
                if after:
                    inline = after[1:]

            # an optional arg is only taken if the next token isn't an option
            if not o.arg_required and inline is None:
                if (i + 1 >= len(argv) or argv[i + 1] == "--"
                        or match_option(argv[i + 1], options) != -1):
                    i += 1
                    continue

            if inline is not None:
                if not inline:
                    return self.fail(ResultType.MISSING_ARG, i, o)
                value = inline
            else:
                if i + 1 >= len(argv):
                    return self.fail(ResultType.MISSING_ARG, i, o)
                value = argv[i + 1]

            if (o.type is OptionType.STRING
                    and len(value) + 1 >= self.limits.opt_arg_max_width):
                return self.fail(ResultType.ARG_TOO_LONG, i, o, value)

            if not parse_value(o, value, self.limits):
                return self.fail(ResultType.BAD_ARG, i, o, value)

            o.value_stored = True
            i += 1 if inline is not None else 2

        for arg in argv[i:]:
            if not self.positionals.add(arg):
                return self.too_many(arg)

        return ParseResult(ResultType.SUCCESS, argv=tuple(self.positionals.items))


def parse(argv: Sequence[str], options: List[Option],
          limits: Limits = DEFAULT_LIMITS) -> ParseResult:
    """Parse argv (argv[0] being the program name) against options,
    recording what was seen in the options themselves."""
    reason = find_table_error(options)
    if reason is not None:
        logger.debug("rejecting option table: %s", reason)
        return ParseResult(ResultType.MALFORMED_TABLE, table_error=reason)

    return _Scan(argv, options, limits).run()
