from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .errors import MalformedTableError, OptionValueError

# the maximum number of non-option arguments collected from the cli
MAX_ARGC = 1024
# buffer width for an option token captured into a parse result
OPT_MAX_WIDTH = 512
# buffer width for an option's argument (string values and captured args)
OPT_ARG_MAX_WIDTH = 2048
# internal column buffer of the usage printer
USAGE_PRINT_BUFFER_WIDTH = 256


@dataclass(frozen=True)
class Limits:
    max_argc: int = MAX_ARGC
    opt_max_width: int = OPT_MAX_WIDTH
    opt_arg_max_width: int = OPT_ARG_MAX_WIDTH
    usage_print_buffer_width: int = USAGE_PRINT_BUFFER_WIDTH


DEFAULT_LIMITS = Limits()


class OptionType(Enum):
    FLAG = 0        # no argument, only seen / not seen
    BOOL = 1        # true/yes/on, false/no/off
    INT = 2         # signed, base auto-detected
    UNSIGNED = 3    # no sign allowed
    DOUBLE = 4
    CHAR = 5        # exactly one character
    STRING = 6      # bounded by OPT_ARG_MAX_WIDTH
    STRING_SET = 7  # one of Option.choices, stored as its index
    END = 8         # table sentinel


class Value(NamedTuple):
    type: OptionType
    data: Union[bool, int, float, str]


class Option:
    def __init__(self, type: OptionType, short_name: Optional[str] = None,
                 long_name: Optional[str] = None, arg_required: bool = False,
                 description: Optional[str] = None,
                 custom_arg_label: Optional[str] = None,
                 choices: Optional[Sequence[str]] = None):
        if short_name and len(short_name) != 1:
            raise MalformedTableError(f"short name ‘{short_name}’ is not a single character")

        self.type = type
        self.short_name = short_name or None
        self.long_name = long_name or None
        self.arg_required = arg_required
        self.description = description
        self.custom_arg_label = custom_arg_label
        self.choices: Tuple[str, ...] = tuple(choices) if choices is not None else ()

        # written by parse()
        self.seen = False
        self.value_stored = False
        self.value: Optional[Value] = None

    @classmethod
    def end(cls) -> 'Option':
        return cls(OptionType.END)

    @property
    def name(self) -> str:
        if self.long_name:
            return f"--{self.long_name}"
        if self.short_name:
            return f"-{self.short_name}"
        return "<unnamed>"

    def reset(self) -> None:
        self.seen = False
        self.value_stored = False
        self.value = None

    def store(self, data: Union[bool, int, float, str]) -> None:
        self.value = Value(self.type, data)

    def _get(self, wanted: OptionType, label: str):
        if self.value is None or self.value.type is not wanted:
            raise OptionValueError(self.name, label)
        return self.value.data

    @property
    def val_bool(self) -> bool:
        return self._get(OptionType.BOOL, "bool")

    @property
    def val_int(self) -> int:
        return self._get(OptionType.INT, "int")

    @property
    def val_unsigned(self) -> int:
        return self._get(OptionType.UNSIGNED, "unsigned")

    @property
    def val_double(self) -> float:
        return self._get(OptionType.DOUBLE, "double")

    @property
    def val_char(self) -> str:
        return self._get(OptionType.CHAR, "char")

    @property
    def val_string(self) -> str:
        return self._get(OptionType.STRING, "string")

    @property
    def val_string_set_idx(self) -> int:
        return self._get(OptionType.STRING_SET, "string-set")

    @property
    def chosen(self) -> str:
        return self.choices[self.val_string_set_idx]

    def __repr__(self):
        return (f"Option({self.type.name}, short_name={self.short_name!r}, "
                f"long_name={self.long_name!r}, seen={self.seen}, value={self.value!r})")


def iter_table(options: Sequence[Option]) -> Iterator[Tuple[int, Option]]:
    """Yield (index, option) up to, not including, the End sentinel."""
    for i, o in enumerate(options):
        if o.type is OptionType.END:
            return
        yield i, o


def reset_options(options: List[Option]) -> None:
    for _, o in iter_table(options):
        o.reset()
