import io
import logging
from typing import Optional, Sequence, TextIO

from .options import DEFAULT_LIMITS, Limits, Option, OptionType, iter_table
from .parser import ParseResult, ResultType

logger = logging.getLogger(__name__)

ARG_LABELS = {
    OptionType.BOOL: "BOOL",
    OptionType.INT: "INT",
    OptionType.UNSIGNED: "UNSIGNED",
    OptionType.DOUBLE: "DOUBLE",
    OptionType.CHAR: "CHAR",
    OptionType.STRING: "STRING",
    OptionType.STRING_SET: "STRING-SET",
}

# the description column never starts further right than this
MAX_DESC_COLUMN = 30


def wrap_print(f: TextIO, width: int, col: int, line_start: int, text: str) -> int:
    """Write the words of text starting at column col, wrapping at width
    and indenting continuation lines to line_start. A width of 0 never
    wraps. Returns the column after the last character written."""
    if width and (line_start >= width or col >= width):
        if line_start >= width:
            line_start = 0
        f.write("\n")
        col = 0

    first_word = True
    for word in text.split():
        if col < line_start:
            f.write(" " * (line_start - col))
            col = line_start

        sep = 0 if first_word else 1

        if width and col > line_start and col + sep + len(word) > width:
            f.write("\n" + " " * line_start)
            col = line_start
            sep = 0

        if sep:
            f.write(" ")
            col += 1

        if width and col + len(word) > width:
            # too long for a whole line, print piecemeal
            pos = 0
            while True:
                piece = word[pos:pos + width - col]
                f.write(piece)
                col += len(piece)
                pos += len(piece)
                if pos >= len(word):
                    break
                f.write("\n" + " " * line_start)
                col = line_start
        else:
            f.write(word)
            col += len(word)

        first_word = False

    return col


def arg_label(o: Option) -> str:
    if o.type is OptionType.FLAG:
        return ""
    if o.custom_arg_label is not None:
        return o.custom_arg_label
    return ARG_LABELS[o.type]


def has_optional_arg(o: Option) -> bool:
    return not o.arg_required and o.type is not OptionType.FLAG


def option_column(o: Option) -> str:
    """e.g. "--name=INT", "--name[=INT]", "[INT]" or "--name"."""
    s = ""
    if o.long_name:
        s += f"--{o.long_name}"
    if has_optional_arg(o):
        s += "["
    if o.long_name and o.type is not OptionType.FLAG:
        s += "="
    s += arg_label(o)
    if has_optional_arg(o):
        s += "]"
    return s


def description_column(options: Sequence[Option]) -> int:
    # 5 for the leading "  -X "
    start = 5
    for _, o in iter_table(options):
        j = 0
        # 3 for "--" and "="
        if o.long_name:
            j += 3 + len(o.long_name)
        # 2 for the [] around an optional arg
        if has_optional_arg(o):
            j += 2
        j += len(arg_label(o))

        # 5 for "  -X ", 1 for the trailing " "
        start = max(start, j + 5 + 1)
    return start


def print_usage(f: TextIO, width: int, usage_name: Optional[str],
                usage_options: Optional[str], usage_summary: Optional[str],
                options: Sequence[Option], limits: Limits = DEFAULT_LIMITS) -> None:
    desc_line_start = description_column(options)

    if desc_line_start - 5 - 1 >= limits.usage_print_buffer_width:
        f.write("simpleopt internal err: usage print buffer too small\n")
        return

    # let a single very long option overflow rather than push every
    # description to the right
    limit = min(width // 2, MAX_DESC_COLUMN)
    if desc_line_start > limit:
        desc_line_start = limit
    logger.debug("usage: width %d, descriptions at column %d", width, desc_line_start)

    if usage_name is not None and usage_options is not None:
        f.write("Usage:")
        col = wrap_print(f, width, 6, 7, usage_name)
        wrap_print(f, width, col, 7 + len(usage_name) + 1, usage_options)
        f.write("\n\n")

    if usage_summary is not None:
        wrap_print(f, width, 0, 2, usage_summary)
        f.write("\n\n")

    for _, o in iter_table(options):
        short = f"-{o.short_name}" if o.short_name else ""
        col = wrap_print(f, width, 0, 2, short)
        col = wrap_print(f, width, col, 5, option_column(o))

        if o.description is not None:
            if not width or col + 2 <= width:
                f.write("  ")
                col += 2
            else:
                f.write("\n")
                col = 0
            wrap_print(f, width, col, desc_line_start, o.description)

        f.write("\n")


def format_usage(width: int, usage_name: Optional[str], usage_options: Optional[str],
                 usage_summary: Optional[str], options: Sequence[Option],
                 limits: Limits = DEFAULT_LIMITS) -> str:
    buf = io.StringIO()
    print_usage(buf, width, usage_name, usage_options, usage_summary, options, limits)
    return buf.getvalue()


def _expects(option_type: Optional[OptionType]) -> str:
    label = ARG_LABELS.get(option_type)
    if label is None:
        return ""
    article = "an" if label[0] in "AEIOU" else "a"
    return f" (expects {article} {label})"


def format_error(usage_name: str, result: ParseResult) -> str:
    t = result.result_type
    if t is ResultType.SUCCESS:
        return ""

    if t is ResultType.UNRECOGNIZED_OPTION:
        msg = f"unrecognised option '{result.option_string}'"
    elif t is ResultType.BAD_ARG:
        msg = f"bad argument '{result.argument_string}' for option '{result.option_string}'"
    elif t is ResultType.MISSING_ARG:
        msg = (f"argument expected for option '{result.option_string}'"
               f"{_expects(result.option_type)}")
    elif t is ResultType.ARG_TOO_LONG:
        msg = f"argument too long for option '{result.option_string}'"
    elif t is ResultType.TOO_MANY_POSITIONALS:
        msg = "too many cli arguments received"
    else:
        msg = "malformed option table"

    return f"{usage_name}: {msg}\n"


def print_error(f: TextIO, usage_name: str, result: ParseResult) -> None:
    f.write(format_error(usage_name, result))
