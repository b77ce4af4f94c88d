import logging
from typing import Optional, Sequence

from .errors import MalformedTableError
from .options import Option, OptionType, iter_table

logger = logging.getLogger(__name__)


def find_table_error(options: Sequence[Option]) -> Optional[str]:
    """Return a description of the first malformed entry, or None."""
    table = list(iter_table(options))

    for i, o in table:
        if o.short_name is None and o.long_name is None:
            return f"option {i} has neither a short nor a long name"
        if o.type is OptionType.FLAG and o.arg_required:
            return f"flag option {o.name} cannot require an argument"

    # pairwise, can't reorder the caller's table
    for i, a in table:
        for j, b in table:
            if i == j:
                continue
            if a.short_name is not None and a.short_name == b.short_name:
                return f"short name ‘-{a.short_name}’ used by options {i} and {j}"
            if a.long_name is not None and a.long_name == b.long_name:
                return f"long name ‘--{a.long_name}’ used by options {i} and {j}"

    return None


def validate_table(options: Sequence[Option]) -> bool:
    reason = find_table_error(options)
    if reason is not None:
        logger.debug("rejecting option table: %s", reason)
        return False
    return True


def check_table(options: Sequence[Option]) -> None:
    reason = find_table_error(options)
    if reason is not None:
        raise MalformedTableError(reason)


def match_option(token: str, options: Sequence[Option]) -> int:
    """Index of the option named by token, -1 if there is none.

    "-x" matches a short name; "-xy" never matches (no bundling).
    "--name" and "--name=..." match a long name exactly, so "--namex"
    does not match "name".
    """
    if len(token) < 2 or token[0] != "-":
        return -1

    if token[1] != "-":
        if len(token) > 2:
            return -1
        for i, o in iter_table(options):
            if o.short_name == token[1]:
                return i
        return -1

    rest = token[2:]
    for i, o in iter_table(options):
        if not o.long_name or not rest.startswith(o.long_name):
            continue
        after = rest[len(o.long_name):]
        if after == "" or after[0] == "=":
            return i

    return -1
