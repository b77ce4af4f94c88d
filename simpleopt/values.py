import math
import re
from typing import Optional

from .options import DEFAULT_LIMITS, Limits, Option, OptionType

INT_MIN = -(1 << 63)
INT_MAX = (1 << 63) - 1
UNSIGNED_MAX = (1 << 64) - 1

# checked in order, full string, case-insensitive
BOOL_WORDS = [
    ("true", True),
    ("yes", True),
    ("on", True),
    ("false", False),
    ("no", False),
    ("off", False),
]

# strtol with base 0: hex, octal with a leading 0, decimal
_INTEGER = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))", re.ASCII)
_DECIMAL_FLOAT = re.compile(r"\s*[+-]?(?:(\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_HEX_FLOAT = re.compile(r"\s*[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?", re.ASCII)
_SPECIAL_FLOAT = re.compile(r"\s*[+-]?(?:inf|infinity|nan)", re.IGNORECASE | re.ASCII)


def parse_bool(text: str) -> Optional[bool]:
    lowered = text.lower()
    for word, result in BOOL_WORDS:
        if lowered == word:
            return result
    return None


def parse_integer(text: str, lo: int, hi: int) -> Optional[int]:
    m = _INTEGER.fullmatch(text)
    if not m:
        return None

    sign, hex_digits, octal_digits, decimal_digits = m.groups()
    if hex_digits is not None:
        n = int(hex_digits, 16)
    elif octal_digits is not None:
        n = int(octal_digits, 8)
    else:
        n = int(decimal_digits, 10)

    if sign == "-":
        n = -n
    if n < lo or n > hi:
        return None
    return n


def parse_unsigned(text: str) -> Optional[int]:
    if text.lstrip()[:1] in ("+", "-"):
        return None
    return parse_integer(text, 0, UNSIGNED_MAX)


def parse_double(text: str) -> Optional[float]:
    if _SPECIAL_FLOAT.fullmatch(text):
        return float(text.strip())

    if _HEX_FLOAT.fullmatch(text):
        literal = text.strip()
        mantissa = re.split(r"[pP]", literal)[0]
        try:
            d = float.fromhex(literal)
        except OverflowError:
            return None
    elif _DECIMAL_FLOAT.fullmatch(text):
        literal = text.strip()
        mantissa = re.split(r"[eE]", literal)[0]
        d = float(literal)
    else:
        return None

    # out of range: overflow to infinity, or a non-zero literal rounded to zero
    if math.isinf(d):
        return None
    if d == 0.0 and re.search(r"[1-9a-fA-F]", mantissa.lstrip("+-").lstrip("0xX")):
        return None
    return d


def parse_value(option: Option, text: str, limits: Limits = DEFAULT_LIMITS) -> bool:
    """Convert text into option's value slot. The slot is left untouched
    unless the whole string converts."""
    t = option.type

    if t is OptionType.BOOL:
        result = parse_bool(text)
    elif t is OptionType.INT:
        result = parse_integer(text, INT_MIN, INT_MAX)
    elif t is OptionType.UNSIGNED:
        result = parse_unsigned(text)
    elif t is OptionType.DOUBLE:
        result = parse_double(text)
    elif t is OptionType.CHAR:
        result = text if len(text) == 1 else None
    elif t is OptionType.STRING:
        result = text if len(text) + 1 < limits.opt_arg_max_width else None
    elif t is OptionType.STRING_SET:
        result = None
        for i, choice in enumerate(option.choices):
            if text == choice:
                result = i
                break
    elif t in (OptionType.FLAG, OptionType.END):
        # carry no value
        result = None
    else:
        raise ValueError(f"unknown option type {t!r}")

    if result is None:
        return False

    option.store(result)
    return True
