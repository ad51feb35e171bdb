"""Currency parsing and formatting

Amounts are whole currency units (no cents). User input mixes ``.`` and
``,`` as thousands or decimal separators, so the separator role is
inferred from how many digits follow it:

- 1 or 2 digits: decimal separator, the fraction is dropped
- exactly 3 digits: thousands separator
- more than 3 digits: invalid

Parsing never raises; anything that cannot be read yields 0.
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

CURRENCY_SYMBOL = "$"
UNDEFINED_PRICE_LABEL = "Por definir"

_STRIP_PATTERN = re.compile(r"[$\s]")
_VALID_PATTERN = re.compile(r"[0-9.,]+")
_SEPARATORS_PATTERN = re.compile(r"[.,]")

Number = Union[int, float, Decimal]


def _to_int(digits: str) -> int:
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        return 0


def parse_currency(value: Optional[str]) -> int:
    """
    Parse free-text money input into a whole amount

    Examples:
        "2.000" -> 2000, "300,0" -> 300, "1.234,56" -> 1234,
        "20.021554555" -> 0, "abc" -> 0
    """
    if not value:
        return 0

    cleaned = _STRIP_PATTERN.sub("", value)
    if not cleaned:
        return 0

    if not _VALID_PATTERN.fullmatch(cleaned):
        return 0

    has_comma = "," in cleaned
    has_dot = "." in cleaned

    if not has_comma and not has_dot:
        return _to_int(cleaned)

    if has_comma and has_dot:
        last_separator = max(cleaned.rfind(","), cleaned.rfind("."))
        tail = cleaned[last_separator + 1:]

        if len(tail) <= 2:
            integer_part = _SEPARATORS_PATTERN.sub("", cleaned[:last_separator])
            return _to_int(integer_part)
        if len(tail) == 3:
            return _to_int(_SEPARATORS_PATTERN.sub("", cleaned))
        return 0

    separator = "," if has_comma else "."
    parts = cleaned.split(separator)
    last_part = parts[-1]

    if len(last_part) <= 2:
        return _to_int("".join(parts[:-1]))

    if len(last_part) == 3:
        # The leading group may be shorter ("2.000"), every later one is 3 wide
        if any(len(part) != 3 for part in parts[1:]):
            return 0
        return _to_int("".join(parts))

    return 0


def round_amount(amount: Number) -> int:
    """Round half-up (away from zero) to a whole amount"""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_currency(amount: Number) -> str:
    """
    Format an amount as ``$1.234.567``

    No decimal part is ever shown. Negative amounts keep the sign in
    front of the symbol: ``-$1.500``.
    """
    rounded = round_amount(amount)
    grouped = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{grouped}"


def format_price(amount: Number) -> str:
    """Format a unit price; 0 means the price is still to be defined"""
    if amount == 0:
        return UNDEFINED_PRICE_LABEL
    return format_currency(amount)


def is_rejected_input(value: Optional[str]) -> bool:
    """True when the user typed something that parsed to nothing"""
    return bool(value and value.strip()) and parse_currency(value) == 0
