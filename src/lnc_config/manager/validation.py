"""Pure validators for the challenge form fields."""

from __future__ import annotations

import re
from typing import Optional, Union

from ..config import CATEGORIES, DIFFICULTIES, FLAG_PATTERN, PORT_ERROR, PORT_MAX, PORT_MIN

_FLAG_RE = re.compile(FLAG_PATTERN)
_DIGITS_RE = re.compile(r"[0-9]+")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?)([0-9]+)")

# Longer digit runs are past the range JSON readers hold as a finite number.
_MAX_NUMBER_DIGITS = 308


def flag_valid(flag: str) -> bool:
    return _FLAG_RE.fullmatch(flag) is not None


def port_error(port: str) -> str:
    """Return the inline error for ``port``, or an empty string when it is acceptable."""
    if not port:
        return ""
    if _DIGITS_RE.fullmatch(port) is None:
        return PORT_ERROR
    significant = port.lstrip("0")
    if len(significant) > len(str(PORT_MAX)):
        return PORT_ERROR
    if not PORT_MIN <= int(port) <= PORT_MAX:
        return PORT_ERROR
    return ""


def port_number(port: str) -> Optional[int]:
    """Integer value of ``port`` read from its leading digits.

    Returns ``None`` when the string does not start with a number or the number
    is too long to represent; callers only see such values while export is
    blocked by :func:`port_error`.
    """
    match = _INT_PREFIX_RE.match(port)
    if match is None:
        return None
    sign, digits = match.groups()
    if len(digits.lstrip("0")) > _MAX_NUMBER_DIGITS:
        return None
    return int(sign + digits)


def parse_hint_cost(cost: Union[str, int, None]) -> Optional[int]:
    """Parse a hint cost, returning ``None`` unless it is an integer >= 0.

    Strings must be ASCII digits only once surrounding whitespace is removed.
    """
    if isinstance(cost, bool) or cost is None:
        return None
    if isinstance(cost, int):
        return cost if cost >= 0 else None
    text = str(cost).strip()
    if _DIGITS_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def is_category(value: str) -> bool:
    return value in CATEGORIES


def is_difficulty(value: str) -> bool:
    return value in DIFFICULTIES
