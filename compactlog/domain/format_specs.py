"""Display-format specifiers for message template tokens.

A token such as ``{Count:000}`` or ``{Id:X8}`` carries a format that is
applied to the property value when the template is rendered. This module
turns a scalar value plus such a specifier into display text.

Supported specifiers:
- Standard numeric: D, X/x, F, N, E/e, P, G with an optional precision
  (``D5``, ``X8``, ``F3``...)
- Custom numeric patterns made of ``0``, ``#``, ``.`` and ``,``
  (``000``, ``0.00``, ``#,##0``)
- Datetimes: ``O``/``o`` for round-trip ISO-8601, or any strftime pattern
- Anything else goes through ``format(value, spec)``, falling back to
  ``str(value)`` when Python rejects the spec
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

_STANDARD_NUMERIC = re.compile(r"^([DdXxFfNnEePpGg])(\d{0,2})$")
_CUSTOM_NUMERIC = re.compile(r"^[0#,.]*[0#][0#,.]*$")


def format_scalar(value: Any, spec: str | None) -> str:
    """Render a non-string scalar with an optional display-format specifier.

    Args:
        value: The scalar to render. Strings are handled by the caller.
        spec: The token's format specifier, or None.

    Returns:
        The display text.
    """
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, Enum):
        return value.name
    if not spec:
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return _format_temporal(value, spec)
    if isinstance(value, (int, float, Decimal)):
        formatted = _format_number(value, spec)
        if formatted is not None:
            return formatted
    return _python_format(value, spec)


def _python_format(value: Any, spec: str) -> str:
    try:
        return format(value, spec)
    except (TypeError, ValueError):
        return str(value)


def _format_temporal(value: date | time, spec: str) -> str:
    if spec in ("O", "o"):
        return value.isoformat()
    if "%" in spec:
        return value.strftime(spec)
    return _python_format(value, spec)


def _format_number(value: int | float | Decimal, spec: str) -> str | None:
    standard = _STANDARD_NUMERIC.match(spec)
    if standard:
        precision = int(standard.group(2)) if standard.group(2) else None
        return _format_standard(value, standard.group(1), precision)
    if _CUSTOM_NUMERIC.match(spec):
        return _format_custom(value, spec)
    return None


def _format_standard(
    value: int | float | Decimal, specifier: str, precision: int | None
) -> str | None:
    kind = specifier.upper()

    if kind in ("D", "X"):
        if not isinstance(value, int):
            return None
        width = precision or 0
        if kind == "D":
            digits = f"{abs(value):0{width}d}"
        else:
            digits = f"{abs(value):0{width}{'X' if specifier == 'X' else 'x'}}"
        return f"-{digits}" if value < 0 else digits

    if kind == "F":
        return f"{value:.{2 if precision is None else precision}f}"

    if kind == "N":
        return f"{value:,.{2 if precision is None else precision}f}"

    if kind == "P":
        return f"{value * 100:,.{2 if precision is None else precision}f} %"

    if kind == "E":
        text = f"{value:.{6 if precision is None else precision}E}"
        mantissa, exponent = text.split("E")
        sign, digits = exponent[0], exponent[1:]
        marker = "E" if specifier == "E" else "e"
        return f"{mantissa}{marker}{sign}{digits.zfill(3)}"

    # G
    if precision is None:
        return str(value)
    return f"{value:.{precision}{'G' if specifier == 'G' else 'g'}}"


def _format_custom(value: int | float | Decimal, pattern: str) -> str | None:
    integer_pattern, _, fraction_pattern = pattern.partition(".")
    grouped = "," in integer_pattern
    min_integer_digits = integer_pattern.count("0")
    fraction_pattern = fraction_pattern.replace(",", "").replace(".", "")
    min_fraction_digits = fraction_pattern.count("0")
    max_fraction_digits = len(fraction_pattern)

    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
        if not number.is_finite():
            return None
        quantum = Decimal(1).scaleb(-max_fraction_digits)
        number = number.quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None

    negative = number < 0
    text = f"{abs(number):.{max_fraction_digits}f}"
    integer_digits, _, fraction_digits = text.partition(".")

    integer_digits = integer_digits.lstrip("0").zfill(min_integer_digits)
    if grouped and integer_digits:
        integer_digits = f"{int(integer_digits):,}".zfill(min_integer_digits)

    while len(fraction_digits) > min_fraction_digits and fraction_digits.endswith("0"):
        fraction_digits = fraction_digits[:-1]

    body = f"{integer_digits}.{fraction_digits}" if fraction_digits else integer_digits
    if not body:
        body = "0"
    if negative and any(ch not in "0.," for ch in body):
        return f"-{body}"
    return body
