from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Optional sign, digits, optional single decimal point, optional digits. At least one digit overall.
NUMERIC_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Longest text quoted for a value in error and log messages
DESCRIBE_LIMIT = 40


def describe(value: object) -> str:
    """Return a short printable form of $value for error and log messages.

    Integers are rendered through `Decimal`, so values with thousands of digits do not hit the
    int to str digit limit. Texts longer than `DESCRIBE_LIMIT` are cut.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        text = format(Decimal(value), "f")
    else:
        text = repr(value)
    if len(text) > DESCRIBE_LIMIT:
        return f"{text[:DESCRIBE_LIMIT]}... ({len(text)} chars)"
    return text


def as_numeric_text(value: DecimalLike) -> str:
    """Converts input to plain positional decimal text and validates it.

    Floats are converted once via their shortest `repr`, so `0.1` becomes "0.1" and not the
    binary expansion. Integers go through `Decimal`, which has no digit limit. Text must match
    `NUMERIC_PATTERN` exactly: whitespace, exponents, hex literals and digit separators are
    rejected.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Text that matches `NUMERIC_PATTERN`.

    Raises:
        TypeError: If $value is not a str, int, float or Decimal (or is a bool).
        ValueError: If $value is not a finite, well-formed decimal number.
    """
    # Raise: bool is an int subclass but never a monetary quantity
    if isinstance(value, bool):
        raise TypeError(f"$value must be a number or numeric text, but provided value is: {describe(value)}")

    if isinstance(value, str):
        text = value
    elif isinstance(value, int):
        text = format(Decimal(value), "f")
    elif isinstance(value, float):
        # Raise: inf and nan have no decimal representation
        if not math.isfinite(value):
            raise ValueError(f"$value must be finite, but provided value is: {describe(value)}")
        text = format(Decimal(repr(value)), "f")
    elif isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"$value must be finite, but provided value is: {describe(value)}")
        text = format(value, "f")
    else:
        raise TypeError(f"$value must be a number or numeric text, but provided value is: {describe(value)}")

    # Raise: text must be a plain signed decimal number
    if NUMERIC_PATTERN.fullmatch(text) is None:
        raise ValueError(f"$value must be a plain decimal number, but provided value is: {describe(value)}")

    return text


def is_numeric(value: object) -> bool:
    """Returns True if $value would be accepted by `as_numeric_text`."""
    try:
        as_numeric_text(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return False
    return True


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` exactly, after the well-formedness check.

    `Decimal` construction from text is exact and ignores the context precision, so no
    digit of the input is lost here.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    return Decimal(as_numeric_text(value))
