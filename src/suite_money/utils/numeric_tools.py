from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent
_DECIMAL_LITERAL_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def parse_decimal_literal(text: str) -> Decimal:
    """Parse $text as a plain, finite decimal literal.

    Stricter than the `Decimal` constructor: surrounding whitespace, digit
    group underscores, `NaN` and `Infinity` are all rejected.

    Args:
        text: Literal like '10.50', '-3', '.5' or '1E+3'.

    Returns:
        The parsed `Decimal`, keeping the scale written in $text.

    Raises:
        ValueError: If $text is not a plain decimal literal.
    """
    if not isinstance(text, str) or not _DECIMAL_LITERAL_PATTERN.fullmatch(text):
        raise ValueError(f"$text ('{text}') is not a valid decimal literal")

    # Raise: exponents beyond the `decimal` limits match the pattern but cannot be represented
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"$text ('{text}') is outside the representable decimal range") from e
