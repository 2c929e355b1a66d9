from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Anything that can be scaled into a fixed-point value
RealLike: TypeAlias = Decimal | Fraction | int | str | float


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


def as_fraction(value: RealLike) -> Fraction:
    """Converts input to an exact `Fraction`.

    Floats and strings go through `as_decimal`, so a float means the number shown by its shortest
    `repr` and not its exact binary expansion.

    Args:
        value: Input value as `RealLike`.

    Returns:
        Value converted to `Fraction`.

    Raises:
        ValueError: If $value is NaN, infinite or not a number.
        TypeError: If $value has an unsupported type.
    """
    # Raise: bool is an int subclass, but True/False are never amounts
    if isinstance(value, bool):
        raise TypeError(f"Cannot call `as_fraction` because $value ({value}) is bool, not a number")

    if isinstance(value, (int, Fraction)):
        return Fraction(value)

    if isinstance(value, (float, str, Decimal)):
        try:
            decimal_value = as_decimal(value)
        except ArithmeticError as e:
            raise ValueError(f"Cannot call `as_fraction` because $value ('{value}') is not a number") from e

        # Raise: NaN and infinities have no exact value
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot call `as_fraction` because $value ({value}) is not finite")

        return Fraction(decimal_value)

    raise TypeError(f"Cannot call `as_fraction` because $value has unsupported type '{type(value).__name__}'")


def exact_decimal(raw: int, scale: int) -> Decimal:
    """Build the `Decimal` equal to `raw / 10**scale` without any context rounding.

    Args:
        raw: Integer digits.
        scale: Number of fractional digits (>= 0).

    Returns:
        Decimal with exponent `-scale`.
    """
    sign, digits, _ = Decimal(raw).as_tuple()
    return Decimal((sign, digits, -scale))


def format_scaled(raw: int, scale: int) -> str:
    """Render `raw / 10**scale` with exactly `scale` fractional digits using integer arithmetic.

    Examples:
        >>> format_scaled(325, 2)
        '3.25'
        >>> format_scaled(-5, 3)
        '-0.005'
        >>> format_scaled(7, 0)
        '7'
    """
    sign = "-" if raw < 0 else ""
    whole, fraction = divmod(abs(raw), 10**scale)
    if scale == 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction:0{scale}d}"
