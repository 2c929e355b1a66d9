from __future__ import annotations

import re
from enum import Enum
from typing import Any

_ISO_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


class CurrencyType(Enum):
    """Enumeration of currency types."""

    FIAT = "FIAT"
    CRYPTO = "CRYPTO"
    COMMODITY = "COMMODITY"
    OTHER = "OTHER"


class CurrencyRecord:
    """Registry metadata of one currency.

    ISO 4217 currencies use their uppercase 3-letter code as identifier. Any other (custom) currency
    uses an all-lowercase identifier and numeric code 0, so it can never be mistaken for ISO.

    Attributes:
        code (str): Currency identifier (e.g., "USD", "btc").
        default_scale (int): Decimal digits of the minor unit, or -1 if there is no sane minor unit.
        description (str): English description starting with the common name.
        numeric_code (int): ISO 4217 numeric code, 0 for custom currencies.
        short_symbol (str | None): Short, possibly ambiguous symbol (e.g., "$").
        long_symbol (str | None): Unambiguous symbol (e.g., "US$").
        currency_type (CurrencyType): Type of currency (FIAT, CRYPTO, COMMODITY, OTHER).
    """

    __slots__ = (
        "_code",
        "_default_scale",
        "_description",
        "_numeric_code",
        "_short_symbol",
        "_long_symbol",
        "_currency_type",
    )

    def __init__(
        self,
        code: str,
        default_scale: int,
        description: str,
        numeric_code: int = 0,
        short_symbol: str | None = None,
        long_symbol: str | None = None,
        currency_type: CurrencyType = CurrencyType.FIAT,
    ):
        """Initialize a CurrencyRecord instance.

        Raises:
            ValueError: If parameters are invalid.
            TypeError: If $currency_type is not CurrencyType instance.
        """
        # Raise: $code must be a non-empty string without surrounding whitespace
        if not isinstance(code, str) or not code or code != code.strip():
            raise ValueError(f"$code must be a non-empty string without whitespace, but provided value is: '{code}'")

        is_iso = code != code.lower()

        # Raise: ISO codes are exactly three uppercase letters
        if is_iso and not _ISO_CODE_PATTERN.match(code):
            raise ValueError(f"$code must be 3 uppercase letters (ISO 4217) or all lowercase (custom), but provided value is: '{code}'")

        # Raise: $default_scale is a non-negative int or the -1 sentinel
        if isinstance(default_scale, bool) or not isinstance(default_scale, int) or default_scale < -1:
            raise ValueError(f"$default_scale must be an integer >= -1, but provided value is: {default_scale}")

        if not isinstance(description, str) or not description.strip():
            raise ValueError(f"$description must be a non-empty string, but provided value is: '{description}'")

        if isinstance(numeric_code, bool) or not isinstance(numeric_code, int):
            raise ValueError(f"$numeric_code must be an integer, but provided value is: {numeric_code}")

        # Raise: ISO currencies carry a real numeric code, custom ones carry 0
        if is_iso and not 0 < numeric_code <= 999:
            raise ValueError(f"$numeric_code of ISO currency '{code}' must be between 1 and 999, but provided value is: {numeric_code}")
        if not is_iso and numeric_code != 0:
            raise ValueError(f"$numeric_code of custom currency '{code}' must be 0, but provided value is: {numeric_code}")

        if not isinstance(currency_type, CurrencyType):
            raise TypeError(f"$currency_type must be a CurrencyType instance, but provided value is: {currency_type}")

        self._code = code
        self._default_scale = default_scale
        self._description = description.strip()
        self._numeric_code = numeric_code
        self._short_symbol = short_symbol
        self._long_symbol = long_symbol
        self._currency_type = currency_type

    @property
    def code(self) -> str:
        """Get the currency identifier."""
        return self._code

    @property
    def alpha_code(self) -> str:
        """Get the alphabetic code; uppercase for ISO 4217, lowercase for custom currencies."""
        return self._code

    @property
    def default_scale(self) -> int:
        return self._default_scale

    @property
    def description(self) -> str:
        return self._description

    @property
    def numeric_code(self) -> int:
        return self._numeric_code

    @property
    def short_symbol(self) -> str | None:
        return self._short_symbol

    @property
    def long_symbol(self) -> str | None:
        return self._long_symbol

    @property
    def currency_type(self) -> CurrencyType:
        return self._currency_type

    @property
    def is_iso(self) -> bool:
        """Check if the record describes an ISO 4217 currency."""
        return self._numeric_code != 0

    @property
    def has_minor_unit(self) -> bool:
        """Check if the currency defines a canonical minor unit."""
        return self._default_scale != -1

    def _key(self) -> tuple:
        return (
            self._code,
            self._default_scale,
            self._description,
            self._numeric_code,
            self._short_symbol,
            self._long_symbol,
            self._currency_type,
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, CurrencyRecord):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self._code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self._code}', {self._default_scale}, '{self._description}', {self._numeric_code})"
