__version__ = "0.1.0"

from typed_money.currency import (
    CurrencyRecord,
    CurrencyRegistry,
    CurrencyType,
    currency_info,
    decimals,
    from_numeric_code,
    get_registry,
    iso4217alpha,
    iso4217num,
    long_symbol,
    lookup,
    register_custom_currency,
    short_symbol,
)
from typed_money.errors import (
    CurrencyMismatchError,
    FixedDecimalOverflowError,
    MonetaryError,
    RegistryFrozenError,
    TypeMismatchError,
    UndefinedPrecisionError,
    UnknownCurrencyError,
)
from typed_money.fixed_point import (
    BIGINT,
    DEFAULT_STORAGE,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    UINT128,
    FixedDecimal,
    IntegerStorage,
)
from typed_money.monetary import Monetary, currency, fill_type, major_unit

__all__ = [
    "BIGINT",
    "CurrencyMismatchError",
    "CurrencyRecord",
    "CurrencyRegistry",
    "CurrencyType",
    "DEFAULT_STORAGE",
    "FixedDecimal",
    "FixedDecimalOverflowError",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "IntegerStorage",
    "Monetary",
    "MonetaryError",
    "RegistryFrozenError",
    "TypeMismatchError",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
    "UndefinedPrecisionError",
    "UnknownCurrencyError",
    "currency",
    "currency_info",
    "decimals",
    "fill_type",
    "from_numeric_code",
    "get_registry",
    "iso4217alpha",
    "iso4217num",
    "long_symbol",
    "lookup",
    "major_unit",
    "register_custom_currency",
    "short_symbol",
]
