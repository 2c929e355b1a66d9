"""Currency registry package.

Contains the per-currency metadata (`CurrencyRecord`), the compiled-in dataset, the process-wide
read-only registry and the lookup functions that accept an identifier, a Monetary type or a Monetary
instance.
"""

from typed_money.currency.lookups import (
    currency_info,
    decimals,
    from_numeric_code,
    iso4217alpha,
    iso4217num,
    long_symbol,
    lookup,
    short_symbol,
)
from typed_money.currency.currency_record import CurrencyRecord, CurrencyType
from typed_money.currency.currency_registry import (
    CurrencyRegistry,
    RegistryLoader,
    get_registry,
    is_registry_initialized,
    register_custom_currency,
)
from typed_money.currency.identity import CurrencyLike, HasCurrency, currency_code_of, flexible

__all__ = [
    "CurrencyLike",
    "CurrencyRecord",
    "CurrencyRegistry",
    "CurrencyType",
    "HasCurrency",
    "RegistryLoader",
    "currency_code_of",
    "currency_info",
    "decimals",
    "flexible",
    "from_numeric_code",
    "get_registry",
    "is_registry_initialized",
    "iso4217alpha",
    "iso4217num",
    "long_symbol",
    "lookup",
    "register_custom_currency",
    "short_symbol",
]
