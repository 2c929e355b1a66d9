from __future__ import annotations


class MonetaryError(Exception):
    """Base class for all errors raised by typed_money."""


class UnknownCurrencyError(MonetaryError, LookupError):
    """Currency identifier (or numeric code) is not present in the registry."""


class UndefinedPrecisionError(MonetaryError, ValueError):
    """Currency has no canonical minor unit and no explicit precision was given."""


class TypeMismatchError(MonetaryError, TypeError):
    """Operands differ in storage kind or scale."""


class CurrencyMismatchError(TypeMismatchError):
    """Monetary operands differ in currency, storage kind or scale."""


class FixedDecimalOverflowError(MonetaryError, OverflowError):
    """Result does not fit into the range of a fixed-width storage kind."""


class RegistryFrozenError(MonetaryError, RuntimeError):
    """Currency registry was already initialized and cannot be changed."""
