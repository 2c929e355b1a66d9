"""Currency metadata lookups.

Every function accepts a currency identifier (e.g., "USD"), a Monetary type (e.g., `Monetary["USD"]`)
or a Monetary instance, and answers from the process-wide registry.
"""

from __future__ import annotations

from typed_money.currency.currency_record import CurrencyRecord
from typed_money.currency.currency_registry import get_registry
from typed_money.currency.identity import CurrencyLike, currency_code_of, flexible


@flexible
def lookup(code: str) -> CurrencyRecord:
    """Get the full registry record of a currency.

    Raises:
        UnknownCurrencyError: If the currency is not registered.
    """
    return get_registry().lookup(code)


def decimals(currency: CurrencyLike) -> int:
    """Get the number of decimal places after the major unit.

    For a concrete Monetary type or instance this is its own scale, read without a registry lookup. For an
    identifier or a partially specified Monetary type it is the registry default, which is -1 when the
    currency has no sane minor unit (e.g., gold).

    Raises:
        UnknownCurrencyError: If the currency is not registered.
    """
    code = currency_code_of(currency)
    scale = getattr(currency, "scale", None)
    if isinstance(scale, int):
        return scale
    return get_registry().lookup(code).default_scale


@flexible
def currency_info(code: str) -> str:
    """Get a brief English description, starting with the common name of the currency."""
    return get_registry().lookup(code).description


@flexible
def iso4217num(code: str) -> int:
    """Get the ISO 4217 numeric code; 0 for custom currencies.

    Most applications should zero-pad this code to three digits.
    """
    return get_registry().lookup(code).numeric_code


@flexible
def iso4217alpha(code: str) -> str:
    """Get the alphabetic code.

    ISO currencies give a three-letter uppercase string. Custom currencies give a lowercase string, which
    must not be read as an ISO 4217 code.
    """
    return get_registry().lookup(code).alpha_code


@flexible
def short_symbol(code: str) -> str:
    """Get a short, possibly ambiguous symbol (e.g., "$"); falls back to `iso4217alpha`."""
    record = get_registry().lookup(code)
    return record.short_symbol if record.short_symbol is not None else record.alpha_code


@flexible
def long_symbol(code: str) -> str:
    """Get an unambiguous symbol (e.g., "US$"); falls back to `iso4217alpha`."""
    record = get_registry().lookup(code)
    return record.long_symbol if record.long_symbol is not None else record.alpha_code


def from_numeric_code(numeric_code: int) -> CurrencyRecord:
    """Get the record of the ISO currency with $numeric_code.

    Raises:
        UnknownCurrencyError: If no ISO currency uses $numeric_code.
    """
    return get_registry().from_numeric_code(numeric_code)
