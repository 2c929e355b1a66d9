from __future__ import annotations

import functools
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, TypeAlias, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from typed_money.monetary.monetary import Monetary

R = TypeVar("R")


@runtime_checkable
class HasCurrency(Protocol):
    """Anything that carries a currency identifier in its `currency` attribute.

    Monetary classes carry it as a class attribute, so both a Monetary type and a Monetary instance
    satisfy this protocol.
    """

    currency: str | None


# Use where a currency is expected: an identifier, a Monetary type or a Monetary instance
CurrencyLike: TypeAlias = "str | type[Monetary] | Monetary"


def currency_code_of(currency: CurrencyLike) -> str:
    """Resolve any `CurrencyLike` to its currency identifier.

    Args:
        currency: Identifier (e.g., "USD"), Monetary type (e.g., `Monetary["USD"]`) or Monetary instance.

    Returns:
        The currency identifier.

    Raises:
        TypeError: If $currency does not carry a currency identifier.
    """
    if isinstance(currency, str):
        return currency

    code = currency.currency if isinstance(currency, HasCurrency) else None

    # Raise: types and instances must carry an identifier (the bare `Monetary` base carries none)
    if not isinstance(code, str):
        raise TypeError(f"Cannot resolve currency because $currency ({currency!r}) is neither an identifier nor a Monetary type or instance")

    return code


def flexible(func: Callable[[str], R]) -> Callable[[CurrencyLike], R]:
    """Let a lookup written for an identifier also accept a Monetary type or instance.

    The wrapped function is called with the resolved identifier only, so all three call shapes share one
    implementation.

    Examples:
        >>> @flexible
        ... def numeric(code: str) -> int:
        ...     return get_registry().lookup(code).numeric_code
        >>> numeric("USD") == numeric(Monetary["USD"]) == numeric(Monetary.of("USD", 1))
        True
    """

    @functools.wraps(func)
    def wrapper(currency: CurrencyLike) -> R:
        return func(currency_code_of(currency))

    return wrapper
