from __future__ import annotations

import threading
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar
from types import NotImplementedType

from typed_money.currency.lookups import decimals
from typed_money.currency.currency_registry import get_registry
from typed_money.currency.identity import CurrencyLike, currency_code_of
from typed_money.errors import CurrencyMismatchError, TypeMismatchError, UndefinedPrecisionError
from typed_money.fixed_point.fixed_decimal import FixedDecimal
from typed_money.fixed_point.storage import DEFAULT_STORAGE, IntegerStorage
from typed_money.utils.numeric_tools import RealLike

_TYPE_CACHE: dict[tuple[str, IntegerStorage | None, int | None], type[Monetary]] = {}
_TYPE_CACHE_LOCK = threading.Lock()


class Monetary:
    """A value in one currency, stored as a fixed-point decimal.

    Currency, storage kind and scale belong to the class, never to the instance. Classes are created by
    parameterizing `Monetary` and equal parameters always give the identical class:

        Monetary["USD"]              # partial: storage and scale filled on use
        Monetary["USD", INT64]       # partial: scale filled on use
        Monetary["USD", INT64, 2]    # concrete

    Be careful about the decimal point: an `int` argument is a count of minor units, any other real number
    is a value in major units:

        Monetary["USD"](325)              # 3.25 USD
        Monetary["USD"](Decimal("3.25"))  # 3.25 USD
        Monetary["USD", INT64, 4](10000)  # 1.0000 USD

    `Monetary.of` builds values from an identifier and optional precision/storage. Values of different
    classes never mix: arithmetic or comparison between them raises `CurrencyMismatchError` before any
    computation. This includes `==`, so an `in` check over a list holding several currencies raises too;
    group values by `type(value)` first.

    Attributes:
        currency (str | None): Currency identifier (class attribute).
        storage (IntegerStorage | None): Integer kind, None while unspecified (class attribute).
        scale (int | None): Decimal places after the major unit, None while unspecified (class attribute).
        decimal_type (type[FixedDecimal] | None): Backing fixed-point class of a concrete type.
    """

    __slots__ = ("_value",)

    currency: ClassVar[str | None] = None
    storage: ClassVar[IntegerStorage | None] = None
    scale: ClassVar[int | None] = None
    decimal_type: ClassVar[type[FixedDecimal] | None] = None

    def __class_getitem__(cls, params: Any) -> type[Monetary]:
        # Raise: only the base class can be parameterized
        if cls is not Monetary:
            raise TypeError(f"Cannot parameterize `{cls.__name__}` because it is already parameterized")

        if not isinstance(params, tuple):
            params = (params,)

        # Raise: accepted forms are [currency], [currency, storage], [currency, storage, scale]
        if not 1 <= len(params) <= 3:
            raise TypeError(f"Cannot parameterize `Monetary` because $params must be (currency[, storage[, scale]]), but provided value is: {params!r}")

        code, storage, scale = params + (None,) * (3 - len(params))

        # Raise: currency identifier must be a string
        if not isinstance(code, str):
            raise TypeError(f"Cannot parameterize `Monetary` because $currency is not str (got type '{type(code).__name__}')")

        # Raise: currency must be registered (raises UnknownCurrencyError)
        get_registry().lookup(code)

        # Raise: $storage must be an IntegerStorage
        if len(params) >= 2 and not isinstance(storage, IntegerStorage):
            raise TypeError(f"Cannot parameterize `Monetary` because $storage is not IntegerStorage (got type '{type(storage).__name__}')")

        # Raise: $scale must be a non-negative int
        if len(params) == 3:
            if isinstance(scale, bool) or not isinstance(scale, int):
                raise TypeError(f"Cannot parameterize `Monetary` because $scale is not int (got type '{type(scale).__name__}')")
            if scale < 0:
                raise ValueError(f"Cannot parameterize `Monetary` because $scale ({scale}) < 0")

        key = (code, storage, scale)
        with _TYPE_CACHE_LOCK:
            specialized = _TYPE_CACHE.get(key)
            if specialized is None:
                specialized = _make_type(code, storage, scale)
                _TYPE_CACHE[key] = specialized
        return specialized

    def __new__(cls, value: RealLike | FixedDecimal) -> Monetary:
        """Create a value of this type.

        Args:
            value: `int` count of minor units, a `FixedDecimal` of the backing type, or another real number
                in major units (rounded half-to-even to the nearest minor unit).

        Raises:
            TypeError: If called on the bare `Monetary` class.
            UndefinedPrecisionError: If the type is partial and the currency has no default precision.
            TypeMismatchError: If $value is a FixedDecimal of a different storage or scale.
            FixedDecimalOverflowError: If $value does not fit into the storage kind.
        """
        # Raise: bare Monetary has no currency to tag values with
        if cls.currency is None:
            raise TypeError('Cannot instantiate bare `Monetary`; use a parameterized type like `Monetary["USD"]` or `Monetary.of`')

        if cls.scale is None:
            return fill_type(cls)(value)

        if isinstance(value, FixedDecimal):
            # Raise: wrapped value must use exactly the backing storage and scale
            if type(value) is not cls.decimal_type:
                raise TypeMismatchError(f"Cannot create {cls.__name__} because $value is {type(value).__name__}, expected {cls.decimal_type.__name__}")
            fixed = value
        elif isinstance(value, int) and not isinstance(value, bool):
            fixed = cls.decimal_type.from_raw(value)
        else:
            fixed = cls.decimal_type(value)

        return cls._wrap(fixed)

    @classmethod
    def _wrap(cls, fixed: FixedDecimal) -> Monetary:
        instance = object.__new__(cls)
        instance._value = fixed
        return instance

    # Immutable, so copies can share the instance
    def __copy__(self) -> Monetary:
        return self

    def __deepcopy__(self, memo: dict) -> Monetary:
        return self

    @classmethod
    def of(
        cls,
        currency: CurrencyLike,
        value: RealLike | None = None,
        *,
        precision: int | None = None,
        storage: IntegerStorage | None = None,
    ) -> Monetary:
        """Create a value from a currency identifier.

        Examples:
            Monetary.of("USD")                          # 1.00 USD
            Monetary.of("USD", 325)                     # 3.25 USD
            Monetary.of("USD", 10000, precision=4)      # 1.0000 USD
            Monetary.of("XAU", 15, precision=1)         # 1.5 XAU
            Monetary.of(Monetary["USD", INT32, 4], 5)   # 0.0005 USD, keeps INT32 and scale 4

        Args:
            currency: Currency identifier, Monetary type or Monetary instance. A Monetary type or instance
                also supplies the storage and scale it specifies.
            value: Minor units as `int` or major units as another real number; None gives one major unit.
            precision: Decimal places to keep; defaults to the scale of $currency, then to its registry precision.
            storage: Integer kind; defaults to the storage of $currency, then to `DEFAULT_STORAGE`.

        Raises:
            UnknownCurrencyError: If $currency is not registered.
            UndefinedPrecisionError: If $currency has no default precision and $precision is None.
        """
        code = currency_code_of(currency)

        # Monetary types and instances carry their own storage and scale
        if _is_monetary(currency):
            if storage is None:
                storage = currency.storage
            if precision is None:
                precision = currency.scale

        if precision is None:
            precision = get_registry().lookup(code).default_scale

        # Raise: some currencies (e.g., precious metals) have no sane minor unit
        if precision == -1:
            raise UndefinedPrecisionError(f"Cannot call `Monetary.of` because currency '{code}' has no default precision. Provide $precision explicitly.")

        monetary_type = Monetary[code, storage if storage is not None else DEFAULT_STORAGE, precision]
        if value is None:
            return major_unit(monetary_type)
        return monetary_type(value)

    # region Properties

    @property
    def value(self) -> FixedDecimal:
        """Get the wrapped fixed-point value."""
        return self._value

    @property
    def raw(self) -> int:
        """Get the value as a count of `10**-scale` units."""
        return self._value.raw

    def to_decimal(self) -> Decimal:
        """Exact `Decimal` in major units."""
        return self._value.to_decimal()

    # endregion

    # region Arithmetic

    def _check_same_type(self, other: Monetary, operation: str) -> None:
        if type(self) is type(other):
            return

        # Raise: currencies never mix
        if self.currency != other.currency:
            raise CurrencyMismatchError(f"Cannot call `{operation}` because currencies differ: {self.currency} and {other.currency}")

        # Raise: same currency, but storage or scale differ
        raise CurrencyMismatchError(f"Cannot call `{operation}` because monetary types differ: {type(self).__name__} and {type(other).__name__}")

    def __add__(self, other: Any) -> Monetary | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__add__")
        return self._wrap(self._value + other._value)

    def __sub__(self, other: Any) -> Monetary | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__sub__")
        return self._wrap(self._value - other._value)

    def __mul__(self, scalar: Any) -> Monetary | NotImplementedType:
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return self._wrap(self._value * scalar)

    def __rmul__(self, scalar: Any) -> Monetary | NotImplementedType:
        return self.__mul__(scalar)

    def __truediv__(self, other: Any) -> Fraction | NotImplementedType:
        """Exact ratio of two values of the same type."""
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__truediv__")
        if other.raw == 0:
            raise ZeroDivisionError("Cannot divide by zero Monetary")
        return Fraction(self.raw, other.raw)

    def __neg__(self) -> Monetary:
        return self._wrap(-self._value)

    def __pos__(self) -> Monetary:
        return self

    def __abs__(self) -> Monetary:
        return self._wrap(abs(self._value))

    # endregion

    # region Comparison

    def __eq__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__eq__")
        return self._value == other._value

    def __lt__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__lt__")
        return self._value < other._value

    def __le__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__le__")
        return self._value <= other._value

    def __gt__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__gt__")
        return self._value > other._value

    def __ge__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, Monetary):
            return NotImplemented
        self._check_same_type(other, "__ge__")
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value.raw))

    # endregion

    def __bool__(self) -> bool:
        return bool(self._value)

    def __str__(self) -> str:
        """Return string like '3.25 USD'."""
        return f"{self._value} {self.currency}"

    def __repr__(self) -> str:
        """Return string like "Monetary['USD', INT64, 2](325)"."""
        return f"{type(self).__name__}({self.raw})"


def _is_monetary(value: Any) -> bool:
    return isinstance(value, Monetary) or (isinstance(value, type) and issubclass(value, Monetary))


def _make_type(code: str, storage: IntegerStorage | None, scale: int | None) -> type[Monetary]:
    params = [repr(code)]
    if storage is not None:
        params.append(repr(storage))
    if scale is not None:
        params.append(str(scale))
    name = f"Monetary[{', '.join(params)}]"

    namespace = {
        "__slots__": (),
        "__qualname__": name,
        "currency": code,
        "storage": storage,
        "scale": scale,
        "decimal_type": FixedDecimal[storage, scale] if scale is not None else None,
    }
    return type(name, (Monetary,), namespace)


def fill_type(monetary_type: str | type[Monetary]) -> type[Monetary]:
    """Fill in default parameters to get a concrete type from a partially specified one.

    Missing storage becomes `DEFAULT_STORAGE` and missing scale becomes the registry precision of the
    currency. Concrete types are returned unchanged, so `fill_type(fill_type(t)) is fill_type(t)`.

    Args:
        monetary_type: Currency identifier or Monetary type.

    Raises:
        TypeError: If $monetary_type is neither an identifier nor a parameterized Monetary type.
        UnknownCurrencyError: If the currency is not registered.
        UndefinedPrecisionError: If the scale is missing and the currency has no default precision.
    """
    if isinstance(monetary_type, str):
        monetary_type = Monetary[monetary_type]

    # Raise: only parameterized Monetary types can be filled
    if not isinstance(monetary_type, type) or not issubclass(monetary_type, Monetary) or monetary_type.currency is None:
        raise TypeError(f"Cannot call `fill_type` because $monetary_type ({monetary_type!r}) is neither a currency identifier nor a parameterized Monetary type")

    if monetary_type.scale is not None:
        return monetary_type

    scale = decimals(monetary_type.currency)

    # Raise: no default precision to fill in
    if scale == -1:
        raise UndefinedPrecisionError(f"Cannot call `fill_type` because currency '{monetary_type.currency}' has no default precision. Use a type with explicit scale, e.g. Monetary['{monetary_type.currency}', INT64, 4].")

    storage = monetary_type.storage if monetary_type.storage is not None else DEFAULT_STORAGE
    return Monetary[monetary_type.currency, storage, scale]


def major_unit(currency: CurrencyLike) -> Monetary:
    """Get one major unit of a currency (raw value `10**scale`).

    Args:
        currency: Identifier (registry precision, default storage), Monetary type (filled if partial) or
            Monetary instance (same type as the instance).

    Raises:
        UndefinedPrecisionError: If the precision must come from the registry and is undefined.
        FixedDecimalOverflowError: If `10**scale` does not fit into the storage kind.
    """
    monetary_type = type(currency) if isinstance(currency, Monetary) else fill_type(currency)
    return monetary_type(monetary_type.decimal_type.from_raw(10**monetary_type.scale))


def currency(value: Monetary | type[Monetary]) -> str:
    """Get the currency identifier of a Monetary value or type (e.g., `currency(Monetary.of("USD", 80))` -> "USD").

    The identifier is lowercase for custom (non-ISO) currencies. Prefer `iso4217alpha` when a string for
    display is wanted.
    """
    # Raise: only Monetary values and parameterized types carry a currency
    if not _is_monetary(value) or value.currency is None:
        raise TypeError(f"Cannot call `currency` because $value ({value!r}) is not a parameterized Monetary value or type")

    return value.currency
