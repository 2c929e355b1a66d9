from __future__ import annotations

import threading
from decimal import Decimal, ROUND_HALF_EVEN
from fractions import Fraction
from typing import Any, ClassVar, Final
from types import NotImplementedType

from typed_money.errors import TypeMismatchError
from typed_money.fixed_point.storage import IntegerStorage
from typed_money.utils.numeric_tools import RealLike, as_fraction, exact_decimal, format_scaled

# Rounding rule used when a real number is scaled into raw units
ROUNDING: Final = ROUND_HALF_EVEN

_TYPE_CACHE: dict[tuple[IntegerStorage, int], type[FixedDecimal]] = {}
_TYPE_CACHE_LOCK = threading.Lock()


def round_half_even(value: Fraction) -> int:
    """Round an exact fraction to the nearest integer, ties to even."""
    # `round` on a Fraction implements banker's rounding exactly
    return round(value)


class FixedDecimal:
    """Exact decimal number stored as an integer count of `10**-scale` units.

    Storage kind and scale belong to the class, not to the instance. Concrete classes are created by
    parameterizing the base class, and equal parameters always give the identical class:

        Cents = FixedDecimal[INT64, 2]
        Cents.from_raw(325)     # 3.25
        Cents("3.255")          # 3.26 (half-to-even, 325.5 -> 326)

    Two values can be combined or compared only when their classes are identical (same storage and
    scale). Mixing classes raises `TypeMismatchError`.

    Attributes:
        storage (IntegerStorage): Integer kind backing $raw (class attribute).
        scale (int): Number of decimal digits after the point (class attribute).
        raw (int): Stored integer; the represented value is `raw / 10**scale`.
    """

    __slots__ = ("_raw",)

    storage: ClassVar[IntegerStorage | None] = None
    scale: ClassVar[int | None] = None

    def __class_getitem__(cls, params: tuple[IntegerStorage, int]) -> type[FixedDecimal]:
        # Raise: only the base class can be parameterized
        if cls is not FixedDecimal:
            raise TypeError(f"Cannot parameterize `{cls.__name__}` because it is already parameterized")

        # Raise: both parameters are required
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError(f"Cannot parameterize `FixedDecimal` because $params must be (storage, scale), but provided value is: {params!r}")

        storage, scale = params

        # Raise: $storage must be an IntegerStorage
        if not isinstance(storage, IntegerStorage):
            raise TypeError(f"Cannot parameterize `FixedDecimal` because $storage is not IntegerStorage (got type '{type(storage).__name__}')")

        # Raise: $scale must be a non-negative int
        if isinstance(scale, bool) or not isinstance(scale, int):
            raise TypeError(f"Cannot parameterize `FixedDecimal` because $scale is not int (got type '{type(scale).__name__}')")
        if scale < 0:
            raise ValueError(f"Cannot parameterize `FixedDecimal` because $scale ({scale}) < 0")

        key = (storage, scale)
        with _TYPE_CACHE_LOCK:
            specialized = _TYPE_CACHE.get(key)
            if specialized is None:
                name = f"FixedDecimal[{storage!r}, {scale}]"
                specialized = type(name, (FixedDecimal,), {"__slots__": (), "storage": storage, "scale": scale, "__qualname__": name})
                _TYPE_CACHE[key] = specialized
        return specialized

    def __init__(self, value: RealLike):
        """Create a value from a real number, rounding half-to-even to the nearest raw unit.

        Args:
            value: Real number as int, float, Decimal, Fraction or numeric string.

        Raises:
            TypeError: If called on the unparameterized base class or with an unsupported type.
            ValueError: If $value is NaN or infinite.
            FixedDecimalOverflowError: If the scaled value does not fit into the storage kind.
        """
        cls = type(self)
        cls._require_concrete()
        raw = round_half_even(as_fraction(value) * 10**cls.scale)
        self._raw = cls.storage.check(raw, f"{cls.__name__}.__init__")

    @classmethod
    def from_raw(cls, raw: int) -> FixedDecimal:
        """Reinterpret $raw as a count of `10**-scale` units; no scaling is applied.

        Raises:
            TypeError: If $raw is not an int.
            FixedDecimalOverflowError: If $raw does not fit into the storage kind.
        """
        cls._require_concrete()

        # Raise: only plain integers can be reinterpreted
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise TypeError(f"Cannot call `{cls.__name__}.from_raw` because $raw is not int (got type '{type(raw).__name__}')")

        instance = object.__new__(cls)
        instance._raw = cls.storage.check(raw, f"{cls.__name__}.from_raw")
        return instance

    # Immutable, so copies can share the instance
    def __copy__(self) -> FixedDecimal:
        return self

    def __deepcopy__(self, memo: dict) -> FixedDecimal:
        return self

    @classmethod
    def _require_concrete(cls) -> None:
        # Raise: the base class has no storage or scale to work with
        if cls.storage is None or cls.scale is None:
            raise TypeError("Cannot instantiate unparameterized `FixedDecimal`; use `FixedDecimal[storage, scale]`")

    # region Properties

    @property
    def raw(self) -> int:
        """Get the stored integer."""
        return self._raw

    def to_decimal(self) -> Decimal:
        """Exact `Decimal` equal to `raw / 10**scale`."""
        return exact_decimal(self._raw, self.scale)

    def to_fraction(self) -> Fraction:
        """Exact `Fraction` equal to `raw / 10**scale`."""
        return Fraction(self._raw, 10**self.scale)

    # endregion

    # region Arithmetic

    def _check_same_type(self, other: FixedDecimal, operation: str) -> None:
        # Raise: storage and scale are part of the type and must match
        if type(self) is not type(other):
            raise TypeMismatchError(f"Cannot call `{operation}` because operand types differ: {type(self).__name__} and {type(other).__name__}")

    def _with_raw(self, raw: int, operation: str) -> FixedDecimal:
        result = object.__new__(type(self))
        result._raw = self.storage.check(raw, operation)
        return result

    def __add__(self, other: Any) -> FixedDecimal | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__add__")
        return self._with_raw(self._raw + other._raw, "__add__")

    def __sub__(self, other: Any) -> FixedDecimal | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__sub__")
        return self._with_raw(self._raw - other._raw, "__sub__")

    def __mul__(self, scalar: Any) -> FixedDecimal | NotImplementedType:
        # Only integer scalars keep the result exact in the same scale
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return self._with_raw(self._raw * scalar, "__mul__")

    def __rmul__(self, scalar: Any) -> FixedDecimal | NotImplementedType:
        return self.__mul__(scalar)

    def __neg__(self) -> FixedDecimal:
        return self._with_raw(-self._raw, "__neg__")

    def __pos__(self) -> FixedDecimal:
        return self

    def __abs__(self) -> FixedDecimal:
        return self._with_raw(abs(self._raw), "__abs__")

    # endregion

    # region Comparison

    def __eq__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__eq__")
        return self._raw == other._raw

    def __lt__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__lt__")
        return self._raw < other._raw

    def __le__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__le__")
        return self._raw <= other._raw

    def __gt__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__gt__")
        return self._raw > other._raw

    def __ge__(self, other: Any) -> bool | NotImplementedType:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        self._check_same_type(other, "__ge__")
        return self._raw >= other._raw

    def __hash__(self) -> int:
        return hash((type(self), self._raw))

    # endregion

    # region Conversion

    def __bool__(self) -> bool:
        return self._raw != 0

    def __float__(self) -> float:
        # Lossy by nature; exact conversions are `to_decimal` and `to_fraction`
        return self._raw / 10**self.scale

    def __str__(self) -> str:
        return format_scaled(self._raw, self.scale)

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self}')"

    # endregion
