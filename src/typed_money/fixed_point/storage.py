from __future__ import annotations

from typing import Final

from typed_money.errors import FixedDecimalOverflowError


class IntegerStorage:
    """Integer kind backing a fixed-point value.

    Python integers are unbounded, so a fixed-width kind is emulated by range-checking every result.
    Out-of-range results raise `FixedDecimalOverflowError`; values never wrap around or get truncated.

    Attributes:
        name (str): Display name (e.g., "INT64").
        bits (int | None): Width in bits, or None for the unbounded kind.
        signed (bool): Whether negative values are representable.
    """

    __slots__ = ("_name", "_bits", "_signed", "_min_value", "_max_value")

    def __init__(self, name: str, bits: int | None, signed: bool = True):
        # Raise: $bits must be a positive width or None (unbounded)
        if bits is not None and (not isinstance(bits, int) or bits <= 0):
            raise ValueError(f"$bits must be a positive integer or None, but provided value is: {bits}")

        self._name = name
        self._bits = bits
        self._signed = signed

        if bits is None:
            self._min_value = None
            self._max_value = None
        elif signed:
            self._min_value = -(2 ** (bits - 1))
            self._max_value = 2 ** (bits - 1) - 1
        else:
            self._min_value = 0
            self._max_value = 2**bits - 1

    @property
    def name(self) -> str:
        return self._name

    @property
    def bits(self) -> int | None:
        return self._bits

    @property
    def signed(self) -> bool:
        return self._signed

    @property
    def min_value(self) -> int | None:
        """Smallest representable integer, or None when unbounded."""
        return self._min_value

    @property
    def max_value(self) -> int | None:
        """Largest representable integer, or None when unbounded."""
        return self._max_value

    @property
    def is_bounded(self) -> bool:
        return self._bits is not None

    def fits(self, raw: int) -> bool:
        """Check whether $raw is inside the range of this storage kind."""
        if self._min_value is not None and raw < self._min_value:
            return False
        if self._max_value is not None and raw > self._max_value:
            return False
        return True

    def check(self, raw: int, operation: str) -> int:
        """Return $raw unchanged if it fits, otherwise raise.

        Args:
            raw: Candidate raw integer.
            operation: Name of the operation that produced $raw, used in the error message.

        Raises:
            FixedDecimalOverflowError: If $raw is out of range.
        """
        # Raise: result must stay inside the storage range
        if not self.fits(raw):
            raise FixedDecimalOverflowError(f"Cannot call `{operation}` because result {raw} is outside the {self._name} range [{self._min_value}, {self._max_value}]")
        return raw

    def __repr__(self) -> str:
        return self._name


INT8: Final = IntegerStorage("INT8", 8)
INT16: Final = IntegerStorage("INT16", 16)
INT32: Final = IntegerStorage("INT32", 32)
INT64: Final = IntegerStorage("INT64", 64)
INT128: Final = IntegerStorage("INT128", 128)

UINT8: Final = IntegerStorage("UINT8", 8, signed=False)
UINT16: Final = IntegerStorage("UINT16", 16, signed=False)
UINT32: Final = IntegerStorage("UINT32", 32, signed=False)
UINT64: Final = IntegerStorage("UINT64", 64, signed=False)
UINT128: Final = IntegerStorage("UINT128", 128, signed=False)

BIGINT: Final = IntegerStorage("BIGINT", None)

# Standard signed integer kind used whenever storage is not specified
DEFAULT_STORAGE: Final = INT64

ALL_STORAGES: Final[tuple[IntegerStorage, ...]] = (INT8, INT16, INT32, INT64, INT128, UINT8, UINT16, UINT32, UINT64, UINT128, BIGINT)
