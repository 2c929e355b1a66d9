"""Fixed-point decimal package.

`FixedDecimal[storage, scale]` stores a decimal value as an integer count of `10**-scale` units, backed
by one of the integer storage kinds defined in `storage`.
"""

from typed_money.fixed_point.fixed_decimal import ROUNDING, FixedDecimal
from typed_money.fixed_point.storage import (
    ALL_STORAGES,
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
    IntegerStorage,
)

__all__ = [
    "ALL_STORAGES",
    "BIGINT",
    "DEFAULT_STORAGE",
    "FixedDecimal",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "IntegerStorage",
    "ROUNDING",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "UINT128",
]
