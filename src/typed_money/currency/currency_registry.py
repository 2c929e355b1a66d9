from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from bidict import frozenbidict

from typed_money.currency import currency_data
from typed_money.currency.currency_record import CurrencyRecord
from typed_money.errors import RegistryFrozenError, UnknownCurrencyError

logger = logging.getLogger(__name__)


class CurrencyRegistry:
    """Immutable mapping from currency identifier to its `CurrencyRecord`.

    The full content is given at construction and frozen right away: records live in a
    `MappingProxyType` and the ISO numeric index in a `frozenbidict`. Concurrent reads need no locking.
    """

    __slots__ = ("_records", "_numeric_index")

    def __init__(self, records: Iterable[CurrencyRecord]):
        """Build the registry.

        Args:
            records: Records to register; identifiers and non-zero numeric codes must be unique.

        Raises:
            TypeError: If an item is not a CurrencyRecord.
            ValueError: If an identifier or ISO numeric code is registered twice.
        """
        by_code: dict[str, CurrencyRecord] = {}
        code_by_numeric: dict[int, str] = {}

        for record in records:
            # Raise: only CurrencyRecord instances can be registered
            if not isinstance(record, CurrencyRecord):
                raise TypeError(f"$record must be a CurrencyRecord instance, but provided value is: {record!r}")

            # Raise: identifiers are unique
            if record.code in by_code:
                raise ValueError(f"Currency with code '{record.code}' is registered more than once")

            if record.is_iso:
                # Raise: ISO numeric codes are unique
                if record.numeric_code in code_by_numeric:
                    raise ValueError(f"Numeric code {record.numeric_code} of '{record.code}' is already used by '{code_by_numeric[record.numeric_code]}'")
                code_by_numeric[record.numeric_code] = record.code

            by_code[record.code] = record

        self._records: Mapping[str, CurrencyRecord] = MappingProxyType(by_code)
        self._numeric_index: frozenbidict[int, str] = frozenbidict(code_by_numeric)

    def lookup(self, code: str) -> CurrencyRecord:
        """Get the record for $code.

        Raises:
            UnknownCurrencyError: If $code is not registered.
        """
        try:
            return self._records[code]
        except (KeyError, TypeError):
            raise UnknownCurrencyError(f"Currency with code '{code}' not found in registry") from None

    def from_numeric_code(self, numeric_code: int) -> CurrencyRecord:
        """Get the record of the ISO currency with $numeric_code (e.g., 840 -> USD).

        Raises:
            UnknownCurrencyError: If no ISO currency uses $numeric_code.
        """
        try:
            code = self._numeric_index[numeric_code]
        except (KeyError, TypeError):
            raise UnknownCurrencyError(f"Currency with numeric code {numeric_code} not found in registry") from None
        return self._records[code]

    def codes(self) -> list[str]:
        """List all registered identifiers in registration order."""
        return list(self._records)

    @property
    def records(self) -> Mapping[str, CurrencyRecord]:
        """Read-only view of all records keyed by identifier."""
        return self._records

    def __contains__(self, code: object) -> bool:
        return code in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CurrencyRecord]:
        return iter(self._records.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._records)} currencies)"


def build_builtin_records() -> list[CurrencyRecord]:
    """Create records for the compiled-in dataset."""
    records = []
    for code, default_scale, description, numeric_code, currency_type in currency_data.ISO4217 + currency_data.CUSTOM:
        records.append(
            CurrencyRecord(
                code,
                default_scale,
                description,
                numeric_code,
                short_symbol=currency_data.SHORT_SYMBOLS.get(code),
                long_symbol=currency_data.LONG_SYMBOLS.get(code),
                currency_type=currency_type,
            )
        )
    return records


class RegistryLoader:
    """Builds a `CurrencyRegistry` exactly once, on first use.

    Lifecycle: uninitialized -> initialized -> read-only forever. Custom currencies can be added only
    while uninitialized; the first `get` freezes the content.
    """

    def __init__(self, include_builtin: bool = True):
        self._include_builtin = include_builtin
        self._pending: list[CurrencyRecord] = []
        self._registry: CurrencyRegistry | None = None
        self._lock = threading.Lock()

    @property
    def is_initialized(self) -> bool:
        return self._registry is not None

    def add(self, record: CurrencyRecord) -> None:
        """Queue a custom currency for the registry.

        Raises:
            TypeError: If $record is not a CurrencyRecord.
            RegistryFrozenError: If the registry was already built.
        """
        if not isinstance(record, CurrencyRecord):
            raise TypeError(f"$record must be a CurrencyRecord instance, but provided value is: {record!r}")

        with self._lock:
            # Raise: content is frozen after the first lookup
            if self._registry is not None:
                raise RegistryFrozenError(f"Cannot call `add` because the currency registry is already initialized; currency '{record.code}' must be registered before the first lookup")
            self._pending.append(record)

        logger.info(f"Queued custom currency '{record.code}' for registration")

    def get(self) -> CurrencyRegistry:
        """Return the registry, building it on the first call."""
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                records = build_builtin_records() if self._include_builtin else []
                records.extend(self._pending)
                self._registry = CurrencyRegistry(records)
                self._pending = []
                logger.debug(f"Initialized currency registry with {len(self._registry)} currencies")
            return self._registry


_default_loader = RegistryLoader()


def get_registry() -> CurrencyRegistry:
    """Process-wide currency registry (built on first call, immutable afterwards)."""
    return _default_loader.get()


def register_custom_currency(record: CurrencyRecord) -> None:
    """Add a custom currency to the process-wide registry before its first use.

    Raises:
        RegistryFrozenError: If the registry was already initialized.
    """
    _default_loader.add(record)


def is_registry_initialized() -> bool:
    return _default_loader.is_initialized
