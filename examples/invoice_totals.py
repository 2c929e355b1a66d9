from __future__ import annotations

import logging
from decimal import Decimal

from typed_money import (
    CurrencyMismatchError,
    INT32,
    Monetary,
    UndefinedPrecisionError,
    currency_info,
    decimals,
    long_symbol,
    major_unit,
)

logger = logging.getLogger(__name__)

# Partial types: storage and scale are filled from the registry on construction
USD = Monetary["USD"]
EUR = Monetary["EUR"]


def invoice_total(lines: list[tuple[Monetary, int]]) -> Monetary:
    """Sum `(unit_price, quantity)` lines; all prices must share one Monetary type."""
    total = lines[0][0] * 0
    for unit_price, quantity in lines:
        total = total + unit_price * quantity
    return total


def run() -> None:
    # Build line items: int means minor units, Decimal/str mean major units
    lines = [
        (USD(1999), 3),
        (USD(Decimal("4.50")), 2),
        (USD("0.99"), 10),
    ]
    total = invoice_total(lines)
    logger.info(f"Invoice total: {total} ({long_symbol(total)}, {currency_info(total)})")

    # Share of the first line in the total, as an exact fraction
    share = (lines[0][0] * lines[0][1]) / total
    logger.info(f"First line share: {share} (~{float(share):.2%})")

    # One major unit always has raw value 10**scale
    for code in ("JPY", "USD", "BHD"):
        unit = major_unit(code)
        logger.info(f"1 {code} = {unit.raw} minor units (scale {decimals(code)})")

    # Currencies never mix
    try:
        total + EUR(100)
    except CurrencyMismatchError as e:
        logger.info(f"Rejected: {e}")

    # Gold has no minor unit, so precision must be explicit
    try:
        Monetary.of("XAU", 1)
    except UndefinedPrecisionError as e:
        logger.info(f"Rejected: {e}")
    gold = Monetary.of("XAU", 125, precision=2, storage=INT32)
    logger.info(f"Gold holding: {gold}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run()
