"""Monetary domain package.

Values tagged with their currency at the type level, with exact fixed-point arithmetic.
"""

from typed_money.monetary.monetary import Monetary, currency, fill_type, major_unit

__all__ = ["Monetary", "currency", "fill_type", "major_unit"]
