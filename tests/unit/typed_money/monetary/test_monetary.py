from __future__ import annotations

import copy
from concurrent.futures import ThreadPoolExecutor
from dataclasses import asdict, dataclass
from decimal import Decimal
from fractions import Fraction

import pytest

from typed_money.currency import currency_data
from typed_money.currency.lookups import decimals, iso4217alpha
from typed_money.currency.currency_record import CurrencyRecord
from typed_money.currency.currency_registry import RegistryLoader
from typed_money.errors import (
    CurrencyMismatchError,
    FixedDecimalOverflowError,
    TypeMismatchError,
    UndefinedPrecisionError,
    UnknownCurrencyError,
)
from typed_money.fixed_point.fixed_decimal import FixedDecimal
from typed_money.fixed_point.storage import INT8, INT32, INT64
from typed_money.monetary.monetary import Monetary, currency, major_unit

# region Scenarios


def test_usd_from_minor_units() -> None:
    assert decimals("USD") == 2

    price = Monetary.of("USD", 325)
    assert price.raw == 325
    assert price.to_decimal() == Decimal("3.25")
    assert str(price) == "3.25 USD"
    assert type(price) is Monetary["USD", INT64, 2]


def test_metal_without_explicit_precision_is_rejected() -> None:
    assert decimals("XAU") == -1

    with pytest.raises(UndefinedPrecisionError):
        Monetary.of("XAU", 1.0)
    with pytest.raises(UndefinedPrecisionError):
        Monetary["XAU"](1.0)

    # UndefinedPrecisionError is an argument error
    with pytest.raises(ValueError):
        Monetary.of("XAU", 1.0)


def test_metal_with_explicit_precision() -> None:
    gold = Monetary.of("XAU", 15, precision=1)
    assert str(gold) == "1.5 XAU"
    assert Monetary["XAU", INT64, 4](Decimal("0.25")).raw == 2500


def test_custom_currency_alpha_code_is_lowercase_passthrough(monkeypatch: pytest.MonkeyPatch) -> None:
    loader = RegistryLoader()
    loader.add(CurrencyRecord("usd_custom", 2, "Custom dollar"))
    monkeypatch.setattr("typed_money.currency.lookups.get_registry", loader.get)

    assert iso4217alpha("usd_custom") == "usd_custom"
    assert iso4217alpha("USD") == "USD"


def test_major_unit_of_jpy_and_usd() -> None:
    assert major_unit("JPY").raw == 1
    assert major_unit("USD").raw == 100


def test_adding_different_currencies_is_rejected_before_computation(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def spy_add(self, other):
        calls.append((self, other))
        return NotImplemented

    monkeypatch.setattr(FixedDecimal, "__add__", spy_add)

    usd = Monetary.of("USD", 100)
    eur = Monetary.of("EUR", 100)
    with pytest.raises(CurrencyMismatchError):
        usd + eur
    assert calls == []


# endregion

# region Construction


def test_int_is_minor_units_and_other_reals_are_major_units() -> None:
    usd = Monetary["USD"]

    assert usd(325).raw == 325
    assert usd(Decimal("3.25")).raw == 325
    assert usd("3.25").raw == 325
    assert usd(Fraction(13, 4)).raw == 325
    assert usd(2.675).raw == 268
    assert usd("3.245").raw == 324


def test_partial_types_are_filled_on_construction() -> None:
    assert type(Monetary["USD"](1)) is Monetary["USD", INT64, 2]
    assert type(Monetary["USD", INT32](1)) is Monetary["USD", INT32, 2]
    assert type(Monetary["JPY"](1)) is Monetary["JPY", INT64, 0]


def test_of_with_precision_and_storage() -> None:
    value = Monetary.of("USD", 10000, precision=4, storage=INT32)

    assert type(value) is Monetary["USD", INT32, 4]
    assert value.to_decimal() == Decimal("1.0000")
    assert Monetary.of("USD") == Monetary.of("USD", 100)
    assert Monetary.of(Monetary["EUR"], 5).currency == "EUR"


def test_of_keeps_storage_and_scale_of_a_monetary_witness() -> None:
    four_places = Monetary["USD", INT32, 4]

    assert type(Monetary.of(four_places, 5)) is four_places
    assert type(Monetary.of(four_places(5))) is four_places
    assert Monetary.of(four_places).raw == 10000
    assert type(Monetary.of(Monetary["USD", INT32], 5)) is Monetary["USD", INT32, 2]
    assert type(Monetary.of(four_places, 5, precision=2)) is Monetary["USD", INT32, 2]
    assert type(Monetary.of(four_places, 5, storage=INT64)) is Monetary["USD", INT64, 4]
    assert type(Monetary.of(Monetary["XAU", INT64], 15, precision=1)) is Monetary["XAU", INT64, 1]
    with pytest.raises(UndefinedPrecisionError):
        Monetary.of(Monetary["XAU", INT32], 15)


def test_construct_from_fixed_decimal() -> None:
    usd = Monetary["USD", INT64, 2]

    assert usd(FixedDecimal[INT64, 2].from_raw(325)).raw == 325
    with pytest.raises(TypeMismatchError):
        usd(FixedDecimal[INT64, 3].from_raw(325))
    with pytest.raises(TypeMismatchError):
        usd(FixedDecimal[INT32, 2].from_raw(325))


def test_construction_overflow() -> None:
    with pytest.raises(FixedDecimalOverflowError):
        Monetary["USD", INT8, 2](128)
    with pytest.raises(FixedDecimalOverflowError):
        Monetary["USD", INT8, 2]("1.28")


def test_unknown_currency_is_rejected() -> None:
    with pytest.raises(UnknownCurrencyError):
        Monetary["ZZZ"]
    with pytest.raises(UnknownCurrencyError):
        Monetary.of("ZZZ", 1)


def test_bare_monetary_cannot_be_instantiated() -> None:
    with pytest.raises(TypeError):
        Monetary(1)


@pytest.mark.parametrize(
    "params, error",
    [
        ((), TypeError),
        (840, TypeError),
        (("USD", "INT64"), TypeError),
        (("USD", INT64, 2.0), TypeError),
        (("USD", INT64, -1), ValueError),
        (("USD", INT64, 2, 3), TypeError),
    ],
)
def test_invalid_type_parameters_are_rejected(params, error) -> None:
    with pytest.raises(error):
        Monetary[params]


def test_parameterized_type_cannot_be_parameterized_again() -> None:
    with pytest.raises(TypeError):
        Monetary["USD"]["EUR"]


# endregion

# region Types


def test_parameterized_types_are_cached() -> None:
    assert Monetary["USD"] is Monetary["USD"]
    assert Monetary["USD", INT64] is Monetary["USD", INT64]
    assert Monetary["USD", INT64, 2] is Monetary["USD", INT64, 2]
    assert Monetary["USD"] is not Monetary["USD", INT64, 2]
    assert Monetary["USD", INT64, 2].decimal_type is FixedDecimal[INT64, 2]
    assert Monetary["USD"].decimal_type is None


def test_type_cache_is_consistent_under_concurrent_access() -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        types = list(pool.map(lambda _: Monetary["GBP", INT32, 3], range(64)))

    assert all(t is types[0] for t in types)


def test_type_names() -> None:
    assert Monetary["USD"].__name__ == "Monetary['USD']"
    assert Monetary["USD", INT64].__name__ == "Monetary['USD', INT64]"
    assert repr(Monetary.of("USD", 325)) == "Monetary['USD', INT64, 2](325)"


def test_currency_of_values_and_types() -> None:
    assert currency(Monetary.of("USD", 80)) == "USD"
    assert currency(Monetary["btc"]) == "btc"
    with pytest.raises(TypeError):
        currency(Monetary)
    with pytest.raises(TypeError):
        currency("USD")


# endregion

# region Arithmetic


def test_addition_keeps_the_type_and_sums_raws() -> None:
    a = Monetary.of("USD", 325)
    b = Monetary.of("USD", 175)

    total = a + b
    assert type(total) is type(a)
    assert total.raw == 500
    assert (a - b).raw == 150
    assert (b - a).raw == -150


def test_scalar_multiplication_and_sign() -> None:
    a = Monetary.of("EUR", 325)

    assert (a * 3).raw == 975
    assert (3 * a).raw == 975
    assert (-a).raw == -325
    assert abs(-a) == a
    assert +a is a
    with pytest.raises(TypeError):
        a * 1.5
    with pytest.raises(TypeError):
        a * a


def test_ratio_is_exact() -> None:
    a = Monetary.of("USD", 100)
    b = Monetary.of("USD", 300)

    assert b / a == 3
    assert a / b == Fraction(1, 3)
    with pytest.raises(ZeroDivisionError):
        a / Monetary.of("USD", 0)
    with pytest.raises(CurrencyMismatchError):
        a / Monetary.of("EUR", 100)


def test_same_currency_different_scale_or_storage_is_rejected() -> None:
    cents = Monetary.of("USD", 100)

    with pytest.raises(CurrencyMismatchError, match="monetary types differ"):
        cents + Monetary.of("USD", 100, precision=4)
    with pytest.raises(CurrencyMismatchError, match="monetary types differ"):
        cents - Monetary.of("USD", 100, storage=INT32)


def test_different_currencies_never_mix() -> None:
    usd = Monetary.of("USD", 100)
    eur = Monetary.of("EUR", 100)

    for operation in (lambda: usd - eur, lambda: usd < eur, lambda: usd == eur, lambda: usd >= eur):
        with pytest.raises(CurrencyMismatchError, match="currencies differ"):
            operation()


def test_plain_numbers_do_not_mix_with_monetary_values() -> None:
    usd = Monetary.of("USD", 100)

    with pytest.raises(TypeError):
        usd + 1
    with pytest.raises(TypeError):
        usd + FixedDecimal[INT64, 2].from_raw(1)
    assert (usd == 100) is False


def test_arithmetic_overflow_is_explicit() -> None:
    small = Monetary["USD", INT8, 2]
    with pytest.raises(FixedDecimalOverflowError):
        small(100) + small(100)


# endregion

# region Comparison


def test_comparison_and_hashing() -> None:
    low = Monetary.of("USD", 100)
    high = Monetary.of("USD", 250)

    assert low < high
    assert low <= high
    assert high > low
    assert high >= low
    assert low == Monetary["USD"]("1.00")
    assert low != high
    assert len({low, Monetary.of("USD", 100), high}) == 2
    assert max([low, high]) is high


def test_truthiness_and_read_only_values() -> None:
    assert not Monetary.of("USD", 0)
    assert Monetary.of("USD", 1)

    value = Monetary.of("USD", 1)
    with pytest.raises(AttributeError):
        value.raw = 2
    with pytest.raises(AttributeError):
        value.note = "x"


# endregion

# region Major unit


@pytest.mark.parametrize("code", [row[0] for row in currency_data.ISO4217 + currency_data.CUSTOM if row[1] >= 0])
def test_major_unit_raw_is_ten_to_the_scale(code: str) -> None:
    unit = major_unit(code)
    assert unit.raw == 10 ** decimals(code)
    assert unit.to_decimal() == 1


def test_major_unit_follows_the_given_type() -> None:
    four_places = Monetary.of("USD", 5, precision=4)

    assert major_unit(four_places).raw == 10000
    assert type(major_unit(four_places)) is type(four_places)
    assert type(major_unit(Monetary["USD", INT32])) is Monetary["USD", INT32, 2]
    assert major_unit(Monetary["XAU", INT64, 2]).raw == 100


def test_major_unit_errors() -> None:
    with pytest.raises(UndefinedPrecisionError):
        major_unit("XAU")
    with pytest.raises(FixedDecimalOverflowError):
        major_unit(Monetary["eth", INT32])


# endregion

# region Copying


@dataclass
class InvoiceLine:
    description: str
    price: Monetary


def test_copies_share_the_immutable_value() -> None:
    price = Monetary.of("USD", 325)

    assert copy.copy(price) is price
    assert copy.deepcopy(price) is price
    assert copy.deepcopy([price, {"total": price}]) == [price, {"total": price}]


def test_dataclass_holding_monetary_can_be_converted_to_dict() -> None:
    line = InvoiceLine("Coffee", Monetary.of("USD", 325))

    assert asdict(line) == {"description": "Coffee", "price": Monetary.of("USD", 325)}


# endregion

# region Mixed collections


def test_membership_across_currencies_raises() -> None:
    usd = Monetary.of("USD", 1)

    assert usd in [Monetary.of("USD", 1)]
    with pytest.raises(CurrencyMismatchError):
        usd in [Monetary.of("EUR", 1)]


# endregion
