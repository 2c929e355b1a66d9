from __future__ import annotations

import pytest

from typed_money.currency.currency_record import CurrencyRecord, CurrencyType


def test_iso_record_properties() -> None:
    usd = CurrencyRecord("USD", 2, "US Dollar", 840, short_symbol="$", long_symbol="US$")

    assert usd.code == "USD"
    assert usd.alpha_code == "USD"
    assert usd.default_scale == 2
    assert usd.description == "US Dollar"
    assert usd.numeric_code == 840
    assert usd.short_symbol == "$"
    assert usd.long_symbol == "US$"
    assert usd.currency_type is CurrencyType.FIAT
    assert usd.is_iso
    assert usd.has_minor_unit
    assert str(usd) == "USD"
    assert repr(usd) == "CurrencyRecord('USD', 2, 'US Dollar', 840)"


def test_custom_record_is_not_iso() -> None:
    custom = CurrencyRecord("usd_custom", 2, "Custom dollar")

    assert custom.alpha_code == "usd_custom"
    assert custom.numeric_code == 0
    assert not custom.is_iso


def test_record_without_minor_unit() -> None:
    gold = CurrencyRecord("XAU", -1, "Gold (one troy ounce)", 959, currency_type=CurrencyType.COMMODITY)

    assert gold.default_scale == -1
    assert not gold.has_minor_unit


def test_records_are_value_objects() -> None:
    a = CurrencyRecord("EUR", 2, "Euro", 978)
    b = CurrencyRecord("EUR", 2, "Euro", 978)

    assert a == b
    assert hash(a) == hash(b)
    assert a != CurrencyRecord("EUR", 3, "Euro", 978)
    assert a != "EUR"


def test_records_are_read_only() -> None:
    record = CurrencyRecord("EUR", 2, "Euro", 978)
    with pytest.raises(AttributeError):
        record.default_scale = 3


@pytest.mark.parametrize(
    "code",
    ["", " USD", "US", "USDX", "Usd", "U1D", None],
)
def test_invalid_codes_are_rejected(code) -> None:
    with pytest.raises(ValueError):
        CurrencyRecord(code, 2, "Anything", 1)


@pytest.mark.parametrize("default_scale", [-2, 2.0, True, "2"])
def test_invalid_default_scale_is_rejected(default_scale) -> None:
    with pytest.raises(ValueError):
        CurrencyRecord("USD", default_scale, "US Dollar", 840)


def test_numeric_code_must_match_the_kind_of_currency() -> None:
    with pytest.raises(ValueError):
        CurrencyRecord("USD", 2, "US Dollar", 0)
    with pytest.raises(ValueError):
        CurrencyRecord("USD", 2, "US Dollar", 1000)
    with pytest.raises(ValueError):
        CurrencyRecord("usd_custom", 2, "Custom dollar", 840)


def test_description_is_required() -> None:
    with pytest.raises(ValueError):
        CurrencyRecord("USD", 2, "   ", 840)


def test_currency_type_must_be_enum() -> None:
    with pytest.raises(TypeError):
        CurrencyRecord("USD", 2, "US Dollar", 840, currency_type="FIAT")
