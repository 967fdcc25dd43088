import pytest

from coinstate.models import AmountField, FixType
from coinstate.selector import (
    FieldRouting,
    FixFlags,
    get_complementary_field,
    map_fix_to_field_name,
    resolve_field_routing,
)


def test_base_in_fiat_routes_to_source_fiat():
    assert resolve_field_routing(FixType.BASE_IN_FIAT, "BTC", "ETH", "USD") == (
        FieldRouting(
            input_field=AmountField.SOURCE_FIAT,
            input_currency="USD",
            complementary_field=AmountField.SOURCE_AMOUNT,
            complementary_currency="BTC",
        )
    )


@pytest.mark.parametrize(
    ("fix", "field", "currency", "complementary", "complementary_currency"),
    [
        (FixType.BASE, AmountField.SOURCE_AMOUNT, "BTC", AmountField.SOURCE_FIAT, "EUR"),
        (FixType.COUNTER, AmountField.TARGET_AMOUNT, "ETH", AmountField.TARGET_FIAT, "EUR"),
        (
            FixType.COUNTER_IN_FIAT,
            AmountField.TARGET_FIAT,
            "EUR",
            AmountField.TARGET_AMOUNT,
            "ETH",
        ),
    ],
)
def test_routing_table(fix, field, currency, complementary, complementary_currency):
    routing = resolve_field_routing(fix, "BTC", "ETH", "EUR")
    assert routing.input_field == field
    assert routing.input_currency == currency
    assert routing.complementary_field == complementary
    assert routing.complementary_currency == complementary_currency


def test_complementary_map_is_an_involution():
    for field in AmountField:
        assert get_complementary_field(get_complementary_field(field)) == field
        assert get_complementary_field(field) != field


def test_fix_accepts_lower_case_strings():
    assert map_fix_to_field_name("counter_in_fiat") == AmountField.TARGET_FIAT


def test_custom_routing_table():
    routing = {
        FixType.BASE: AmountField.SOURCE_FIAT,
        FixType.BASE_IN_FIAT: AmountField.SOURCE_AMOUNT,
        FixType.COUNTER: AmountField.TARGET_FIAT,
        FixType.COUNTER_IN_FIAT: AmountField.TARGET_AMOUNT,
    }
    assert map_fix_to_field_name(FixType.BASE, routing) == AmountField.SOURCE_FIAT


def test_fix_flags():
    assert FixFlags.of(FixType.BASE) == FixFlags(
        source_active=True, target_active=False, coin_active=True, fiat_active=False
    )
    assert FixFlags.of(FixType.COUNTER_IN_FIAT) == FixFlags(
        source_active=False, target_active=True, coin_active=False, fiat_active=True
    )
