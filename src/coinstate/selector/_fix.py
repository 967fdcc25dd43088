from collections.abc import Mapping

import attrs
from liblaf import grapes

from coinstate.config import DEFAULT_FIELD_ROUTING
from coinstate.models import AmountField, FixType


def map_fix_to_field_name(
    fix: FixType, routing: Mapping[FixType, AmountField] = DEFAULT_FIELD_ROUTING
) -> AmountField:
    return routing[FixType(fix)]


def get_complementary_field(field: AmountField) -> AmountField:
    """The same side of the exchange in the other unit (coin <-> fiat)."""
    match field:
        case AmountField.SOURCE_AMOUNT:
            return AmountField.SOURCE_FIAT
        case AmountField.SOURCE_FIAT:
            return AmountField.SOURCE_AMOUNT
        case AmountField.TARGET_AMOUNT:
            return AmountField.TARGET_FIAT
        case AmountField.TARGET_FIAT:
            return AmountField.TARGET_AMOUNT
        case v:
            raise grapes.error.MatchError(v)


def field_currencies(
    source_coin: str, target_coin: str, fiat: str
) -> dict[AmountField, str]:
    return {
        AmountField.SOURCE_AMOUNT: source_coin,
        AmountField.SOURCE_FIAT: fiat,
        AmountField.TARGET_AMOUNT: target_coin,
        AmountField.TARGET_FIAT: fiat,
    }


@attrs.frozen
class FieldRouting:
    input_field: AmountField
    input_currency: str
    complementary_field: AmountField
    complementary_currency: str


def resolve_field_routing(
    fix: FixType,
    source_coin: str,
    target_coin: str,
    fiat: str,
    routing: Mapping[FixType, AmountField] = DEFAULT_FIELD_ROUTING,
) -> FieldRouting:
    """Route `fix` to the edited field and its complementary field.

    Only the routing table, the two coins and the fiat code are consulted;
    the current amount values play no part.
    """
    input_field: AmountField = map_fix_to_field_name(fix, routing)
    complementary_field: AmountField = get_complementary_field(input_field)
    currencies: dict[AmountField, str] = field_currencies(
        source_coin, target_coin, fiat
    )
    return FieldRouting(
        input_field=input_field,
        input_currency=currencies[input_field],
        complementary_field=complementary_field,
        complementary_currency=currencies[complementary_field],
    )


@attrs.frozen
class FixFlags:
    source_active: bool
    target_active: bool
    coin_active: bool
    fiat_active: bool

    @classmethod
    def of(cls, fix: FixType) -> "FixFlags":
        fix = FixType(fix)
        return cls(
            source_active=fix in (FixType.BASE, FixType.BASE_IN_FIAT),
            target_active=fix in (FixType.COUNTER, FixType.COUNTER_IN_FIAT),
            coin_active=fix in (FixType.BASE, FixType.COUNTER),
            fiat_active=fix in (FixType.BASE_IN_FIAT, FixType.COUNTER_IN_FIAT),
        )
