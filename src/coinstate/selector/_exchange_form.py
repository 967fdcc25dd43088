import operator
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import attrs

from coinstate.config import ExchangeConfig
from coinstate.models import AccountRecord, AmountField, Amounts, FixType, Rates
from coinstate.remote import Remote, is_success, lift_n
from coinstate.store import StateTree

from ._accounts import ACCOUNT_SELECTORS, filter_active
from ._fix import FieldRouting, FixFlags, resolve_field_routing
from ._groups import OptionGroup, generate_groups
from ._inputs import get_available_pairs, get_currency, get_form_error
from ._memo import MemoizedSelector, create_deep_equal_selector
from ._pairs import format_pair, get_from_currencies, get_to_currencies


@attrs.frozen
class ExchangeFormValues:
    source_coin: str
    target_coin: str
    fix: FixType

    @property
    def pair(self) -> str:
        return format_pair(self.source_coin, self.target_coin)


@attrs.frozen
class InitialValues:
    source: AccountRecord | None
    target: AccountRecord | None
    source_fiat: int = 0
    fix: FixType = FixType.BASE_IN_FIAT


@attrs.frozen
class ExchangeFormData:
    """Render-ready view model of the exchange form.

    Amount and rate fields stay wrapped in `Remote` so they can be shown as
    loading or failed independently of the rest of the form.
    """

    available_pairs: list[str]
    from_elements: list[OptionGroup]
    to_elements: list[OptionGroup]
    initial_values: InitialValues
    has_one_account: bool
    disabled: bool
    form_error: str | None
    currency: str
    input_field: AmountField
    input_symbol: str | None
    complementary_field: AmountField
    complementary_amount: Remote[Any, str]
    complementary_symbol: str | None
    source_amount: Remote[Any, str]
    source_fiat: Remote[Any, str]
    target_amount: Remote[Any, str]
    target_fiat: Remote[Any, str]
    source_to_target_rate: Remote[Any, str]
    source_to_fiat_rate: Remote[Any, str]
    target_to_fiat_rate: Remote[Any, str]
    source_coin: str
    target_coin: str
    source_active: bool
    target_active: bool
    coin_active: bool
    fiat_active: bool
    fix: FixType


def _coin_of(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get("coin")
    return getattr(value, "coin", None)


def make_form_values_selector(
    config: ExchangeConfig,
) -> Callable[[StateTree], ExchangeFormValues]:
    def get_form_values(state: StateTree) -> ExchangeFormValues:
        values: Mapping[str, Any] = state.form.get_values(config.form_name)
        return ExchangeFormValues(
            source_coin=_coin_of(values.get("source")) or config.default_source,
            target_coin=_coin_of(values.get("target")) or config.default_target,
            fix=FixType(values.get("fix") or config.default_fix),
        )

    return get_form_values


def make_current_pair_selectors(
    config: ExchangeConfig,
) -> tuple[
    Callable[[StateTree], Remote[Any, Any]], Callable[[StateTree], Remote[Any, Any]]
]:
    """Selectors of the amounts and rates of the pair currently in the form."""
    get_form_values = make_form_values_selector(config)

    def get_current_pair_amounts(state: StateTree) -> Remote[Any, Any]:
        return state.exchange.get_amounts(get_form_values(state).pair)

    def get_current_pair_rates(state: StateTree) -> Remote[Any, Any]:
        return state.exchange.get_rates(get_form_values(state).pair)

    return get_current_pair_amounts, get_current_pair_rates


def _field(name: AmountField | str) -> Callable[[Any], Any]:
    return operator.attrgetter(str(name))


def make_exchange_form_selector(
    config: ExchangeConfig | None = None,
) -> MemoizedSelector[StateTree, Remote[Any, ExchangeFormData]]:
    """Build the memoized selector of the exchange form view model.

    The result is `Success` once every ranked coin's accounts, the settled
    currency and the available pairs are all `Success`; otherwise it carries
    the most actionable non-success state among them.
    """
    if config is None:
        config = ExchangeConfig()
    coins: list[str] = [c for c in config.currencies_order if c in ACCOUNT_SELECTORS]
    get_form_values = make_form_values_selector(config)
    get_current_pair_amounts, get_current_pair_rates = make_current_pair_selectors(
        config
    )

    def combine(*args: Any) -> Remote[Any, ExchangeFormData]:
        accounts_r: Sequence[Remote[Any, list[AccountRecord]]] = args[: len(coins)]
        (
            currency_r,
            form_error,
            form_values,
            available_pairs_r,
            amounts_r,
            rates_r,
        ) = args[len(coins) :]
        amounts_r = amounts_r.map(Amounts.coerce)
        rates_r = rates_r.map(Rates.coerce)
        flags: FixFlags = FixFlags.of(form_values.fix)

        def transform(*values: Any) -> ExchangeFormData:
            *per_coin, currency, available_pairs = values
            active: dict[str, list[AccountRecord]] = {
                coin: filter_active(accounts)
                for coin, accounts in zip(coins, per_coin, strict=True)
            }
            base_accounts: list[AccountRecord] = active.get(config.base_coin, [])
            has_one_account: bool = len(base_accounts) == 1
            generate_active_groups = generate_groups(
                active, has_one_account, config.coin_label
            )
            from_elements: list[OptionGroup] = generate_active_groups(
                get_from_currencies(available_pairs, config.currencies_order)
            )
            to_elements: list[OptionGroup] = generate_active_groups(
                get_to_currencies(available_pairs, config.currencies_order)
            )
            initial_values = InitialValues(
                source=next(iter(active.get(config.default_source, [])), None),
                target=next(iter(active.get(config.default_target, [])), None),
                source_fiat=0,
                fix=config.default_fix,
            )
            routing: FieldRouting = resolve_field_routing(
                form_values.fix,
                form_values.source_coin,
                form_values.target_coin,
                currency,
                config.field_routing,
            )
            return ExchangeFormData(
                available_pairs=list(available_pairs),
                from_elements=from_elements,
                to_elements=to_elements,
                initial_values=initial_values,
                has_one_account=has_one_account,
                disabled=not is_success(amounts_r),
                form_error=form_error,
                currency=currency,
                input_field=routing.input_field,
                input_symbol=config.symbol(routing.input_currency),
                complementary_field=routing.complementary_field,
                complementary_amount=amounts_r.map(_field(routing.complementary_field)),
                complementary_symbol=config.symbol(routing.complementary_currency),
                source_amount=amounts_r.map(_field(AmountField.SOURCE_AMOUNT)),
                source_fiat=amounts_r.map(_field(AmountField.SOURCE_FIAT)),
                target_amount=amounts_r.map(_field(AmountField.TARGET_AMOUNT)),
                target_fiat=amounts_r.map(_field(AmountField.TARGET_FIAT)),
                source_to_target_rate=rates_r.map(_field("source_to_target_rate")),
                source_to_fiat_rate=rates_r.map(_field("source_to_fiat_rate")),
                target_to_fiat_rate=rates_r.map(_field("target_to_fiat_rate")),
                source_coin=form_values.source_coin,
                target_coin=form_values.target_coin,
                source_active=flags.source_active,
                target_active=flags.target_active,
                coin_active=flags.coin_active,
                fiat_active=flags.fiat_active,
                fix=form_values.fix,
            )

        return lift_n(transform, *accounts_r, currency_r, available_pairs_r)

    return create_deep_equal_selector(
        *(ACCOUNT_SELECTORS[coin] for coin in coins),
        get_currency,
        get_form_error,
        get_form_values,
        get_available_pairs,
        get_current_pair_amounts,
        get_current_pair_rates,
        combiner=combine,
        name="get_exchange_form_data",
    )


get_data: MemoizedSelector[StateTree, Remote[Any, ExchangeFormData]] = (
    make_exchange_form_selector()
)
