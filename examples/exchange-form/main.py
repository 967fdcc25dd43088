import pydantic
from environs import env
from loguru import logger

import coinstate
from coinstate.container import (
    CoinDataEventKind,
    Event,
    ExchangeEventKind,
    FormEventKind,
    KvStoreEventKind,
    RatesEventKind,
    SettingsEventKind,
    WalletEventKind,
)


class Config(pydantic.BaseModel):
    currency: str = "USD"
    pairs: list[str] = ["BTC-ETH", "BTC-BCH", "ETH-BTC", "BCH-BTC"]


def render(data: coinstate.Remote) -> str:
    return data.fold(
        not_asked=lambda: "not asked",
        loading=lambda: "loading...",
        failure=lambda error: f"error: {error}",
        success=lambda form: (
            f"{form.source_coin} -> {form.target_coin}"
            f" | input {form.input_field} ({form.input_symbol})"
            f" | rate {form.source_to_target_rate.get_or_else('...')}"
            f" | disabled: {form.disabled}"
        ),
    )


def main(cfg: Config) -> None:
    exchange_config = coinstate.ExchangeConfig.from_env()
    get_data = coinstate.make_exchange_form_selector(exchange_config)
    store = coinstate.Store()
    store.subscribe(lambda state: logger.info(render(get_data(state))))

    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_LOADING))
    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_SUCCESS, cfg.currency))
    store.dispatch(
        Event(
            WalletEventKind.SET_HD_ACCOUNTS,
            [{"index": 0, "xpub": "xpub6CUGRU", "label": "My Bitcoin Wallet"}],
        )
    )
    for coin in ("BTC", "BCH"):
        store.dispatch(
            Event(
                CoinDataEventKind.FETCH_ADDRESSES_SUCCESS,
                {"xpub6CUGRU": {"finalBalance": 150_000}},
                coin,
            )
        )
    store.dispatch(
        Event(
            KvStoreEventKind.FETCH_METADATA_SUCCESS,
            {0: {"label": "My Bitcoin Cash Wallet", "archived": False}},
            "BCH",
        )
    )
    store.dispatch(
        Event(CoinDataEventKind.FETCH_ADDRESSES_SUCCESS, {"0x5b2d": {"balance": 10**18}}, "ETH")
    )
    store.dispatch(
        Event(
            KvStoreEventKind.FETCH_METADATA_SUCCESS,
            [{"addr": "0x5b2d", "label": "My Ether Wallet"}],
            "ETH",
        )
    )
    store.dispatch(Event(RatesEventKind.FETCH_AVAILABLE_PAIRS_SUCCESS, cfg.pairs))
    store.dispatch(
        Event(
            ExchangeEventKind.FETCH_PAIR_AMOUNTS_SUCCESS,
            {
                "sourceAmount": "0.0015",
                "sourceFiat": "10",
                "targetAmount": "0.05",
                "targetFiat": "9.9",
            },
            "BTC-ETH",
        )
    )
    store.dispatch(
        Event(
            ExchangeEventKind.FETCH_PAIR_RATES_SUCCESS,
            {
                "sourceToTargetRate": "33.3",
                "sourceToFiatRate": "6600",
                "targetToFiatRate": "198",
            },
            "BTC-ETH",
        )
    )
    store.dispatch(
        Event(FormEventKind.FORM_CHANGE, {"fix": "COUNTER"}, exchange_config.form_name)
    )


if __name__ == "__main__":
    env.read_env()
    config = Config()
    main(config)
