import collections
from collections.abc import Mapping
from typing import Self

import pydantic
from environs import env
from loguru import logger

from coinstate.models import AmountField, FixType

DEFAULT_CURRENCIES_ORDER: list[str] = ["BTC", "BCH", "ETH"]

DEFAULT_COIN_LABELS: dict[str, str] = {
    "BTC": "Bitcoin",
    "BCH": "Bitcoin Cash",
    "ETH": "Ether",
}

DEFAULT_CURRENCY_SYMBOLS: dict[str, str] = {
    "AUD": "$",
    "BRL": "R$",
    "CAD": "$",
    "CHF": "CHF",
    "CLP": "$",
    "CNY": "¥",
    "DKK": "kr",
    "EUR": "€",
    "GBP": "£",
    "HKD": "$",
    "INR": "₹",
    "ISK": "kr",
    "JPY": "¥",
    "KRW": "₩",
    "NZD": "$",
    "PLN": "zł",
    "RUB": "₽",
    "SEK": "kr",
    "SGD": "$",
    "THB": "฿",
    "TWD": "$",
    "USD": "$",
    "BTC": "BTC",
    "BCH": "BCH",
    "ETH": "ETH",
}

DEFAULT_FIELD_ROUTING: dict[FixType, AmountField] = {
    FixType.BASE: AmountField.SOURCE_AMOUNT,
    FixType.BASE_IN_FIAT: AmountField.SOURCE_FIAT,
    FixType.COUNTER: AmountField.TARGET_AMOUNT,
    FixType.COUNTER_IN_FIAT: AmountField.TARGET_FIAT,
}


class ExchangeConfig(pydantic.BaseModel):
    """Static inputs of the exchange-form derivation.

    Examples:
        >>> cfg = ExchangeConfig.from_env(base_coin="BTC")
        >>> cfg.coin_label("BCH")
        'Bitcoin Cash'
    """

    model_config = pydantic.ConfigDict(frozen=True)

    currencies_order: list[str] = pydantic.Field(
        default_factory=lambda: list(DEFAULT_CURRENCIES_ORDER)
    )
    base_coin: str = "BTC"
    """Coin whose active-account count decides flat vs. grouped options."""
    default_source: str = "BTC"
    default_target: str = "ETH"
    default_fix: FixType = FixType.BASE_IN_FIAT
    form_name: str = "exchange"
    coin_labels: dict[str, str] = pydantic.Field(
        default_factory=lambda: dict(DEFAULT_COIN_LABELS)
    )
    currency_symbols: dict[str, str] = pydantic.Field(
        default_factory=lambda: dict(DEFAULT_CURRENCY_SYMBOLS)
    )
    field_routing: dict[FixType, AmountField] = pydantic.Field(
        default_factory=lambda: dict(DEFAULT_FIELD_ROUTING)
    )

    @pydantic.field_validator("currencies_order", mode="after")
    @classmethod
    def dedupe_order(cls, value: list[str]) -> list[str]:
        counts: Mapping[str, int] = collections.Counter(value)
        duplicates: list[str] = [coin for coin, n in counts.items() if n > 1]
        if duplicates:
            logger.warning("duplicate coins in currencies order: {}", duplicates)
        return list(dict.fromkeys(value))

    @pydantic.field_validator("field_routing", mode="after")
    @classmethod
    def check_routing(
        cls, value: dict[FixType, AmountField]
    ) -> dict[FixType, AmountField]:
        missing: set[FixType] = set(FixType) - set(value)
        if missing:
            msg: str = f"field routing is missing fix types: {sorted(missing)}"
            raise ValueError(msg)
        if len(set(value.values())) != len(value):
            msg = "field routing must map every fix type to a distinct field"
            raise ValueError(msg)
        return value

    @classmethod
    def from_env(cls, prefix: str = "COINSTATE_", **kwargs) -> Self:
        """Build a config from `<prefix>*` environment variables.

        Keyword arguments win over the environment.
        """
        with env.prefixed(prefix):
            overrides: dict[str, object] = {
                "currencies_order": env.list("CURRENCIES_ORDER", None),
                "base_coin": env.str("BASE_COIN", None),
                "default_source": env.str("DEFAULT_SOURCE", None),
                "default_target": env.str("DEFAULT_TARGET", None),
                "default_fix": env.str("DEFAULT_FIX", None),
                "form_name": env.str("FORM_NAME", None),
            }
        data: dict[str, object] = {k: v for k, v in overrides.items() if v is not None}
        data.update(kwargs)
        return cls.model_validate(data)

    def coin_label(self, coin: str) -> str:
        return self.coin_labels.get(coin, coin)

    def symbol(self, currency: str | None) -> str | None:
        if currency is None:
            return None
        return self.currency_symbols.get(currency)
