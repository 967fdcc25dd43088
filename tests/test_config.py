import pydantic
import pytest

from coinstate.config import DEFAULT_FIELD_ROUTING, ExchangeConfig
from coinstate.models import AmountField, FixType


def test_defaults():
    config = ExchangeConfig()
    assert config.currencies_order == ["BTC", "BCH", "ETH"]
    assert config.default_fix == FixType.BASE_IN_FIAT
    assert config.field_routing == DEFAULT_FIELD_ROUTING
    assert config.coin_label("BCH") == "Bitcoin Cash"
    assert config.coin_label("XLM") == "XLM"
    assert config.symbol("EUR") == "€"
    assert config.symbol("XYZ") is None
    assert config.symbol(None) is None


def test_duplicate_ranks_are_dropped():
    config = ExchangeConfig(currencies_order=["BTC", "ETH", "BTC"])
    assert config.currencies_order == ["BTC", "ETH"]


def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("COINSTATE_CURRENCIES_ORDER", "ETH,BTC")
    monkeypatch.setenv("COINSTATE_DEFAULT_FIX", "counter")
    monkeypatch.setenv("COINSTATE_FORM_NAME", "swap")
    config = ExchangeConfig.from_env(base_coin="ETH")
    assert config.currencies_order == ["ETH", "BTC"]
    assert config.default_fix == FixType.COUNTER
    assert config.form_name == "swap"
    assert config.base_coin == "ETH"
    assert config.default_source == "BTC"


def test_incomplete_routing_is_rejected():
    with pytest.raises(pydantic.ValidationError):
        ExchangeConfig(field_routing={FixType.BASE: AmountField.SOURCE_AMOUNT})


def test_routing_must_be_one_to_one():
    with pytest.raises(pydantic.ValidationError):
        ExchangeConfig(
            field_routing={fix: AmountField.SOURCE_AMOUNT for fix in FixType}
        )
