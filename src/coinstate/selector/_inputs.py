"""Plain accessors of the state tree used as selector inputs."""

from collections.abc import Callable, Sequence
from typing import Any

from coinstate.remote import NOT_ASKED, Remote
from coinstate.store import StateTree


def get_hd_accounts(state: StateTree) -> Sequence[Any]:
    return state.wallet.hd_accounts


def get_addresses(coin: str) -> Callable[[StateTree], Remote[Any, Any]]:
    def select(state: StateTree) -> Remote[Any, Any]:
        data = state.data.get(coin)
        return data.addresses if data is not None else NOT_ASKED

    select.__name__ = f"get_{coin.lower()}_addresses"
    return select


def get_metadata(coin: str) -> Callable[[StateTree], Remote[Any, Any]]:
    def select(state: StateTree) -> Remote[Any, Any]:
        kvstore = state.kvstore.get(coin)
        return kvstore.accounts if kvstore is not None else NOT_ASKED

    select.__name__ = f"get_{coin.lower()}_metadata"
    return select


def get_currency(state: StateTree) -> Remote[Any, str]:
    return state.settings.currency


def get_available_pairs(state: StateTree) -> Remote[Any, Sequence[str]]:
    return state.rates.available_pairs


def get_form_error(state: StateTree) -> str | None:
    return state.exchange.error
