from typing import Any

import pytest

from coinstate.container import (
    CoinDataEventKind,
    Event,
    KvStoreEventKind,
    RatesEventKind,
    SettingsEventKind,
    WalletEventKind,
)
from coinstate.store import StateTree, Store

HD_ACCOUNTS: list[dict[str, Any]] = [
    {"index": 0, "xpub": "xpub-a", "label": "My Wallet", "archived": False},
]
BTC_ADDRESSES: dict[str, Any] = {"xpub-a": {"final_balance": 1000}}
BCH_ADDRESSES: dict[str, Any] = {"xpub-a": {"final_balance": 500}}
BCH_METADATA: dict[int, dict[str, Any]] = {0: {"label": "My BCH Wallet", "archived": False}}
ETH_ADDRESSES: dict[str, Any] = {"0xabc": {"balance": 42}}
ETH_METADATA: list[dict[str, Any]] = [
    {"addr": "0xabc", "label": "My Ether Wallet", "archived": False},
]
PAIRS: list[str] = ["BTC-ETH", "BTC-BCH", "ETH-BTC"]


def wallet_events(
    hd_accounts: list[dict[str, Any]] = HD_ACCOUNTS,
    eth_metadata: list[dict[str, Any]] = ETH_METADATA,
) -> list[Event]:
    return [
        Event(WalletEventKind.SET_HD_ACCOUNTS, hd_accounts),
        Event(CoinDataEventKind.FETCH_ADDRESSES_SUCCESS, BTC_ADDRESSES, "BTC"),
        Event(CoinDataEventKind.FETCH_ADDRESSES_SUCCESS, BCH_ADDRESSES, "BCH"),
        Event(KvStoreEventKind.FETCH_METADATA_SUCCESS, BCH_METADATA, "BCH"),
        Event(CoinDataEventKind.FETCH_ADDRESSES_SUCCESS, ETH_ADDRESSES, "ETH"),
        Event(KvStoreEventKind.FETCH_METADATA_SUCCESS, eth_metadata, "ETH"),
        Event(SettingsEventKind.FETCH_CURRENCY_SUCCESS, "USD"),
        Event(RatesEventKind.FETCH_AVAILABLE_PAIRS_SUCCESS, PAIRS),
    ]


@pytest.fixture
def tree() -> StateTree:
    return StateTree.create()


@pytest.fixture
def store() -> Store:
    return Store()


@pytest.fixture
def loaded_store(store: Store) -> Store:
    store.dispatch_all(wallet_events())
    return store
