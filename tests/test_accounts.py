import pydantic
import pytest

from coinstate.container import CoinDataEventKind, Event, KvStoreEventKind
from coinstate.models import AccountRecord
from coinstate.remote import LOADING, NOT_ASKED, Failure, Success
from coinstate.selector import (
    filter_active,
    get_accounts,
    get_active_accounts,
    get_bch_accounts,
    get_btc_accounts,
    get_eth_accounts,
    make_active_accounts_selector,
    transform_bch_accounts,
    transform_btc_accounts,
    transform_eth_accounts,
)
from coinstate.store import Store

from .conftest import wallet_events


def test_btc_join(loaded_store: Store):
    assert get_btc_accounts(loaded_store.state) == Success(
        [
            AccountRecord(
                coin="BTC", address=0, label="My Wallet", balance=1000, archived=False
            )
        ]
    )


def test_bch_join_uses_bch_metadata(loaded_store: Store):
    assert get_bch_accounts(loaded_store.state) == Success(
        [AccountRecord(coin="BCH", address=0, label="My BCH Wallet", balance=500)]
    )


def test_bch_metadata_is_looked_up_by_index():
    hd_accounts = [
        {"index": 0, "xpub": "xpub-a"},
        {"index": 1, "xpub": "xpub-b"},
        {"index": 5, "xpub": "xpub-f"},
    ]
    metadata = {1: {"label": "Second", "archived": False}, 5: {"archived": True}}
    bch = transform_bch_accounts(hd_accounts, {}, metadata)
    assert [(acc.label, acc.archived) for acc in bch] == [
        ("xpub-a", None),
        ("Second", False),
        ("xpub-f", True),
    ]
    assert [acc.label for acc in filter_active(bch)] == ["Second"]


def test_bch_metadata_accepts_string_keys_and_lists():
    hd_accounts = [{"index": 0, "xpub": "xpub-a"}, {"index": 1, "xpub": "xpub-b"}]
    by_key = transform_bch_accounts(hd_accounts, {}, {"1": {"label": "Second"}})
    assert [acc.label for acc in by_key] == ["xpub-a", "Second"]
    by_position = transform_bch_accounts(
        hd_accounts, {}, [{"label": "First", "archived": False}]
    )
    assert [acc.label for acc in by_position] == ["First", "xpub-b"]
    assert [acc.active for acc in by_position] == [True, False]


def test_eth_join(loaded_store: Store):
    assert get_eth_accounts(loaded_store.state) == Success(
        [AccountRecord(coin="ETH", address="0xabc", label="My Ether Wallet", balance=42)]
    )


def test_balances_loading_with_metadata_success_is_loading(loaded_store: Store):
    loaded_store.dispatch(
        Event(CoinDataEventKind.FETCH_ADDRESSES_LOADING, target="BCH")
    )
    assert get_bch_accounts(loaded_store.state) == LOADING


def test_metadata_failure_wins_over_balances_loading(loaded_store: Store):
    loaded_store.dispatch(
        Event(CoinDataEventKind.FETCH_ADDRESSES_LOADING, target="ETH")
    )
    loaded_store.dispatch(
        Event(KvStoreEventKind.FETCH_METADATA_FAILURE, "kv down", "ETH")
    )
    assert get_eth_accounts(loaded_store.state) == Failure("kv down")


def test_nothing_fetched_is_not_asked(store: Store):
    assert get_btc_accounts(store.state) == NOT_ASKED
    assert get_active_accounts(store.state) == NOT_ASKED


def test_labels_fall_back_to_identifiers():
    btc = transform_btc_accounts([{"index": 3, "xpub": "xpub-z"}], {})
    assert btc == [AccountRecord(coin="BTC", address=3, label="xpub-z", balance=None)]
    bch = transform_bch_accounts([{"index": 1, "xpub": "xpub-y"}], {}, [])
    assert bch[0].label == "xpub-y"
    assert bch[0].archived is None
    assert not bch[0].active
    eth = transform_eth_accounts({}, [{"addr": "0xdef"}])
    assert eth[0].label == "0xdef"


def test_malformed_payload_raises():
    with pytest.raises(pydantic.ValidationError):
        transform_btc_accounts([{"label": "no index"}], {})


def test_active_accounts_concatenated_coin_by_coin(store: Store):
    hd_accounts = [
        {"index": 0, "xpub": "xpub-a", "label": "Main"},
        {"index": 1, "xpub": "xpub-b", "label": "Old", "archived": True},
    ]
    eth_metadata = [
        {"addr": "0x1", "label": "E1"},
        {"addr": "0x2", "label": "E2", "archived": True},
    ]
    store.dispatch_all(wallet_events(hd_accounts, eth_metadata))

    active = get_active_accounts(store.state).get_or_else(None)
    assert [(acc.coin, acc.label) for acc in active] == [
        ("BTC", "Main"),
        ("BCH", "My BCH Wallet"),
        ("ETH", "E1"),
    ]

    eth_first = make_active_accounts_selector(["ETH", "BTC"])
    assert [acc.coin for acc in eth_first(store.state).get_or_else(None)] == [
        "ETH",
        "BTC",
    ]


def test_get_accounts_unknown_coin():
    assert get_accounts("BTC") is get_btc_accounts
    with pytest.raises(KeyError):
        get_accounts("DOGE")


def test_unrelated_change_does_not_recompute_join(loaded_store: Store):
    select = make_active_accounts_selector(["ETH"])
    first = select(loaded_store.state)
    loaded_store.dispatch(Event("FETCH_QUOTE_LOADING"))
    assert select(loaded_store.state) is first
    assert select.recomputations == 1
