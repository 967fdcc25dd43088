from coinstate.container import (
    CoinDataEventKind,
    Event,
    SettingsEventKind,
    get_captcha,
)
from coinstate.remote import LOADING, NOT_ASKED, Success
from coinstate.store import StateTree, Store


def test_create_builds_one_container_per_coin(tree: StateTree):
    assert tree.coins == ("BTC", "BCH", "ETH")
    assert tree.data["ETH"].coin == "ETH"
    assert tree.kvstore["BCH"].accounts == NOT_ASKED
    assert tree.settings.currency == NOT_ASKED


def test_unrecognized_event_returns_same_tree(tree: StateTree):
    assert tree.transition(get_captcha()) is tree
    assert tree.transition(Event("FETCH_ADDRESSES_LOADING", target="DOGE")) is tree


def test_transition_shares_untouched_containers(tree: StateTree):
    updated = tree.transition(
        Event(CoinDataEventKind.FETCH_ADDRESSES_LOADING, target="BCH")
    )
    assert updated is not tree
    assert updated.data["BCH"].addresses == LOADING
    assert updated.data["BTC"] is tree.data["BTC"]
    assert updated.data["ETH"] is tree.data["ETH"]
    assert updated.kvstore is tree.kvstore
    assert updated.settings is tree.settings
    assert updated.form is tree.form
    assert tree.data["BCH"].addresses == NOT_ASKED


def test_dispatch_notifies_only_on_change(store: Store):
    seen: list[StateTree] = []
    store.subscribe(seen.append)

    store.dispatch(get_captcha())
    assert seen == []
    assert store.version == 0

    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_LOADING))
    assert len(seen) == 1
    assert seen[0] is store.state
    assert store.version == 1


def test_unsubscribe_stops_notifications(store: Store):
    seen: list[StateTree] = []
    unsubscribe = store.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_SUCCESS, "USD"))
    assert seen == []


def test_select_reads_current_snapshot(store: Store):
    store.dispatch_all(
        [
            Event(SettingsEventKind.FETCH_CURRENCY_LOADING),
            Event(SettingsEventKind.FETCH_CURRENCY_SUCCESS, "GBP"),
        ]
    )
    assert store.select(lambda s: s.settings.currency) == Success("GBP")


def test_retry_re_enters_loading(store: Store):
    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_FAILURE, "offline"))
    store.dispatch(Event(SettingsEventKind.FETCH_CURRENCY_LOADING))
    assert store.state.settings.currency == LOADING
