from collections.abc import Callable, Mapping, Sequence
from typing import Any

from coinstate.models import (
    AccountRecord,
    AddressInfo,
    BchAccountMetadata,
    EthAccountMetadata,
    EthAddressInfo,
    HDAccount,
)
from coinstate.remote import Remote, lift_n, sequence
from coinstate.store import StateTree

from ._inputs import get_addresses, get_hd_accounts, get_metadata
from ._memo import MemoizedSelector, create_deep_equal_selector


def _balance[T: AddressInfo | EthAddressInfo](
    model: type[T], data: Mapping[str, Any], key: str
) -> T | None:
    info: Any = data.get(key)
    if info is None:
        return None
    return model.coerce(info)


def transform_btc_accounts(
    hd_accounts: Sequence[Any], btc_data: Mapping[str, Any]
) -> list[AccountRecord]:
    records: list[AccountRecord] = []
    for raw in hd_accounts:
        acc: HDAccount = HDAccount.coerce(raw)
        info: AddressInfo | None = _balance(AddressInfo, btc_data, acc.xpub)
        records.append(
            AccountRecord(
                coin="BTC",
                address=acc.index,
                label=acc.label or acc.xpub,
                balance=info.final_balance if info is not None else None,
                archived=acc.archived,
            )
        )
    return records


def _bch_metadata_entry(
    bch_metadata: Mapping[Any, Any] | Sequence[Any], index: int
) -> Any | None:
    if isinstance(bch_metadata, Mapping):
        entry: Any = bch_metadata.get(index)
        # JSON objects carry the index as a string key
        return entry if entry is not None else bch_metadata.get(str(index))
    if 0 <= index < len(bch_metadata):
        return bch_metadata[index]
    return None


def transform_bch_accounts(
    hd_accounts: Sequence[Any],
    bch_data: Mapping[str, Any],
    bch_metadata: Mapping[Any, Any] | Sequence[Any],
) -> list[AccountRecord]:
    """Join the wallet's HD accounts with BCH balances and BCH metadata.

    Labels and archival flags live in the BCH metadata, keyed by the HD
    account index (a list is read positionally). An account without an entry
    gets `archived=None` and therefore never counts as active.
    """
    records: list[AccountRecord] = []
    for raw in hd_accounts:
        acc: HDAccount = HDAccount.coerce(raw)
        entry: Any | None = _bch_metadata_entry(bch_metadata, acc.index)
        metadata: BchAccountMetadata = (
            BchAccountMetadata.coerce(entry) if entry is not None else BchAccountMetadata()
        )
        info: AddressInfo | None = _balance(AddressInfo, bch_data, acc.xpub)
        records.append(
            AccountRecord(
                coin="BCH",
                address=acc.index,
                label=metadata.label or acc.xpub,
                balance=info.final_balance if info is not None else None,
                archived=metadata.archived,
            )
        )
    return records


def transform_eth_accounts(
    eth_data: Mapping[str, Any], eth_metadata: Sequence[Any]
) -> list[AccountRecord]:
    records: list[AccountRecord] = []
    for raw in eth_metadata:
        acc: EthAccountMetadata = EthAccountMetadata.coerce(raw)
        info: EthAddressInfo | None = _balance(EthAddressInfo, eth_data, acc.addr)
        records.append(
            AccountRecord(
                coin="ETH",
                address=acc.addr,
                label=acc.label or acc.addr,
                balance=info.balance if info is not None else None,
                archived=acc.archived,
            )
        )
    return records


def _join_btc(
    hd_accounts: Sequence[Any], btc_data: Remote[Any, Any]
) -> Remote[Any, list[AccountRecord]]:
    return lift_n(
        lambda data: transform_btc_accounts(hd_accounts, data), btc_data
    )


def _join_bch(
    hd_accounts: Sequence[Any],
    bch_data: Remote[Any, Any],
    bch_metadata: Remote[Any, Any],
) -> Remote[Any, list[AccountRecord]]:
    return lift_n(
        lambda data, metadata: transform_bch_accounts(hd_accounts, data, metadata),
        bch_data,
        bch_metadata,
    )


def _join_eth(
    eth_data: Remote[Any, Any], eth_metadata: Remote[Any, Any]
) -> Remote[Any, list[AccountRecord]]:
    return lift_n(transform_eth_accounts, eth_data, eth_metadata)


get_btc_accounts: MemoizedSelector[StateTree, Remote[Any, list[AccountRecord]]] = (
    create_deep_equal_selector(
        get_hd_accounts, get_addresses("BTC"), combiner=_join_btc, name="get_btc_accounts"
    )
)

get_bch_accounts: MemoizedSelector[StateTree, Remote[Any, list[AccountRecord]]] = (
    create_deep_equal_selector(
        get_hd_accounts,
        get_addresses("BCH"),
        get_metadata("BCH"),
        combiner=_join_bch,
        name="get_bch_accounts",
    )
)

get_eth_accounts: MemoizedSelector[StateTree, Remote[Any, list[AccountRecord]]] = (
    create_deep_equal_selector(
        get_addresses("ETH"),
        get_metadata("ETH"),
        combiner=_join_eth,
        name="get_eth_accounts",
    )
)

ACCOUNT_SELECTORS: Mapping[
    str, Callable[[StateTree], Remote[Any, list[AccountRecord]]]
] = {
    "BTC": get_btc_accounts,
    "BCH": get_bch_accounts,
    "ETH": get_eth_accounts,
}


def get_accounts(coin: str) -> Callable[[StateTree], Remote[Any, list[AccountRecord]]]:
    """Joined account selector of `coin`.

    Raises:
        KeyError: If no join is known for `coin`.
    """
    return ACCOUNT_SELECTORS[coin]


def filter_active(accounts: Sequence[AccountRecord]) -> list[AccountRecord]:
    return [acc for acc in accounts if acc.active]


def _concat_active(*per_coin: Sequence[AccountRecord]) -> list[AccountRecord]:
    return [acc for accounts in per_coin for acc in filter_active(accounts)]


def make_active_accounts_selector(
    coins: Sequence[str],
) -> MemoizedSelector[StateTree, Remote[Any, list[AccountRecord]]]:
    """Active accounts of `coins`, concatenated coin by coin in that order."""
    return create_deep_equal_selector(
        *(get_accounts(coin) for coin in coins),
        combiner=lambda *remotes: sequence(remotes).map(
            lambda lists: _concat_active(*lists)
        ),
        name="get_active_accounts",
    )


get_active_accounts: MemoizedSelector[StateTree, Remote[Any, list[AccountRecord]]] = (
    make_active_accounts_selector(("BTC", "BCH", "ETH"))
)
