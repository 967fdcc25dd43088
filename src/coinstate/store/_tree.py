from collections.abc import Iterable, Mapping
from typing import Self

import attrs

from coinstate.container import (
    CoinDataState,
    Container,
    Event,
    ExchangeState,
    FormState,
    KvStoreState,
    RatesState,
    SettingsState,
    SfoxState,
    WalletState,
)

DEFAULT_COINS: tuple[str, ...] = ("BTC", "BCH", "ETH")


def _transition_each[C: Container](
    containers: Mapping[str, C], event: Event
) -> Mapping[str, C]:
    updated: dict[str, C] = {}
    changed: bool = False
    for key, container in containers.items():
        updated[key] = container.transition(event)
        changed |= updated[key] is not container
    return updated if changed else containers


@attrs.frozen
class StateTree:
    """Immutable snapshot of every container of the application.

    `transition` broadcasts an event to all containers and returns `self`
    when none of them changed; otherwise the new tree shares every
    untouched container with the old one.
    """

    wallet: WalletState = attrs.field(factory=WalletState)
    settings: SettingsState = attrs.field(factory=SettingsState)
    data: Mapping[str, CoinDataState] = attrs.field(factory=dict)
    kvstore: Mapping[str, KvStoreState] = attrs.field(factory=dict)
    rates: RatesState = attrs.field(factory=RatesState)
    exchange: ExchangeState = attrs.field(factory=ExchangeState)
    sfox: SfoxState = attrs.field(factory=SfoxState)
    form: FormState = attrs.field(factory=FormState)

    @classmethod
    def create(cls, coins: Iterable[str] = DEFAULT_COINS) -> Self:
        coins = tuple(coins)
        return cls(
            data={coin: CoinDataState(coin=coin) for coin in coins},
            kvstore={coin: KvStoreState(coin=coin) for coin in coins},
        )

    @property
    def coins(self) -> tuple[str, ...]:
        return tuple(self.data)

    def transition(self, event: Event) -> Self:
        changes: dict[str, object] = {}
        for field in attrs.fields(type(self)):
            current: object = getattr(self, field.name)
            if isinstance(current, Container):
                new: object = current.transition(event)
            else:
                new = _transition_each(current, event)  # pyright: ignore[reportArgumentType]
            if new is not current:
                changes[field.name] = new
        if not changes:
            return self
        return attrs.evolve(self, **changes)
