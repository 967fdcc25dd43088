import enum
from collections.abc import Mapping
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class CoinDataEventKind(utils.CaseInsensitiveEnum):
    FETCH_ADDRESSES_LOADING = enum.auto()
    FETCH_ADDRESSES_SUCCESS = enum.auto()
    FETCH_ADDRESSES_FAILURE = enum.auto()
    FETCH_FIAT_RATES_LOADING = enum.auto()
    FETCH_FIAT_RATES_SUCCESS = enum.auto()
    FETCH_FIAT_RATES_FAILURE = enum.auto()


@attrs.frozen
class CoinDataState(Container):
    """On-chain data of one coin: balances per address/xpub and fiat rates.

    Events are addressed to a coin through `Event.target`.
    """

    coin: str
    addresses: Remote[Any, Mapping[str, Any]] = NOT_ASKED
    fiat_rates: Remote[Any, Mapping[str, Any]] = NOT_ASKED

    @override
    def transition(self, event: Event) -> Self:
        if event.target != self.coin:
            return self
        payload: Any = event.payload
        match event.kind:
            case CoinDataEventKind.FETCH_ADDRESSES_LOADING:
                return attrs.evolve(self, addresses=LOADING)
            case CoinDataEventKind.FETCH_ADDRESSES_SUCCESS:
                return attrs.evolve(self, addresses=Success(payload))
            case CoinDataEventKind.FETCH_ADDRESSES_FAILURE:
                return attrs.evolve(self, addresses=Failure(payload))
            case CoinDataEventKind.FETCH_FIAT_RATES_LOADING:
                return attrs.evolve(self, fiat_rates=LOADING)
            case CoinDataEventKind.FETCH_FIAT_RATES_SUCCESS:
                return attrs.evolve(self, fiat_rates=Success(payload))
            case CoinDataEventKind.FETCH_FIAT_RATES_FAILURE:
                return attrs.evolve(self, fiat_rates=Failure(payload))
            case _:
                return self
