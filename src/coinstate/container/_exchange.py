import enum
from collections.abc import Mapping
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class ExchangeEventKind(utils.CaseInsensitiveEnum):
    FETCH_PAIR_AMOUNTS_LOADING = enum.auto()
    FETCH_PAIR_AMOUNTS_SUCCESS = enum.auto()
    FETCH_PAIR_AMOUNTS_FAILURE = enum.auto()
    FETCH_PAIR_RATES_LOADING = enum.auto()
    FETCH_PAIR_RATES_SUCCESS = enum.auto()
    FETCH_PAIR_RATES_FAILURE = enum.auto()
    SET_FORM_ERROR = enum.auto()


def _assoc[K, V](mapping: Mapping[K, V], key: K, value: V) -> dict[K, V]:
    return {**mapping, key: value}


@attrs.frozen
class ExchangeState(Container):
    """Exchange component state: computed amounts and rates per pair.

    Amount and rate events are addressed to a pair (`BTC-ETH`) through
    `Event.target`; a pair that was never fetched reads as `NotAsked`.
    """

    amounts: Mapping[str, Remote[Any, Any]] = attrs.field(factory=dict)
    rates: Mapping[str, Remote[Any, Any]] = attrs.field(factory=dict)
    error: str | None = None

    def get_amounts(self, pair: str) -> Remote[Any, Any]:
        return self.amounts.get(pair, NOT_ASKED)

    def get_rates(self, pair: str) -> Remote[Any, Any]:
        return self.rates.get(pair, NOT_ASKED)

    @override
    def transition(self, event: Event) -> Self:
        pair: str | None = event.target
        payload: Any = event.payload
        match event.kind:
            case ExchangeEventKind.SET_FORM_ERROR:
                return attrs.evolve(self, error=payload)
            case _ if pair is None:
                return self
            case ExchangeEventKind.FETCH_PAIR_AMOUNTS_LOADING:
                return attrs.evolve(self, amounts=_assoc(self.amounts, pair, LOADING))
            case ExchangeEventKind.FETCH_PAIR_AMOUNTS_SUCCESS:
                return attrs.evolve(
                    self, amounts=_assoc(self.amounts, pair, Success(payload))
                )
            case ExchangeEventKind.FETCH_PAIR_AMOUNTS_FAILURE:
                return attrs.evolve(
                    self, amounts=_assoc(self.amounts, pair, Failure(payload))
                )
            case ExchangeEventKind.FETCH_PAIR_RATES_LOADING:
                return attrs.evolve(self, rates=_assoc(self.rates, pair, LOADING))
            case ExchangeEventKind.FETCH_PAIR_RATES_SUCCESS:
                return attrs.evolve(
                    self, rates=_assoc(self.rates, pair, Success(payload))
                )
            case ExchangeEventKind.FETCH_PAIR_RATES_FAILURE:
                return attrs.evolve(
                    self, rates=_assoc(self.rates, pair, Failure(payload))
                )
            case _:
                return self
