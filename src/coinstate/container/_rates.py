import enum
from collections.abc import Sequence
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class RatesEventKind(utils.CaseInsensitiveEnum):
    FETCH_AVAILABLE_PAIRS_LOADING = enum.auto()
    FETCH_AVAILABLE_PAIRS_SUCCESS = enum.auto()
    FETCH_AVAILABLE_PAIRS_FAILURE = enum.auto()


@attrs.frozen
class RatesState(Container):
    available_pairs: Remote[Any, Sequence[str]] = NOT_ASKED
    """Tradable pairs formatted as `BASE-COUNTER`."""

    @override
    def transition(self, event: Event) -> Self:
        match event.kind:
            case RatesEventKind.FETCH_AVAILABLE_PAIRS_LOADING:
                return attrs.evolve(self, available_pairs=LOADING)
            case RatesEventKind.FETCH_AVAILABLE_PAIRS_SUCCESS:
                return attrs.evolve(self, available_pairs=Success(event.payload))
            case RatesEventKind.FETCH_AVAILABLE_PAIRS_FAILURE:
                return attrs.evolve(self, available_pairs=Failure(event.payload))
            case _:
                return self
