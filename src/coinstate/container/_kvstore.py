import enum
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class KvStoreEventKind(utils.CaseInsensitiveEnum):
    FETCH_METADATA_LOADING = enum.auto()
    FETCH_METADATA_SUCCESS = enum.auto()
    FETCH_METADATA_FAILURE = enum.auto()


@attrs.frozen
class KvStoreState(Container):
    """Account metadata (labels, archival flags) of one coin."""

    coin: str
    accounts: Remote[Any, Any] = NOT_ASKED

    @override
    def transition(self, event: Event) -> Self:
        if event.target != self.coin:
            return self
        match event.kind:
            case KvStoreEventKind.FETCH_METADATA_LOADING:
                return attrs.evolve(self, accounts=LOADING)
            case KvStoreEventKind.FETCH_METADATA_SUCCESS:
                return attrs.evolve(self, accounts=Success(event.payload))
            case KvStoreEventKind.FETCH_METADATA_FAILURE:
                return attrs.evolve(self, accounts=Failure(event.payload))
            case _:
                return self
