import enum
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class SettingsEventKind(utils.CaseInsensitiveEnum):
    FETCH_CURRENCY_LOADING = enum.auto()
    FETCH_CURRENCY_SUCCESS = enum.auto()
    FETCH_CURRENCY_FAILURE = enum.auto()


@attrs.frozen
class SettingsState(Container):
    currency: Remote[Any, str] = NOT_ASKED
    """The user's settled fiat currency code, e.g. `USD`."""

    @override
    def transition(self, event: Event) -> Self:
        match event.kind:
            case SettingsEventKind.FETCH_CURRENCY_LOADING:
                return attrs.evolve(self, currency=LOADING)
            case SettingsEventKind.FETCH_CURRENCY_SUCCESS:
                return attrs.evolve(self, currency=Success(event.payload))
            case SettingsEventKind.FETCH_CURRENCY_FAILURE:
                return attrs.evolve(self, currency=Failure(event.payload))
            case _:
                return self
