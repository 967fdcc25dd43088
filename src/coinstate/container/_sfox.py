import enum
from typing import Any, Self, override

import attrs

from coinstate import utils
from coinstate.remote import LOADING, NOT_ASKED, Failure, Remote, Success

from ._abc import Container
from ._event import Event


class SfoxEventKind(utils.CaseInsensitiveEnum):
    FETCH_PROFILE_LOADING = enum.auto()
    FETCH_PROFILE_SUCCESS = enum.auto()
    FETCH_PROFILE_FAILURE = enum.auto()
    FETCH_QUOTE_LOADING = enum.auto()
    FETCH_QUOTE_SUCCESS = enum.auto()
    FETCH_QUOTE_FAILURE = enum.auto()
    FETCH_ACCOUNTS_LOADING = enum.auto()
    FETCH_ACCOUNTS_SUCCESS = enum.auto()
    FETCH_ACCOUNTS_FAILURE = enum.auto()
    FETCH_TRADES_LOADING = enum.auto()
    FETCH_TRADES_SUCCESS = enum.auto()
    FETCH_TRADES_FAILURE = enum.auto()
    HANDLE_TRADE_LOADING = enum.auto()
    HANDLE_TRADE_SUCCESS = enum.auto()
    HANDLE_TRADE_FAILURE = enum.auto()
    SET_PROFILE_SUCCESS = enum.auto()
    SET_PROFILE_FAILURE = enum.auto()
    SET_NEXT_ADDRESS = enum.auto()


@attrs.frozen
class SfoxState(Container):
    """Locally tracked state of the SFOX broker integration."""

    quote: Remote[Any, Any] = NOT_ASKED
    trades: Remote[Any, Any] = NOT_ASKED
    profile: Remote[Any, Any] = NOT_ASKED
    accounts: Remote[Any, Any] = NOT_ASKED
    trade: Remote[Any, Any] = NOT_ASKED
    next_address: str | None = None

    @override
    def transition(self, event: Event) -> Self:
        payload: Any = event.payload
        match event.kind:
            case SfoxEventKind.FETCH_PROFILE_LOADING:
                return attrs.evolve(self, profile=LOADING)
            case (
                SfoxEventKind.FETCH_PROFILE_SUCCESS | SfoxEventKind.SET_PROFILE_SUCCESS
            ):
                return attrs.evolve(self, profile=Success(payload))
            case (
                SfoxEventKind.FETCH_PROFILE_FAILURE | SfoxEventKind.SET_PROFILE_FAILURE
            ):
                return attrs.evolve(self, profile=Failure(payload))
            case SfoxEventKind.FETCH_QUOTE_LOADING:
                return attrs.evolve(self, quote=LOADING)
            case SfoxEventKind.FETCH_QUOTE_SUCCESS:
                return attrs.evolve(self, quote=Success(payload))
            case SfoxEventKind.FETCH_QUOTE_FAILURE:
                return attrs.evolve(self, quote=Failure(payload))
            case SfoxEventKind.FETCH_ACCOUNTS_LOADING:
                return attrs.evolve(self, accounts=LOADING)
            case SfoxEventKind.FETCH_ACCOUNTS_SUCCESS:
                return attrs.evolve(self, accounts=Success(payload))
            case SfoxEventKind.FETCH_ACCOUNTS_FAILURE:
                return attrs.evolve(self, accounts=Failure(payload))
            case SfoxEventKind.FETCH_TRADES_LOADING:
                return attrs.evolve(self, trades=LOADING)
            case SfoxEventKind.FETCH_TRADES_SUCCESS:
                return attrs.evolve(self, trades=Success(payload))
            case SfoxEventKind.FETCH_TRADES_FAILURE:
                return attrs.evolve(self, trades=Failure(payload))
            case SfoxEventKind.HANDLE_TRADE_LOADING:
                return attrs.evolve(self, trade=LOADING)
            case SfoxEventKind.HANDLE_TRADE_SUCCESS:
                return attrs.evolve(self, trade=Success(payload))
            case SfoxEventKind.HANDLE_TRADE_FAILURE:
                return attrs.evolve(self, trade=Failure(payload))
            case SfoxEventKind.SET_NEXT_ADDRESS:
                return attrs.evolve(self, next_address=payload)
            case _:
                return self
