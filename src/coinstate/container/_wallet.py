import enum
from collections.abc import Iterable
from typing import Any, Self, override

import attrs

from coinstate import utils

from ._abc import Container
from ._event import Event


class WalletEventKind(utils.CaseInsensitiveEnum):
    SET_HD_ACCOUNTS = enum.auto()


def _to_tuple(value: Iterable[Any] | None) -> tuple[Any, ...]:
    return tuple(value) if value is not None else ()


@attrs.frozen
class WalletState(Container):
    """The unlocked wallet. Its fields are plain values, never remote."""

    hd_accounts: tuple[Any, ...] = attrs.field(default=(), converter=_to_tuple)

    @override
    def transition(self, event: Event) -> Self:
        match event.kind:
            case WalletEventKind.SET_HD_ACCOUNTS:
                return attrs.evolve(self, hd_accounts=event.payload)
            case _:
                return self
