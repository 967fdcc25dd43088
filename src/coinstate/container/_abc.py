import abc
from typing import Self

import attrs

from ._event import Event


@attrs.frozen
class Container(abc.ABC):
    """A bundle of remote and plain fields advanced by `transition`.

    Implementations must be pure and total: events they do not recognize
    return `self` unchanged, so events can be broadcast to every container.
    """

    @abc.abstractmethod
    def transition(self, event: Event) -> Self:
        raise NotImplementedError
