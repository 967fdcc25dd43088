from collections.abc import Callable, Iterable

import attrs
from loguru import logger

from coinstate.container import Event

from ._tree import StateTree

type Listener = Callable[[StateTree], None]


@attrs.define
class Store:
    """Holds the current `StateTree` and notifies listeners on change.

    Examples:
        >>> store = Store()
        >>> unsubscribe = store.subscribe(print)
        >>> store.dispatch(Event("FETCH_CURRENCY_SUCCESS", "USD"))  # doctest: +SKIP
    """

    state: StateTree = attrs.field(factory=StateTree.create)
    version: int = attrs.field(default=0, init=False)
    """Incremented once per dispatch that changed the tree."""
    _listeners: list[Listener] = attrs.field(factory=list, init=False)

    def dispatch(self, event: Event) -> StateTree:
        """Apply `event` to the current tree and return the resulting tree.

        Listener exceptions propagate to the caller.
        """
        previous: StateTree = self.state
        current: StateTree = previous.transition(event)
        if current is previous:
            logger.debug("dispatch > {} (target: {}): unchanged", event.kind, event.target)
            return current
        self.state = current
        self.version += 1
        logger.debug(
            "dispatch > {} (target: {}): version {}",
            event.kind,
            event.target,
            self.version,
        )
        for listener in list(self._listeners):
            listener(current)
        return current

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def select[R](self, selector: Callable[[StateTree], R]) -> R:
        return selector(self.state)

    def dispatch_all(self, events: Iterable[Event]) -> StateTree:
        for event in events:
            self.dispatch(event)
        return self.state
