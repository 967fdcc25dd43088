from typing import Any

import attrs


@attrs.frozen
class Event:
    """A tagged state-transition event.

    `target` scopes the event to a single container instance: the coin code
    of a per-coin store, the pair of a per-pair slot or the name of a form.
    Containers that are not addressed leave themselves unchanged.
    """

    kind: str
    payload: Any = None
    target: str | None = None
