import enum
from collections.abc import Mapping
from typing import Any, Self, override

import attrs

from coinstate import utils

from ._abc import Container
from ._event import Event


class FormEventKind(utils.CaseInsensitiveEnum):
    FORM_INITIALIZE = enum.auto()
    FORM_CHANGE = enum.auto()
    FORM_DESTROY = enum.auto()


@attrs.frozen
class FormState(Container):
    """Ephemeral form values, keyed by form name (`Event.target`).

    `FORM_CHANGE` merges its payload into the current values of the form;
    `FORM_INITIALIZE` replaces them.
    """

    values: Mapping[str, Mapping[str, Any]] = attrs.field(factory=dict)

    def get_values(self, form: str) -> Mapping[str, Any]:
        return self.values.get(form, {})

    @override
    def transition(self, event: Event) -> Self:
        form: str | None = event.target
        if form is None:
            return self
        match event.kind:
            case FormEventKind.FORM_INITIALIZE:
                values: dict[str, Any] = dict(event.payload or {})
            case FormEventKind.FORM_CHANGE:
                values = {**self.get_values(form), **(event.payload or {})}
            case FormEventKind.FORM_DESTROY:
                if form not in self.values:
                    return self
                return attrs.evolve(
                    self, values={k: v for k, v in self.values.items() if k != form}
                )
            case _:
                return self
        return attrs.evolve(self, values={**self.values, form: values})
