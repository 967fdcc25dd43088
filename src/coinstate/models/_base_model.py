from collections.abc import Mapping
from typing import Any, Self

import pydantic
import pydantic.alias_generators


class BaseModel(pydantic.BaseModel):
    """Payload model: accepts camelCase keys from the wire and snake_case in Python."""

    model_config = pydantic.ConfigDict(
        alias_generator=pydantic.alias_generators.to_camel,
        extra="allow",
        frozen=True,
        populate_by_name=True,
    )

    @classmethod
    def coerce(cls, data: Self | Mapping[str, Any]) -> Self:
        if isinstance(data, cls):
            return data
        return cls.model_validate(data)
