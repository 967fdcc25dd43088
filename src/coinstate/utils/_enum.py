import enum
from typing import Any, override


class CaseInsensitiveEnum(enum.StrEnum):
    """`StrEnum` whose auto values are the upper-cased member names.

    Lookup by value ignores case, so `FixType("base_in_fiat")` resolves to
    `FixType.BASE_IN_FIAT`.
    """

    @override
    @staticmethod
    def _generate_next_value_(
        name: str, start: int, count: int, last_values: list[str]
    ) -> str:
        return name.upper()

    @override
    @classmethod
    def _missing_(cls, value: object) -> Any:
        if isinstance(value, str):
            upper: str = value.upper()
            for member in cls:
                if member.value == upper:
                    return member
        return super()._missing_(value)
