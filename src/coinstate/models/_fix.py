import enum

from coinstate import utils


class FixType(utils.CaseInsensitiveEnum):
    """Which of the four amount fields the user is currently editing."""

    BASE = enum.auto()
    BASE_IN_FIAT = enum.auto()
    COUNTER = enum.auto()
    COUNTER_IN_FIAT = enum.auto()


class AmountField(enum.StrEnum):
    SOURCE_AMOUNT = "source_amount"
    SOURCE_FIAT = "source_fiat"
    TARGET_AMOUNT = "target_amount"
    TARGET_FIAT = "target_fiat"
