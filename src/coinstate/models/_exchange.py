from ._base_model import BaseModel


class Amounts(BaseModel):
    """Computed amounts of one exchange pair, in coin and fiat units."""

    source_amount: str = "0"
    source_fiat: str = "0"
    target_amount: str = "0"
    target_fiat: str = "0"


class Rates(BaseModel):
    source_to_target_rate: str = "0"
    source_to_fiat_rate: str = "0"
    target_to_fiat_rate: str = "0"
