from ._base_model import BaseModel


class BchAccountMetadata(BaseModel):
    """Per-account BCH metadata, addressed by the HD account index."""

    label: str | None = None
    archived: bool | None = None


class EthAccountMetadata(BaseModel):
    addr: str
    label: str | None = None
    archived: bool = False
