from ._base_model import BaseModel


class HDAccount(BaseModel):
    """An HD account as stored in the unlocked wallet."""

    index: int
    xpub: str
    label: str | None = None
    archived: bool = False


class AddressInfo(BaseModel):
    """Balance summary of a BTC/BCH xpub or address."""

    final_balance: int = 0
    n_tx: int = 0
    total_received: int = 0
    total_sent: int = 0


class EthAddressInfo(BaseModel):
    balance: int = 0
    nonce: int = 0
