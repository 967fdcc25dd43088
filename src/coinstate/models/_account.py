import attrs


@attrs.frozen
class AccountRecord:
    """One wallet account joined with its metadata and balance."""

    coin: str
    address: str | int
    label: str
    balance: int | None = None
    archived: bool | None = False
    """`None` when the account has no archival flag at all."""

    @property
    def active(self) -> bool:
        return self.archived is False
