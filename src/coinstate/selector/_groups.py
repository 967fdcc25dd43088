from collections.abc import Callable, Mapping, Sequence

import attrs

from coinstate.models import AccountRecord


@attrs.frozen
class SelectOption:
    label: str
    value: AccountRecord


@attrs.frozen
class OptionGroup:
    label: str
    options: tuple[SelectOption, ...] = attrs.field(converter=tuple)


def generate_groups(
    accounts_by_coin: Mapping[str, Sequence[AccountRecord]],
    has_one_account: bool,  # noqa: FBT001
    coin_label: Callable[[str], str],
) -> Callable[[Sequence[str]], list[OptionGroup]]:
    """Build the option generator shared by the "from" and "to" selects.

    With `has_one_account` every account becomes a flat option labelled with
    its coin name, all in a single unlabelled group. Otherwise there is one
    group per currency whose options carry the account labels.
    """

    def generate(currencies: Sequence[str]) -> list[OptionGroup]:
        if has_one_account:
            items: list[SelectOption] = [
                SelectOption(coin_label(coin), acc)
                for coin in currencies
                for acc in accounts_by_coin.get(coin, ())
            ]
            return [OptionGroup("", items)]
        return [
            OptionGroup(
                coin_label(coin),
                [SelectOption(acc.label, acc) for acc in accounts_by_coin.get(coin, ())],
            )
            for coin in currencies
        ]

    return generate
