import enum
from collections.abc import Iterable, Sequence

from liblaf import grapes

PAIR_SEPARATOR: str = "-"


class PairSide(enum.StrEnum):
    SOURCE = enum.auto()
    TARGET = enum.auto()


def format_pair(source: str, target: str) -> str:
    return f"{source}{PAIR_SEPARATOR}{target}"


def split_pair(pair: str) -> tuple[str, str]:
    source, _, target = pair.partition(PAIR_SEPARATOR)
    return source, target


def _pick(pair: str, side: PairSide) -> str:
    source, target = split_pair(pair)
    match side:
        case PairSide.SOURCE:
            return source
        case PairSide.TARGET:
            return target
        case v:
            raise grapes.error.MatchError(v)


def get_available_currencies(
    pairs: Iterable[str], side: PairSide, order: Sequence[str]
) -> list[str]:
    """Currencies on one side of `pairs`, deduplicated and ranked by `order`.

    Currencies missing from `order` keep their encounter order after every
    ranked one.

    Examples:
        >>> get_available_currencies(["BTC-ETH", "BTC-BCH"], PairSide.TARGET, ["BTC", "BCH", "ETH"])
        ['BCH', 'ETH']
    """
    currencies: list[str] = list(dict.fromkeys(_pick(pair, side) for pair in pairs))
    unranked: int = len(order)
    return sorted(
        currencies, key=lambda c: order.index(c) if c in order else unranked
    )


def get_from_currencies(pairs: Iterable[str], order: Sequence[str]) -> list[str]:
    return get_available_currencies(pairs, PairSide.SOURCE, order)


def get_to_currencies(pairs: Iterable[str], order: Sequence[str]) -> list[str]:
    return get_available_currencies(pairs, PairSide.TARGET, order)
