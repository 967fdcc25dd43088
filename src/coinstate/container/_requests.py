"""Request intents.

These events ask a network collaborator to start a request. No container
recognizes them; the collaborator answers later with the matching
`FETCH_*_LOADING` / `_SUCCESS` / `_FAILURE` events.
"""

import enum

from coinstate import utils

from ._event import Event


class RequestEventKind(utils.CaseInsensitiveEnum):
    GET_ADVERTS = enum.auto()
    GET_CAPTCHA = enum.auto()
    GET_PRICE_INDEX_SERIES = enum.auto()
    GET_LOGS = enum.auto()
    GET_TRANSACTIONS = enum.auto()
    GET_TRANSACTION_FIAT_AT_TIME = enum.auto()


def get_adverts(number: int) -> Event:
    return Event(RequestEventKind.GET_ADVERTS, {"number": number})


def get_captcha() -> Event:
    return Event(RequestEventKind.GET_CAPTCHA)


def get_price_index_series(coin: str, currency: str, start: int, scale: int) -> Event:
    return Event(
        RequestEventKind.GET_PRICE_INDEX_SERIES,
        {"coin": coin, "currency": currency, "start": start, "scale": scale},
    )


def get_logs() -> Event:
    return Event(RequestEventKind.GET_LOGS)


def get_transactions(address: str) -> Event:
    return Event(RequestEventKind.GET_TRANSACTIONS, {"address": address})


def get_transaction_fiat_at_time(
    coin: str, hash_: str, amount: int | str, time: int
) -> Event:
    return Event(
        RequestEventKind.GET_TRANSACTION_FIAT_AT_TIME,
        {"coin": coin, "hash": hash_, "amount": amount, "time": time},
    )
