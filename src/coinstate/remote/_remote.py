from collections.abc import Callable
from typing import Any, Final, Self

import attrs

type Remote[E, T] = NotAsked | Loading | Success[T] | Failure[E]
"""A value that arrives asynchronously: exactly one of the four variants.

The variants share no base class. Each one implements `map`, `map_failure`,
`chain`, `get_or_else` and `fold` for its own case.
"""


@attrs.frozen(slots=True)
class NotAsked:
    """No request has been made yet."""

    def __repr__(self) -> str:
        return "NotAsked"

    def map(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def map_failure(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def chain(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def get_or_else[D](self, default: D) -> D:
        return default

    def fold[R](
        self,
        *,
        not_asked: Callable[[], R],
        loading: Callable[[], R],
        success: Callable[[Any], R],
        failure: Callable[[Any], R],
    ) -> R:
        return not_asked()

    @property
    def is_success(self) -> bool:
        return False


@attrs.frozen(slots=True)
class Loading:
    """A request is in flight."""

    def __repr__(self) -> str:
        return "Loading"

    def map(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def map_failure(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def chain(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def get_or_else[D](self, default: D) -> D:
        return default

    def fold[R](
        self,
        *,
        not_asked: Callable[[], R],
        loading: Callable[[], R],
        success: Callable[[Any], R],
        failure: Callable[[Any], R],
    ) -> R:
        return loading()

    @property
    def is_success(self) -> bool:
        return False


@attrs.frozen(slots=True)
class Success[T]:
    value: T

    def map[U](self, fn: Callable[[T], U]) -> "Success[U]":
        return Success(fn(self.value))

    def map_failure(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def chain[R](self, fn: Callable[[T], R]) -> R:
        return fn(self.value)

    def get_or_else(self, default: object) -> T:
        return self.value

    def fold[R](
        self,
        *,
        not_asked: Callable[[], R],
        loading: Callable[[], R],
        success: Callable[[T], R],
        failure: Callable[[Any], R],
    ) -> R:
        return success(self.value)

    @property
    def is_success(self) -> bool:
        return True


@attrs.frozen(slots=True)
class Failure[E]:
    error: E

    def map(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def map_failure[F](self, fn: Callable[[E], F]) -> "Failure[F]":
        return Failure(fn(self.error))

    def chain(self, fn: Callable[[Any], Any]) -> Self:
        return self

    def get_or_else[D](self, default: D) -> D:
        return default

    def fold[R](
        self,
        *,
        not_asked: Callable[[], R],
        loading: Callable[[], R],
        success: Callable[[Any], R],
        failure: Callable[[E], R],
    ) -> R:
        return failure(self.error)

    @property
    def is_success(self) -> bool:
        return False


NOT_ASKED: Final[NotAsked] = NotAsked()
LOADING: Final[Loading] = Loading()
