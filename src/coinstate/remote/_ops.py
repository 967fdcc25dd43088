from collections.abc import Callable, Iterable
from typing import Any

from liblaf import grapes

from ._remote import Failure, Loading, NotAsked, Remote, Success


def of[T](value: T) -> Success[T]:
    return Success(value)


def map_[E, T, U](remote: Remote[E, T], fn: Callable[[T], U]) -> Remote[E, U]:
    """Apply `fn` to the payload of a `Success`, pass anything else through."""
    return remote.map(fn)


def map_failure[E, F, T](remote: Remote[E, T], fn: Callable[[E], F]) -> Remote[F, T]:
    return remote.map_failure(fn)


def chain[E, T, U](
    remote: Remote[E, T], fn: Callable[[T], Remote[E, U]]
) -> Remote[E, U]:
    return remote.chain(fn)


def lift_n[R](fn: Callable[..., R], *remotes: Remote[Any, Any]) -> Remote[Any, R]:
    """Combine several remotes into one.

    Returns `Success(fn(*values))` only when every input is a `Success`.
    Otherwise the most actionable non-success input wins: the first `Failure`,
    else the first `Loading`, else the first `NotAsked` (each scanned left to
    right). `fn` is never called unless all inputs succeeded.

    Examples:
        >>> lift_n(lambda a, b: a + b, Success(1), Success(2))
        Success(value=3)
        >>> lift_n(lambda a, b: a + b, Loading(), Failure("e"))
        Failure(error='e')
    """
    first_loading: Loading | None = None
    first_not_asked: NotAsked | None = None
    values: list[Any] = []
    for remote in remotes:
        match remote:
            case Success(value=value):
                values.append(value)
            case Failure():
                return remote
            case Loading():
                if first_loading is None:
                    first_loading = remote
            case NotAsked():
                if first_not_asked is None:
                    first_not_asked = remote
            case v:
                raise grapes.error.MatchError(v)
    if first_loading is not None:
        return first_loading
    if first_not_asked is not None:
        return first_not_asked
    return Success(fn(*values))


def lift[R](fn: Callable[..., R]) -> Callable[..., Remote[Any, R]]:
    """Curried form of `lift_n`: `lift(f)(r1, r2) == lift_n(f, r1, r2)`."""

    def lifted(*remotes: Remote[Any, Any]) -> Remote[Any, R]:
        return lift_n(fn, *remotes)

    return lifted


def sequence[E, T](remotes: Iterable[Remote[E, T]]) -> Remote[E, list[T]]:
    return lift_n(lambda *values: list(values), *remotes)


def is_success(remote: Remote[Any, Any]) -> bool:
    return isinstance(remote, Success)


def is_failure(remote: Remote[Any, Any]) -> bool:
    return isinstance(remote, Failure)


def is_loading(remote: Remote[Any, Any]) -> bool:
    return isinstance(remote, Loading)


def is_not_asked(remote: Remote[Any, Any]) -> bool:
    return isinstance(remote, NotAsked)


def get_or_else[T, D](remote: Remote[Any, T], default: D) -> T | D:
    return remote.get_or_else(default)


def fold[R](
    remote: Remote[Any, Any],
    *,
    not_asked: Callable[[], R],
    loading: Callable[[], R],
    success: Callable[[Any], R],
    failure: Callable[[Any], R],
) -> R:
    return remote.fold(
        not_asked=not_asked, loading=loading, success=success, failure=failure
    )
