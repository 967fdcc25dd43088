import operator
from collections.abc import Callable, Sequence
from typing import Any

import attrs
from loguru import logger

type Equality = Callable[[Any, Any], bool]

_UNSET: Any = object()


def _all_equal(equal: Equality, left: Sequence[Any], right: Sequence[Any]) -> bool:
    return len(left) == len(right) and all(
        equal(a, b) for a, b in zip(left, right, strict=True)
    )


@attrs.define
class MemoizedSelector[S, R]:
    """A selector that recomputes only when its inputs change.

    Each call first evaluates every input selector on the state. If the
    resulting values equal those of the previous call under `equal`, the
    cached result is returned and `combiner` is skipped. Calling twice with
    the very same state object skips the input selectors as well.
    """

    inputs: tuple[Callable[[S], Any], ...] = attrs.field(converter=tuple)
    combiner: Callable[..., R] = attrs.field()
    equal: Equality = attrs.field(default=operator.is_)
    name: str | None = attrs.field(default=None)
    recomputations: int = attrs.field(default=0, init=False)
    _last_state: Any = attrs.field(default=_UNSET, init=False)
    _last_args: tuple[Any, ...] | None = attrs.field(default=None, init=False)
    _last_result: Any = attrs.field(default=_UNSET, init=False)

    def __attrs_post_init__(self) -> None:
        if self.name is None:
            self.name = getattr(self.combiner, "__name__", "selector")

    def __call__(self, state: S) -> R:
        if state is self._last_state and self._last_result is not _UNSET:
            return self._last_result
        args: tuple[Any, ...] = tuple(select(state) for select in self.inputs)
        if self._last_args is not None and _all_equal(self.equal, args, self._last_args):
            self._last_state = state
            return self._last_result
        self.recomputations += 1
        logger.debug("recompute > {} (#{})", self.name, self.recomputations)
        # the cache only moves to `state` once the combiner has returned
        result: R = self.combiner(*args)
        self._last_state = state
        self._last_args = args
        self._last_result = result
        return result

    def reset(self) -> None:
        self.recomputations = 0
        self._last_state = _UNSET
        self._last_args = None
        self._last_result = _UNSET


def create_selector[S, R](
    *inputs: Callable[[S], Any], combiner: Callable[..., R], name: str | None = None
) -> MemoizedSelector[S, R]:
    """Memoize on reference equality of the input values."""
    return MemoizedSelector(inputs, combiner, equal=operator.is_, name=name)


def create_deep_equal_selector[S, R](
    *inputs: Callable[[S], Any], combiner: Callable[..., R], name: str | None = None
) -> MemoizedSelector[S, R]:
    """Memoize on value equality (`==`) of the input values."""
    return MemoizedSelector(inputs, combiner, equal=operator.eq, name=name)
