"""Helpers that walk an error chain through the one-step ``unwrap()`` contract."""

from typing import Iterator, Optional, Tuple, Type, TypeVar, Union

E = TypeVar("E", bound=BaseException)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """One step down the chain; values without ``unwrap`` are terminal."""
    if err is None:
        return None
    step = getattr(err, "unwrap", None)
    if not callable(step):
        return None
    return step()


def walk(err: Optional[BaseException]) -> Iterator[BaseException]:
    """Yield *err* and every value reached by repeated ``unwrap``."""
    seen = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def find(err: Optional[BaseException], kind: Union[Type[E], Tuple[Type[E], ...]]) -> Optional[E]:
    for value in walk(err):
        if isinstance(value, kind):
            return value
    return None


def contains(err: Optional[BaseException], target: BaseException) -> bool:
    return any(value is target or value == target for value in walk(err))


def terminal(err: Optional[BaseException]) -> Optional[BaseException]:
    last = None
    for last in walk(err):
        pass
    return last


def depth(err: Optional[BaseException]) -> int:
    """Number of unwrap steps from *err* to its terminal value."""
    return max(sum(1 for _ in walk(err)) - 1, 0)
