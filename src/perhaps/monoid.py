"""First and Last - monoids that pick a present value instead of combining.

``Maybe.append`` needs the held values to support ``+``. These wrappers
give an append for any held type: ``First`` keeps the leftmost present
value, ``Last`` the rightmost.

    >>> First(Just(1)) + First(Nothing()) + First(Just(2))
    First(maybe=Just(1))
    >>> Last(Just(1)) + Last(Nothing()) + Last(Just(2))
    Last(maybe=Just(2))
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce
from typing import Generic, TypeVar

from perhaps.kernel.maybe import NOTHING, Maybe

T = TypeVar("T")


@dataclass(frozen=True)
class First(Generic[T]):
    """Append keeps the first present value."""

    maybe: Maybe[T] = field(default=NOTHING)

    @staticmethod
    def empty() -> First[T]:
        return First()

    def append(self, other: First[T]) -> First[T]:
        return First(self.maybe.or_else(other.maybe))

    def __add__(self, other: object) -> First[T]:
        if not isinstance(other, First):
            return NotImplemented
        return self.append(other)

    @staticmethod
    def concat(values: Iterable[First[T]]) -> First[T]:
        return reduce(First.append, values, First.empty())


@dataclass(frozen=True)
class Last(Generic[T]):
    """Append keeps the last present value."""

    maybe: Maybe[T] = field(default=NOTHING)

    @staticmethod
    def empty() -> Last[T]:
        return Last()

    def append(self, other: Last[T]) -> Last[T]:
        return Last(other.maybe.or_else(self.maybe))

    def __add__(self, other: object) -> Last[T]:
        if not isinstance(other, Last):
            return NotImplemented
        return self.append(other)

    @staticmethod
    def concat(values: Iterable[Last[T]]) -> Last[T]:
        return reduce(Last.append, values, Last.empty())
