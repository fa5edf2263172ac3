"""Maybe - a value that may be absent.

A Maybe is either ``Just(value)`` or ``Nothing()``. Every operation below is
total: absence is represented as data and flows through the combinators
instead of being signalled with an exception. The only partial operation,
``force_unwrap``, lives in ``perhaps.unsafe``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from perhaps.kernel.ordering import Ordering
from perhaps.kernel.render import DEFAULT_RENDER, RenderConfig, render

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


class Maybe(ABC, Generic[T]):
    """Base of the two variants ``Just`` and ``Nothing``.

    Abstract: only the two variants can be instantiated. Operations are
    written once here and dispatch on the active variant.
    """

    # Constructors

    @staticmethod
    def pure(value: U) -> Maybe[U]:
        """Lift a plain value into a present Maybe."""
        return Just(value)

    @staticmethod
    def empty() -> Maybe[Any]:
        """The absent value; identity of ``or_else`` and ``append``."""
        return NOTHING

    @staticmethod
    def from_optional(value: U | None) -> Maybe[U]:
        """Convert ``None`` to Nothing and anything else to Just."""
        if value is None:
            return NOTHING
        return Just(value)

    # Eliminators and predicates

    def resolve(self, default: B, transform: Callable[[T], B]) -> B:
        """Return ``transform(x)`` for ``Just(x)`` and ``default`` for Nothing."""
        if isinstance(self, Just):
            return transform(self.value)
        return default

    def resolve_lazy(self, default: Callable[[], B], transform: Callable[[T], B]) -> B:
        """Like ``resolve`` but the default is only computed when absent."""
        if isinstance(self, Just):
            return transform(self.value)
        return default()

    def unwrap_or(self, default: T) -> T:
        return self.resolve(default, _identity)

    def unwrap_or_else(self, default: Callable[[], T]) -> T:
        return self.resolve_lazy(default, _identity)

    def to_optional(self) -> T | None:
        return self.resolve(None, _identity)

    @abstractmethod
    def is_present(self) -> bool:
        """Whether this is the Just variant."""

    def is_absent(self) -> bool:
        return not self.is_present()

    # Functor

    def map(self, func: Callable[[T], U]) -> Maybe[U]:
        """Apply ``func`` to the held value, keeping absence as is."""
        if isinstance(self, Just):
            return Just(func(self.value))
        return NOTHING

    def replace(self, value: U) -> Maybe[U]:
        """Swap the held value for ``value`` without looking at it."""
        return self.map(lambda _: value)

    # Apply / Applicative

    def apply(self: Maybe[Callable[[T], U]], value: Maybe[T]) -> Maybe[U]:
        """Apply a held function to a held value.

        Present only when both sides are present. The function is not
        invoked otherwise.
        """
        if isinstance(self, Just) and isinstance(value, Just):
            return Just(self.value(value.value))
        return NOTHING

    # Alt / Plus

    def or_else(self, fallback: Maybe[T]) -> Maybe[T]:
        """Return ``self`` if present, otherwise ``fallback``."""
        if isinstance(self, Just):
            return self
        return fallback

    def or_else_lazy(self, fallback: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Like ``or_else`` but the fallback is only built when absent."""
        if isinstance(self, Just):
            return self
        return fallback()

    def __or__(self, other: object) -> Maybe[T]:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.or_else(other)

    # Bind / Monad

    def bind(self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Chain a Maybe-returning function.

        Nothing short-circuits: ``func`` is never called on absence.
        """
        if isinstance(self, Just):
            return func(self.value)
        return NOTHING

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if ``predicate`` holds for it."""
        return self.bind(lambda value: self if predicate(value) else NOTHING)

    # Extend

    def extend(self, func: Callable[[Maybe[T]], U]) -> Maybe[U]:
        """Apply ``func`` to the whole wrapper, not the bare value."""
        if isinstance(self, Just):
            return Just(func(self))
        return NOTHING

    def duplicate(self) -> Maybe[Maybe[T]]:
        return self.extend(_identity)

    # Semigroup

    def append(self, other: Maybe[T]) -> Maybe[T]:
        """Combine two Maybes with the inner ``+``.

        Nothing acts as identity on either side.
        """
        if isinstance(self, Just) and isinstance(other, Just):
            return Just(self.value + other.value)  # type: ignore[operator]
        if isinstance(self, Just):
            return self
        return other

    def __add__(self, other: object) -> Maybe[T]:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.append(other)

    # Eq / Ord

    def compare(self, other: Maybe[T]) -> Ordering:
        """Three-way comparison; Nothing sorts before every Just."""
        if isinstance(self, Just) and isinstance(other, Just):
            return Ordering.of(self.value, other.value)
        if isinstance(self, Just):
            return Ordering.GT
        if isinstance(other, Just):
            return Ordering.LT
        return Ordering.EQ

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if isinstance(self, Just) and isinstance(other, Just):
            return bool(self.value == other.value)
        return self.is_absent() and other.is_absent()

    def __hash__(self) -> int:
        if isinstance(self, Just):
            return hash((Just, self.value))
        return hash(Nothing)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare(other) is Ordering.LT

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare(other) is not Ordering.GT

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare(other) is Ordering.GT

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare(other) is not Ordering.LT

    # Show

    def render(self, config: RenderConfig = DEFAULT_RENDER) -> str:
        return render(self, config)

    def __repr__(self) -> str:
        return render(self)

    def __iter__(self) -> Iterator[T]:
        if isinstance(self, Just):
            yield self.value


@dataclass(frozen=True, eq=False, repr=False)
class Just(Maybe[T]):
    """A present value."""

    value: T

    def is_present(self) -> bool:
        return True


@dataclass(frozen=True, eq=False, repr=False)
class Nothing(Maybe[T]):
    """The absent value. All instances are equal."""

    def is_present(self) -> bool:
        return False


NOTHING: Nothing[Any] = Nothing()


def _identity(value: Any) -> Any:
    return value
