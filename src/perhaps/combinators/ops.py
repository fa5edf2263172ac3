"""Free-function forms of the Maybe capabilities.

Arguments follow a function-first order (``fmap(f, value)``), so these read
naturally in pipelines and with ``functools.partial``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import reduce
from typing import Any, TypeVar

from perhaps.kernel.maybe import NOTHING, Just, Maybe
from perhaps.kernel.ordering import Ordering
from perhaps.kernel.protocols import Appendable, Orderable, Renderable
from perhaps.kernel.render import DEFAULT_RENDER, RenderConfig

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
B = TypeVar("B")
A = TypeVar("A", bound=Appendable)
C = TypeVar("C", bound=Orderable)


def resolve(default: B, transform: Callable[[T], B], value: Maybe[T]) -> B:
    """Eliminate a Maybe: ``default`` when absent, ``transform(x)`` otherwise.

    Args:
        default: Result for Nothing.
        transform: Applied to the held value of a Just.
        value: The Maybe to eliminate.

    Returns:
        ``transform(x)`` for ``Just(x)``, ``default`` for Nothing.
    """
    return value.resolve(default, transform)


def unwrap_or(default: T, value: Maybe[T]) -> T:
    """Return the held value, or ``default`` when absent."""
    return value.unwrap_or(default)


def is_present(value: Maybe[Any]) -> bool:
    """True for Just."""
    return value.is_present()


def is_absent(value: Maybe[Any]) -> bool:
    """True for Nothing."""
    return value.is_absent()


def fmap(func: Callable[[T], U], value: Maybe[T]) -> Maybe[U]:
    """Transform the held value.

    Args:
        func: Function applied to the held value.
        value: The Maybe to transform.

    Returns:
        ``Just(func(x))`` for ``Just(x)``; Nothing stays Nothing and
        ``func`` is not called.
    """
    return value.map(func)


def apply(func: Maybe[Callable[[T], U]], value: Maybe[T]) -> Maybe[U]:
    """Apply a held function to a held value.

    Args:
        func: Maybe holding a one-argument function.
        value: Maybe holding its argument.

    Returns:
        ``Just(f(x))`` when both are present, Nothing if either is absent.
    """
    return func.apply(value)


def pure(value: T) -> Maybe[T]:
    """Lift a plain value into ``Just``."""
    return Maybe.pure(value)


def lift2(func: Callable[[T, U], R], first: Maybe[T], second: Maybe[U]) -> Maybe[R]:
    """Combine two Maybes with a binary function.

    Present only when both arguments are present.
    """
    return first.map(lambda x: lambda y: func(x, y)).apply(second)


def or_else(primary: Maybe[T], fallback: Maybe[T]) -> Maybe[T]:
    """Choose the first present value.

    Args:
        primary: Returned when present.
        fallback: Returned when ``primary`` is Nothing.

    Returns:
        ``primary`` if it is a Just, otherwise ``fallback``.
    """
    return primary.or_else(fallback)


def empty() -> Maybe[Any]:
    """Nothing; identity of ``or_else`` and ``append``."""
    return Maybe.empty()


def first_present(*values: Maybe[T]) -> Maybe[T]:
    """Return the leftmost present value, or Nothing if there is none."""
    return reduce(or_else, values, empty())


def bind(value: Maybe[T], func: Callable[[T], Maybe[U]]) -> Maybe[U]:
    """Chain a Maybe-returning function.

    Args:
        value: The Maybe to chain from.
        func: Called with the held value; returns the next Maybe.

    Returns:
        ``func(x)`` for ``Just(x)``. Nothing short-circuits without
        calling ``func``.
    """
    return value.bind(func)


def join(value: Maybe[Maybe[T]]) -> Maybe[T]:
    """Flatten one level of nesting."""
    return value.bind(lambda inner: inner)


def guard(condition: bool) -> Maybe[None]:
    """``Just(None)`` when ``condition`` holds, Nothing otherwise.

    Binding on the result discards a computation when the condition fails.
    """
    if condition:
        return Just(None)
    return NOTHING


def kleisli(
    first: Callable[[T], Maybe[U]],
    second: Callable[[U], Maybe[R]],
) -> Callable[[T], Maybe[R]]:
    """Compose two Maybe-returning functions left to right."""
    def composed(value: T) -> Maybe[R]:
        return first(value).bind(second)

    return composed


def extend(func: Callable[[Maybe[T]], U], value: Maybe[T]) -> Maybe[U]:
    """Apply a function to the whole wrapper.

    Args:
        func: Receives the Maybe itself, not the bare value.
        value: The Maybe to extend.

    Returns:
        ``Just(func(value))`` when present, Nothing otherwise.
    """
    return value.extend(func)


def append(first: Maybe[A], second: Maybe[A]) -> Maybe[A]:
    """Combine two Maybes with the held values' ``+``.

    Args:
        first: Left operand.
        second: Right operand.

    Returns:
        ``Just(x + y)`` when both are present, the present one when only one
        is, Nothing when neither is.
    """
    return first.append(second)


def concat(values: Iterable[Maybe[A]]) -> Maybe[A]:
    """Append all values together, starting from Nothing."""
    return reduce(append, values, empty())


def equals(first: Maybe[T], second: Maybe[T]) -> bool:
    """Structural equality of two Maybes."""
    return first == second


def compare(first: Maybe[C], second: Maybe[C]) -> Ordering:
    """Three-way comparison.

    Args:
        first: Left operand.
        second: Right operand.

    Returns:
        ``Ordering.LT``, ``EQ`` or ``GT``. Nothing sorts before every Just;
        two Justs compare by their held values.
    """
    return first.compare(second)


def render(value: Maybe[Renderable], config: RenderConfig = DEFAULT_RENDER) -> str:
    """Render a Maybe as text using ``config``."""
    return value.render(config)
