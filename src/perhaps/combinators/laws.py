"""Algebraic laws of the Maybe capabilities, as checkable predicates.

Laws are not enforced at runtime. Each function below evaluates both sides
of one law for concrete arguments and reports whether they agree, so test
suites can sample them over many values. A law only holds when the
user-supplied functions are pure and the held values' own ``+``/``<`` obey
their respective laws.

Functor:
    map(id, v) == v
    map(g . f, v) == map(g, map(f, v))

Applicative:
    apply(pure(id), v) == v
    apply(pure(f), pure(x)) == pure(f(x))
    apply(u, pure(y)) == apply(pure(lambda f: f(y)), u)
    apply(apply(apply(pure(compose), u), v), w) == apply(u, apply(v, w))

Alt / Plus:
    or_else(or_else(a, b), c) == or_else(a, or_else(b, c))
    or_else(empty(), v) == v == or_else(v, empty())

Monad:
    bind(pure(x), f) == f(x)
    bind(v, pure) == v
    bind(bind(v, f), g) == bind(v, lambda x: bind(f(x), g))
    bind(empty(), f) == empty()

Extend:
    extend(f, extend(g, v)) == extend(lambda w: f(extend(g, w)), v)

Semigroup / Monoid:
    append(append(a, b), c) == append(a, append(b, c))
    append(empty(), v) == v == append(v, empty())

Ord:
    compare is reflexive, antisymmetric and transitive when the held order is.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from perhaps.combinators.ops import (
    append,
    apply,
    bind,
    compare,
    empty,
    extend,
    fmap,
    or_else,
    pure,
)
from perhaps.kernel.maybe import Maybe
from perhaps.kernel.ordering import Ordering

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def _identity(value: Any) -> Any:
    return value


def _compose(g: Callable[[U], R]) -> Callable[[Callable[[T], U]], Callable[[T], R]]:
    return lambda f: lambda x: g(f(x))


def functor_identity(value: Maybe[T]) -> bool:
    return fmap(_identity, value) == value


def functor_composition(f: Callable[[T], U], g: Callable[[U], R], value: Maybe[T]) -> bool:
    return fmap(lambda x: g(f(x)), value) == fmap(g, fmap(f, value))


def applicative_identity(value: Maybe[T]) -> bool:
    return apply(pure(_identity), value) == value


def applicative_homomorphism(f: Callable[[T], U], x: T) -> bool:
    return apply(pure(f), pure(x)) == pure(f(x))


def applicative_interchange(u: Maybe[Callable[[T], U]], y: T) -> bool:
    return apply(u, pure(y)) == apply(pure(lambda f: f(y)), u)


def applicative_composition(
    u: Maybe[Callable[[U], R]],
    v: Maybe[Callable[[T], U]],
    w: Maybe[T],
) -> bool:
    left = apply(apply(apply(pure(_compose), u), v), w)
    return left == apply(u, apply(v, w))


def alt_associativity(a: Maybe[T], b: Maybe[T], c: Maybe[T]) -> bool:
    return or_else(or_else(a, b), c) == or_else(a, or_else(b, c))


def plus_identity(value: Maybe[T]) -> bool:
    return or_else(empty(), value) == value == or_else(value, empty())


def monad_left_identity(x: T, f: Callable[[T], Maybe[U]]) -> bool:
    return bind(pure(x), f) == f(x)


def monad_right_identity(value: Maybe[T]) -> bool:
    return bind(value, pure) == value


def monad_associativity(
    value: Maybe[T],
    f: Callable[[T], Maybe[U]],
    g: Callable[[U], Maybe[R]],
) -> bool:
    return bind(bind(value, f), g) == bind(value, lambda x: bind(f(x), g))


def monad_zero_annihilates(f: Callable[[Any], Maybe[Any]]) -> bool:
    return bind(empty(), f) == empty()


def extend_associativity(
    f: Callable[[Maybe[U]], R],
    g: Callable[[Maybe[T]], U],
    value: Maybe[T],
) -> bool:
    return extend(f, extend(g, value)) == extend(lambda w: f(extend(g, w)), value)


def semigroup_associativity(a: Maybe[T], b: Maybe[T], c: Maybe[T]) -> bool:
    return append(append(a, b), c) == append(a, append(b, c))


def monoid_identity(value: Maybe[T]) -> bool:
    return append(empty(), value) == value == append(value, empty())


def ord_reflexive(value: Maybe[T]) -> bool:
    return compare(value, value) is Ordering.EQ


def ord_antisymmetric(a: Maybe[T], b: Maybe[T]) -> bool:
    if a <= b and b <= a:
        return a == b
    return True


def ord_transitive(a: Maybe[T], b: Maybe[T], c: Maybe[T]) -> bool:
    if a <= b and b <= c:
        return a <= c
    return True


def ord_consistent_with_eq(a: Maybe[T], b: Maybe[T]) -> bool:
    return (compare(a, b) is Ordering.EQ) == (a == b)


def ord_inverse(a: Maybe[T], b: Maybe[T]) -> bool:
    return compare(a, b) is compare(b, a).invert()
