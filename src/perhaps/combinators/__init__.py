"""Combinators - free-function forms of the Maybe capabilities."""

from . import laws
from .ops import (
    append,
    apply,
    bind,
    compare,
    concat,
    empty,
    equals,
    extend,
    first_present,
    fmap,
    guard,
    is_absent,
    is_present,
    join,
    kleisli,
    lift2,
    or_else,
    pure,
    render,
    resolve,
    unwrap_or,
)

__all__ = [
    # Eliminators and predicates
    "resolve",
    "unwrap_or",
    "is_present",
    "is_absent",
    # Functor / Applicative
    "fmap",
    "apply",
    "pure",
    "lift2",
    # Alt / Plus
    "or_else",
    "empty",
    "first_present",
    # Monad
    "bind",
    "join",
    "guard",
    "kleisli",
    # Extend
    "extend",
    # Semigroup / Monoid
    "append",
    "concat",
    # Eq / Ord / Show
    "equals",
    "compare",
    "render",
    "laws",
]
