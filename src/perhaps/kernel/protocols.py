"""Capability protocols required of the value held by a Maybe."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

A = TypeVar("A", bound="Appendable")


class Appendable(Protocol):
    """Values that can be combined with ``+``.

    Maybe.append relies on the inner ``+`` being associative for its own
    associativity; nothing checks this at runtime.
    """

    def __add__(self: A, other: A) -> A:
        ...


class Orderable(Protocol):
    """Values with a total order."""

    def __lt__(self, other: Any) -> bool:
        ...

    def __eq__(self, other: object) -> bool:
        ...


class Renderable(Protocol):
    """Values with a textual representation."""

    def __repr__(self) -> str:
        ...
