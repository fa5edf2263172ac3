"""Kernel layer - the Maybe type and its capabilities, dependency-free."""

from perhaps.kernel.maybe import NOTHING, Just, Maybe, Nothing
from perhaps.kernel.ordering import Ordering
from perhaps.kernel.protocols import Appendable, Orderable, Renderable
from perhaps.kernel.render import DEFAULT_RENDER, RenderConfig, render

__all__ = [
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    "Ordering",
    # Rendering
    "RenderConfig",
    "DEFAULT_RENDER",
    "render",
    # Capabilities required of the held value
    "Appendable",
    "Orderable",
    "Renderable",
]
