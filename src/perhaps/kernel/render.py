"""Textual rendering of Maybe values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from perhaps.kernel.maybe import Maybe


@dataclass(frozen=True)
class RenderConfig:
    """Rendering options.

    Attributes:
        present_label: Label written before the inner value of a Just.
        absent_label: Text used for Nothing.
        inner: Formatter applied to the inner value.
    """

    present_label: str = "Just"
    absent_label: str = "Nothing"
    inner: Callable[[Any], str] = repr


DEFAULT_RENDER = RenderConfig()


def render(value: Maybe[Any], config: RenderConfig = DEFAULT_RENDER) -> str:
    """Render a Maybe as text, e.g. ``Just(1)`` or ``Nothing``.

    Nested Maybes are rendered with the same config; ``config.inner`` only
    formats the innermost non-Maybe value.
    """
    return value.resolve(
        config.absent_label,
        lambda inner: f"{config.present_label}({_render_inner(inner, config)})",
    )


def _render_inner(inner: Any, config: RenderConfig) -> str:
    from perhaps.kernel.maybe import Maybe

    if isinstance(inner, Maybe):
        return render(inner, config)
    return config.inner(inner)
