from .errors import UnrecoverablePreconditionViolation
from .kernel import (
    DEFAULT_RENDER,
    NOTHING,
    Just,
    Maybe,
    Nothing,
    Ordering,
    RenderConfig,
)
from .monoid import First, Last

__all__ = [
    # Core
    "Maybe",
    "Just",
    "Nothing",
    "NOTHING",
    # Comparison and display
    "Ordering",
    "RenderConfig",
    "DEFAULT_RENDER",
    # Monoids
    "First",
    "Last",
    # Errors
    "UnrecoverablePreconditionViolation",
]
