"""Three-way comparison outcome."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Ordering(Enum):
    """Result of comparing two values.

    Kinds:
    - LT: left operand sorts before the right one
    - EQ: operands are equal
    - GT: left operand sorts after the right one
    """

    LT = -1
    EQ = 0
    GT = 1

    @staticmethod
    def of(left: Any, right: Any) -> Ordering:
        """Compare two plain values using their own ``<`` and ``==``."""
        if left == right:
            return Ordering.EQ
        if left < right:
            return Ordering.LT
        return Ordering.GT

    def invert(self) -> Ordering:
        return Ordering(-self.value)
