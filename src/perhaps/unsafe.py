"""Partial operations on Maybe.

Kept out of the ``Maybe`` class and the top-level ``perhaps`` namespace, so
every use shows up as an explicit ``from perhaps.unsafe import ...``.
Prefer ``resolve``, ``unwrap_or`` or ``bind`` wherever presence has not
already been established.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from perhaps.errors import UnrecoverablePreconditionViolation
from perhaps.kernel.maybe import Just, Maybe

T = TypeVar("T")

logger = logging.getLogger(__name__)


def force_unwrap(value: Maybe[T]) -> T:
    """Return the held value of a Just.

    Raises:
        UnrecoverablePreconditionViolation: If ``value`` is Nothing.
    """
    if isinstance(value, Just):
        return value.value
    logger.debug("force_unwrap called on %r", value)
    raise UnrecoverablePreconditionViolation("force_unwrap called on Nothing", value)
