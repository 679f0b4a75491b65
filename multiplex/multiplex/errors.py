"""Exceptions raised by multiplex.

Both the collector check and the nil-field check report caller bugs, so they
are raised straight through to the caller and never retried.
"""

from __future__ import annotations


class MultiplexError(Exception):
    """Base class for all multiplex errors."""


class CollectorContractViolation(MultiplexError, TypeError):
    """The collector does not implement the target capability."""


class NilFieldViolation(MultiplexError, ValueError):
    """A field was ``None`` while nil handling is ``panic``."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"field {field_name!r} is nil")
        self.field_name = field_name

