"""Core data models for multiplex."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class NilHandling(str, Enum):
    """What to do with a field whose value is ``None``."""

    SKIP = "skip"  # stop visiting the remaining fields
    CREATE = "create"  # assign a fresh zero value and keep going
    PANIC = "panic"  # raise NilFieldViolation


class Settings(BaseModel, frozen=True):
    """Per-call policy, resolved from options on every call."""

    nil_handling: NilHandling = NilHandling.CREATE
