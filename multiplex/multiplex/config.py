"""Configuration for the multiplex command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from multiplex.models import NilHandling
from multiplex.options import Option, nil_handling


@dataclass(frozen=True)
class Config:
    """Runtime configuration, populated from environment variables.

    Only the CLI reads this; ``interface()`` itself always defaults to
    ``create`` unless options say otherwise.
    """

    nil_handling: NilHandling = NilHandling.CREATE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Config:
        """Build config from MULTIPLEX_* environment variables."""
        raw_policy = os.getenv("MULTIPLEX_NIL_HANDLING", "").strip().lower()
        try:
            policy = NilHandling(raw_policy) if raw_policy else cls.nil_handling
        except ValueError:
            choices = ", ".join(p.value for p in NilHandling)
            raise ValueError(
                f"MULTIPLEX_NIL_HANDLING must be one of {choices}, got {raw_policy!r}"
            ) from None

        log_level = os.getenv("MULTIPLEX_LOG_LEVEL", "").strip().upper() or cls.log_level
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"MULTIPLEX_LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(nil_handling=policy, log_level=log_level)

    def options(self) -> list[Option]:
        """Return the ``interface()`` options this config stands for."""
        return [nil_handling(self.nil_handling)]
