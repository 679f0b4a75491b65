"""Options that tune a single ``interface()`` call."""

from __future__ import annotations

from typing import Callable

from multiplex.models import NilHandling, Settings

Option = Callable[[Settings], Settings]


def skip_nil_fields(settings: Settings) -> Settings:
    """Stop at the first ``None`` field; the container is still collected."""
    return settings.model_copy(update={"nil_handling": NilHandling.SKIP})


def create_nil_fields(settings: Settings) -> Settings:
    """Fill ``None`` fields with a zero value (the default)."""
    return settings.model_copy(update={"nil_handling": NilHandling.CREATE})


def panic_nil_fields(settings: Settings) -> Settings:
    """Raise NilFieldViolation on the first ``None`` field."""
    return settings.model_copy(update={"nil_handling": NilHandling.PANIC})


_BY_POLICY: dict[NilHandling, Option] = {
    NilHandling.SKIP: skip_nil_fields,
    NilHandling.CREATE: create_nil_fields,
    NilHandling.PANIC: panic_nil_fields,
}


def nil_handling(value: NilHandling | str) -> Option:
    """Return the option for *value* (an enum member or its name, case-insensitive)."""
    if isinstance(value, str) and not isinstance(value, NilHandling):
        value = NilHandling(value.strip().lower())
    return _BY_POLICY[value]


def make_settings(*options: Option) -> Settings:
    """Apply *options* in order on top of the defaults."""
    settings = Settings()
    for option in options:
        settings = option(settings)
    return settings
