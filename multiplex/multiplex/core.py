"""Gather every field of a struct that implements a capability into one collector."""

from __future__ import annotations

import logging
from typing import TypeVar

from multiplex.errors import CollectorContractViolation, NilFieldViolation
from multiplex.fields import field_slots, is_struct
from multiplex.models import NilHandling
from multiplex.options import Option, make_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _implements(obj: object, capability: type) -> bool:
    try:
        return isinstance(obj, capability)
    except TypeError as exc:
        # e.g. a Protocol without @runtime_checkable
        raise CollectorContractViolation(
            f"cannot check instances against {capability!r}: {exc}"
        ) from exc


def interface(
    capability: type[T],
    candidate: object,
    collection: T,
    *options: Option,
) -> T:
    """Collect the fields of *candidate* that implement *capability*.

    Direct fields are visited in declaration order and every one that is an
    instance of *capability* is passed to ``collection.collect``. The candidate
    itself comes last, if it implements *capability* too. A ``None`` field is
    handled according to the nil-handling option (default: create).

    Only instances of dataclasses, pydantic models and classes that list
    their fields in ``__multiplex_fields__`` are walked. Anything else
    contributes nothing, not even itself when it implements *capability*;
    declare ``__multiplex_fields__ = ()`` on a plain class to have it
    collected. *collection* is mutated in place and returned.

    Raises:
        CollectorContractViolation: *collection* has no ``collect`` method or
            is not an instance of *capability*.
        NilFieldViolation: a field is ``None`` under ``panic_nil_fields``.
    """
    settings = make_settings(*options)

    if not isinstance(capability, type):
        raise CollectorContractViolation(f"capability must be a class, got {capability!r}")
    if not callable(getattr(collection, "collect", None)):
        raise CollectorContractViolation(
            f"{type(collection).__qualname__} has no collect() method"
        )
    if not _implements(collection, capability):
        raise CollectorContractViolation(
            f"{type(collection).__qualname__} must implement {capability.__qualname__}"
        )

    if not is_struct(candidate):
        logger.debug("%s is not a struct instance; nothing to collect", type(candidate).__qualname__)
        return collection

    for slot in field_slots(candidate):
        value = slot.get(candidate)
        if value is None:
            if settings.nil_handling is NilHandling.PANIC:
                raise NilFieldViolation(slot.name)
            if settings.nil_handling is NilHandling.SKIP:
                logger.debug("field %r is nil; skipping the remaining fields", slot.name)
                break
            value = slot.zero_value()
            if value is None:
                logger.debug("field %r is nil and cannot be created; leaving it", slot.name)
                continue
            slot.set(candidate, value)
            logger.debug("field %r was nil; created %s", slot.name, type(value).__qualname__)
        if _implements(value, capability):
            logger.debug("collecting field %r (%s)", slot.name, type(value).__qualname__)
            collection.collect(value)

    if _implements(candidate, capability):
        logger.debug("collecting container %s", type(candidate).__qualname__)
        collection.collect(candidate)

    return collection
