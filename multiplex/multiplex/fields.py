"""Field slots: ordered, addressable views of a struct's direct fields.

A "struct" here is an *instance* of one of:

  - a dataclass,
  - a pydantic ``BaseModel``,
  - a class that lists its fields in ``__multiplex_fields__``.

Anything else (classes themselves, ``None``, builtins, plain objects) has no
slots.
"""

from __future__ import annotations

import dataclasses
import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

__all__ = ["FieldSlot", "field_slots", "is_struct"]

_NONE_TYPE = type(None)


def _declared_fields(cls: type) -> tuple[str, ...] | None:
    names = getattr(cls, "__multiplex_fields__", None)
    if names is None:
        return None
    return tuple(names)


def is_struct(obj: object) -> bool:
    """Return True if *obj* is an instance whose fields can be walked."""
    if isinstance(obj, type):
        return False
    if dataclasses.is_dataclass(obj) or isinstance(obj, BaseModel):
        return True
    return _declared_fields(type(obj)) is not None


def _union_args(annotation: Any) -> tuple[Any, ...]:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        return typing.get_args(annotation)
    return (annotation,)


@dataclass(frozen=True)
class FieldSlot:
    """One direct field of a struct, in declaration order."""

    index: int
    name: str
    owner: type
    annotation: Any = Any

    def get(self, obj: object) -> Any:
        return getattr(obj, self.name, None)

    def set(self, obj: object, value: Any) -> None:
        setattr(obj, self.name, value)

    def resolved_annotation(self) -> Any:
        """Evaluate string annotations (``from __future__ import annotations``)."""
        if not isinstance(self.annotation, str):
            return self.annotation
        try:
            hints = typing.get_type_hints(self.owner)
        except (NameError, TypeError, AttributeError):
            return self.annotation
        return hints.get(self.name, self.annotation)

    @property
    def optional(self) -> bool:
        """True when the annotation admits ``None`` (a "pointer" field)."""
        annotation = self.resolved_annotation()
        return annotation is None or _NONE_TYPE in _union_args(annotation)

    def zero_value(self) -> Any:
        """Build a fresh value for this field by calling its type with no arguments.

        Returns None when the annotation does not name exactly one class
        besides ``None``, or when that class cannot be built without arguments.
        """
        annotation = self.resolved_annotation()
        targets = [a for a in _union_args(annotation) if a is not _NONE_TYPE]
        if len(targets) != 1:
            return None
        target = typing.get_origin(targets[0]) or targets[0]
        if not isinstance(target, type):
            return None
        try:
            return target()
        except (TypeError, ValueError):
            return None


def field_slots(obj: object) -> list[FieldSlot]:
    """Return the direct field slots of *obj*; empty when it is not a struct."""
    if not is_struct(obj):
        return []
    cls = type(obj)

    if dataclasses.is_dataclass(obj):
        return [
            FieldSlot(index=i, name=f.name, owner=cls, annotation=f.type)
            for i, f in enumerate(dataclasses.fields(obj))
        ]

    if isinstance(obj, BaseModel):
        return [
            FieldSlot(index=i, name=name, owner=cls, annotation=info.annotation)
            for i, (name, info) in enumerate(cls.model_fields.items())
        ]

    annotations: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        annotations.update(inspect.get_annotations(klass))
    return [
        FieldSlot(index=i, name=name, owner=cls, annotation=annotations.get(name, Any))
        for i, name in enumerate(_declared_fields(cls) or ())
    ]
