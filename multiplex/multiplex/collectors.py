"""Collector implementations for multiplex."""

from __future__ import annotations

import inspect
import types
from abc import ABC
from functools import lru_cache
from typing import Any, Callable, Generic, Iterator, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

_NON_CAPABILITY_BASES = (object, Generic, Protocol, ABC)


@runtime_checkable
class Collector(Protocol[T_contra]):
    """Anything ``interface()`` can feed items into."""

    def collect(self, item: T_contra) -> None:
        ...


class ListCollector(Generic[T]):
    """Keeps collected items in a list, in the order they arrive.

    Subclass it together with a capability to get a group object that is
    itself an instance of that capability::

        class MultiDoer(ListCollector[Doer], Doer):
            def do(self) -> None:
                for doer in self:
                    doer.do()
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def collect(self, item: T) -> None:
        self._items.append(item)

    @property
    def items(self) -> list[T]:
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def capability_methods(capability: type) -> list[str]:
    """Public method names declared by *capability* and its bases, sorted.

    Only plain instance methods are fanned out. Abstract methods are included
    even when private; ``collect`` never is. Properties, classmethods and
    staticmethods are left out and a multiplexer inherits them unchanged from
    the capability.
    """
    names: set[str] = {
        name
        for name in getattr(capability, "__abstractmethods__", ())
        if inspect.isfunction(inspect.getattr_static(capability, name, None))
    }
    for klass in capability.__mro__:
        if klass in _NON_CAPABILITY_BASES:
            continue
        for name, value in vars(klass).items():
            if not name.startswith("_") and inspect.isfunction(value):
                names.add(name)
    names.discard("collect")
    return sorted(names)


def _fan_out(name: str) -> Callable[..., list[Any]]:
    def method(self: ListCollector[Any], *args: Any, **kwargs: Any) -> list[Any]:
        return [getattr(item, name)(*args, **kwargs) for item in self]

    method.__name__ = name
    method.__qualname__ = name
    return method


@lru_cache(maxsize=None)
def multiplexer(capability: type[T]) -> type[ListCollector[T]]:
    """Build a ListCollector subclass that also implements *capability*.

    Every method of the capability is replaced by one that calls the same
    method on each collected item, in collection order, and returns the list
    of their results. The class is built once per capability.

    Properties, classmethods and staticmethods are not fanned out, so a
    capability that declares one of them abstract yields a class that
    cannot be instantiated.
    """
    namespace: dict[str, Any] = {
        name: _fan_out(name) for name in capability_methods(capability)
    }
    namespace["__module__"] = __name__

    def exec_body(ns: dict[str, Any]) -> None:
        ns.update(namespace)

    return types.new_class(
        f"{capability.__name__}Multiplexer", (ListCollector, capability), exec_body=exec_body
    )
