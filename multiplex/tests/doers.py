"""Types shared by the tests (and loaded by reference from the CLI tests)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from multiplex import ListCollector


class Doer(ABC):
    """The capability being multiplexed."""

    @abstractmethod
    def do(self) -> None:
        ...


@dataclass
class Doer1(Doer):
    suffix: str = ""

    def do(self) -> None:
        print("doer1" + self.suffix)


@dataclass
class Doer2(Doer):
    suffix: str = ""

    def do(self) -> None:
        print("doer2" + self.suffix)


@dataclass
class CompoundDoer(Doer):
    """A Doer made of two other Doers."""

    doer1: Doer1 = field(default_factory=Doer1)
    doer2: Doer2 | None = None
    suffix: str = ""

    def do(self) -> None:
        print("compoundDoer" + self.suffix)


@dataclass
class DoerContainer:
    """Holds Doers but is not one itself."""

    doer1: Doer1 = field(default_factory=Doer1)
    doer2: Doer2 | None = None


class MultiDoer(ListCollector[Doer], Doer):
    """Groups Doers and runs them one at a time."""

    def do(self) -> None:
        for doer in self:
            doer.do()


# Named parts for the "A-x" / "B" scenario.


@dataclass
class PartA(Doer):
    suffix: str = ""

    def do(self) -> None:
        print("A" + self.suffix)


@dataclass
class PartB(Doer):
    suffix: str = ""

    def do(self) -> None:
        print("B" + self.suffix)


@dataclass
class Assembly:
    a: PartA = field(default_factory=lambda: PartA("-x"))
    b: PartB | None = None


@dataclass
class Wide(Doer):
    first: Doer1 | None = None
    second: Doer2 | None = None
    third: Doer1 | None = None

    def do(self) -> None:
        print("wide")


@dataclass
class Unbuildable:
    """A None field whose type cannot be created without arguments."""

    needy: Needy | None = None
    doer2: Doer2 | None = None


@dataclass
class Stamped:
    """Carries an optional field unrelated to Doer."""

    doer1: Doer1 = field(default_factory=Doer1)
    created: datetime | None = None
    doer2: Doer2 | None = None


class Needy(Doer):
    def __init__(self, name: str) -> None:
        self.name = name

    def do(self) -> None:
        print("needy-" + self.name)


@dataclass(frozen=True)
class FrozenContainer:
    doer1: Doer1 = field(default_factory=Doer1)
    doer2: Doer2 | None = None


# Plain classes, for pydantic models and __multiplex_fields__.


class Widget(Doer):
    def __init__(self, label: str = "") -> None:
        self.label = label

    def do(self) -> None:
        print("widget" + self.label)


class Gadget(Doer):
    def __init__(self, label: str = "") -> None:
        self.label = label

    def do(self) -> None:
        print("gadget" + self.label)


class Toolbox(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    widget: Widget
    gadget: Gadget | None = None
    name: str = "toolbox"


class Bare(Doer):
    """A plain class opting in with no fields of its own."""

    __multiplex_fields__ = ()

    def do(self) -> None:
        print("bare")


class Untyped:
    """Declares a field without an annotation."""

    __multiplex_fields__ = ("extra", "widget")

    def __init__(self, widget: Widget) -> None:
        self.extra = None
        self.widget = widget


class Declared(Doer):
    """Lists its fields explicitly instead of being a dataclass."""

    __multiplex_fields__ = ("gadget", "widget")

    gadget: Gadget | None
    widget: Widget

    def __init__(self, widget: Widget, gadget: Gadget | None = None) -> None:
        self.widget = widget
        self.gadget = gadget
        self.hidden = Widget("-hidden")

    def do(self) -> None:
        print("declared")


# A structural capability.


@runtime_checkable
class Greeter(Protocol):
    def greet(self, name: str) -> str:
        ...


@dataclass
class English:
    def greet(self, name: str) -> str:
        return f"hello {name}"


@dataclass
class French:
    def greet(self, name: str) -> str:
        return f"bonjour {name}"


@dataclass
class Greeters:
    english: English = field(default_factory=English)
    french: French | None = None


class NotRuntime(Protocol):
    def greet(self, name: str) -> str:
        ...


class NotACollector(Doer):
    def do(self) -> None:
        pass


class CollectsButIsNotADoer(ListCollector[Doer]):
    pass
