"""multiplex — collect the fields of a struct that implement a capability."""

from multiplex.collectors import Collector, ListCollector, capability_methods, multiplexer
from multiplex.core import interface
from multiplex.errors import (
    CollectorContractViolation,
    MultiplexError,
    NilFieldViolation,
)
from multiplex.fields import FieldSlot, field_slots, is_struct
from multiplex.models import NilHandling, Settings
from multiplex.options import (
    Option,
    create_nil_fields,
    make_settings,
    nil_handling,
    panic_nil_fields,
    skip_nil_fields,
)

__all__ = [
    "Collector",
    "CollectorContractViolation",
    "FieldSlot",
    "ListCollector",
    "MultiplexError",
    "NilFieldViolation",
    "NilHandling",
    "Option",
    "Settings",
    "capability_methods",
    "create_nil_fields",
    "field_slots",
    "interface",
    "is_struct",
    "make_settings",
    "multiplexer",
    "nil_handling",
    "panic_nil_fields",
    "skip_nil_fields",
]
