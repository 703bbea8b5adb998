"""Values produced by evaluating expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .util import LinkedList


@dataclass(frozen=True)
class IntValue:
    """A 32-bit integer value."""

    value: int


@dataclass(frozen=True)
class AtomValue:
    """A symbolic atom."""

    name: str


@dataclass(frozen=True)
class ListValue:
    """A list of values."""

    items: LinkedList = field(default_factory=LinkedList)


@dataclass(frozen=True)
class Void:
    """The absence of a value, returned by loops."""


Value = Union[IntValue, AtomValue, ListValue, Void]