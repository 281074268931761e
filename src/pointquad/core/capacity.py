#!/usr/bin/env python3
"""
Capacity Strategies

How many items a tree node holds before it splits. The strategy object is
shared by every node of a tree, so both variants are immutable.
"""

import numbers
from dataclasses import dataclass
from functools import lru_cache


def _validate_capacity(value) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"capacity must be an integer, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"capacity must be positive, got {value}")
    return int(value)


class Capacity:
    """Base class for capacity strategies."""
    __slots__ = ()

    def capacity(self) -> int:
        raise NotImplementedError


class ConstCap(Capacity):
    """
    Capacity fixed on the type.

    ``ConstCap[16]`` is a cached subclass whose instances carry no state;
    every instance of it is equal to every other.
    """
    __slots__ = ()
    CAPACITY = None

    def __class_getitem__(cls, capacity):
        return _const_cap_type(_validate_capacity(capacity))

    def __init__(self):
        if self.CAPACITY is None:
            raise TypeError("Use ConstCap[n]() to create a constant capacity")

    def capacity(self) -> int:
        return self.CAPACITY

    def __eq__(self, other):
        return type(other) is type(self)

    def __hash__(self):
        return hash((ConstCap, self.CAPACITY))

    def __repr__(self) -> str:
        return f"ConstCap[{self.CAPACITY}]()"


@lru_cache(maxsize=None)
def _const_cap_type(capacity: int) -> type:
    return type(f"ConstCap{capacity}", (ConstCap,), {'__slots__': (), 'CAPACITY': capacity})


@dataclass(frozen=True)
class DynCap(Capacity):
    """Capacity chosen at runtime."""
    value: int

    def __post_init__(self):
        object.__setattr__(self, 'value', _validate_capacity(self.value))

    def capacity(self) -> int:
        return self.value


def capacity_from_value(value) -> Capacity:
    """Accept a Capacity as-is, or wrap an integer in a DynCap."""
    if isinstance(value, Capacity):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return DynCap(value)
    raise TypeError(f"Expected a Capacity or an integer, got {type(value).__name__}")
