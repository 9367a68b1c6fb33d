"""
Type definitions for the collection algorithms.

This module contains the custom types shared by the set and sequence
utilities, organized by their primary use cases.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Callable, Protocol, TypeVar, runtime_checkable

import numpy as np

# Basic type variables for generic operations
T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

# Callables accepted by filter/map style operations
type Predicate[T] = Callable[[T], bool]
type Transform[T] = Callable[[T], T]

# Numeric kinds: runtime tags for fixed-width integers and floats
type Integer = int | np.integer
type Floating = float | np.floating
type Number = Integer | Floating
type NumericKind = type[int] | type[float] | type[np.integer] | type[np.floating]


@runtime_checkable
class Stringer(Protocol):
    """An element exposing its own textual representation."""

    def __str__(self) -> str: ...


__all__ = [
    # Type variables
    "T",
    "H",
    # Callables
    "Predicate",
    "Transform",
    # Numeric types
    "Integer",
    "Floating",
    "Number",
    "NumericKind",
    # Protocols
    "Stringer",
]
