"""Shared type definitions and utilities for fibbench."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

# Reusable decorator for immutable, slot-based dataclasses.
frozen_slots = dataclass(frozen=True, slots=True)

# Signature shared by every Fibonacci variant.
FibFunc = Callable[[int], int]

# Semantic alias for benchmark input sizes.
Sizes = tuple[int, ...]
