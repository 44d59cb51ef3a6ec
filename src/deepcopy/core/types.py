"""Core type definitions for deepcopy."""

type Copy[T] = T
"""Type alias indicating a value is an independently-owned deep copy.

When you see `Copy[T]` in a return type, no mutable storage reachable from the
returned value is shared with the source. Mutating the copy never affects the
original, and vice versa.
"""
