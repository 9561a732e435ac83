"""Test utilities for wren applications.

Provides an in-memory history fixture factory and match/stack
assertions::

    from wren.testing import assert_matches, memory_history
"""

from wren.history.history import History
from wren.history.source import MemorySource
from wren.testing.assertions import assert_matches, assert_no_match, assert_stack


def memory_history(initial: str = "/") -> tuple[History, MemorySource]:
    """Return a ``History`` over a fresh ``MemorySource`` and the source itself."""
    source = MemorySource(initial)
    return History(source), source


__all__ = [
    "assert_matches",
    "assert_no_match",
    "assert_stack",
    "memory_history",
]
