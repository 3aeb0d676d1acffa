# char_markov/core/protocols.py
"""
Small typing contracts shared by the chain model, the CLI and the tests.

RandomSource is what generation draws from: anything with a uniform
randrange(n). random.Random satisfies it, as do scripted stubs in tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from typing_extensions import TypedDict


@runtime_checkable
class RandomSource(Protocol):
    """Uniform integer source over [0, n)."""

    def randrange(self, n: int) -> int:
        ...


class ChainStats(TypedDict):
    """
    Summary of a built chain.

      order:           chain order N
      states:          number of distinct windows in the table
      transitions:     total successor entries (duplicates counted)
      symbols:         distinct real symbols seen in the input
      terminal_states: windows that carry the end-of-input marker
    """
    order: int
    states: int
    transitions: int
    symbols: int
    terminal_states: int
