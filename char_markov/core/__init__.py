"""
char_markov.core

The chain model and the pieces it is built from:
 - ChainModel: construction from an input sequence and lazy generation
 - NONWORD sentinel, window helpers (initial_window, advance)
 - RandomSource / ChainStats typing contracts
 - exception hierarchy
"""

from .chain_model import (
    NONWORD,
    ChainModel,
    Symbol,
    TransitionTable,
    Window,
    advance,
    initial_window,
    normalize_order,
)
from .errors import ChainError, ChainStateError, ConfigError
from .protocols import ChainStats, RandomSource

__all__ = [
    "NONWORD",
    "ChainModel",
    "Symbol",
    "TransitionTable",
    "Window",
    "advance",
    "initial_window",
    "normalize_order",
    "ChainError",
    "ChainStateError",
    "ConfigError",
    "ChainStats",
    "RandomSource",
]
