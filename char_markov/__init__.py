# char_markov/__init__.py
"""Character-level n-gram (Markov chain) text model and generator."""

from .core import (
    NONWORD,
    ChainError,
    ChainModel,
    ChainStateError,
    ConfigError,
    advance,
    initial_window,
)

__all__ = [
    "NONWORD",
    "ChainError",
    "ChainModel",
    "ChainStateError",
    "ConfigError",
    "advance",
    "initial_window",
]

__version__ = "0.1.0"
