# char_markov/core/errors.py
"""Exceptions raised by the chain model and its helpers."""


class ChainError(Exception):
    """Base class for every error raised by char_markov."""


class ChainStateError(ChainError, LookupError):
    """
    A window reached during generation has no entry in the transition table.
    Construction and generation share the same state machine, so this means
    the table is inconsistent (an internal error, not bad user input).
    """

    def __init__(self, window) -> None:
        super().__init__(f"no transitions recorded for window {window!r}")
        self.window = window


class ConfigError(ChainError, ValueError):
    """Raised when a configuration key or value is invalid."""
