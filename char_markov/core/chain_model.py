# char_markov/core/chain_model.py
"""
ChainModel - character-level n-gram (Markov chain) model.

The model is a transition table keyed by a window of the last N symbols
(oldest first). Construction scans the input once; generation walks the same
state machine from the all-sentinel window, sampling one successor per step,
until the NONWORD sentinel is drawn.

Both phases share exactly two rules:
    initial_window(n)         -> (NONWORD,) * n
    advance(window, symbol)   -> window[1:] + (symbol,)

so every window generation can reach was created during construction.

Example:
    model = ChainModel("the cat sat on the mat", order=2)
    print(model.sample())
    model.each(print)
"""

from __future__ import annotations

from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
)
import logging
import random

from .errors import ChainStateError
from .protocols import ChainStats, RandomSource

logger = logging.getLogger(__name__)


class _NonWord:
    """Sentinel symbol: start-of-input padding and end-of-sequence marker."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NONWORD"

    def __reduce__(self) -> str:
        # pickle by reference to the module global, keeps `is NONWORD` working
        return "NONWORD"

    def __copy__(self) -> "_NonWord":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_NonWord":
        return self


NONWORD = _NonWord()

# Types
Symbol = Hashable  # a single input character, or NONWORD
Window = Tuple[Symbol, ...]
Successors = List[Symbol]
TransitionTable = Dict[Window, Successors]


def normalize_order(order: Any) -> int:
    """Chain order is at least 1; zero and negative values become 1."""
    return max(1, int(order))


def initial_window(order: int) -> Window:
    """The reset state shared by construction and generation."""
    return (NONWORD,) * normalize_order(order)


def advance(window: Window, symbol: Symbol) -> Window:
    """Drop the oldest symbol and append the newest one."""
    return window[1:] + (symbol,)


class ChainModel:
    """
    Character n-gram model built from one input sequence.

    The table is built once in the constructor and never changes afterwards.
    Generation state (the current window) is local to each run, so any
    number of runs may walk the same model, interleaved or concurrently.

    Args:
        text:  input sequence; a str is consumed character by character.
        order: number of trailing symbols used as context (min 1).
        rng:   default random source for generation (anything with randrange).
    """

    def __init__(
        self,
        text: Iterable[Symbol] = "",
        order: int = 1,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._order = normalize_order(order)
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._table: TransitionTable = {}
        self._build(text)

    @classmethod
    def build(
        cls,
        symbols: Iterable[Symbol],
        order: int = 1,
        rng: Optional[RandomSource] = None,
    ) -> "ChainModel":
        """Construct a model from any sequence of hashable symbols."""
        return cls(symbols, order=order, rng=rng)

    # construction ---------------------------------------------------------
    def _build(self, symbols: Iterable[Symbol]) -> None:
        table = self._table
        window = initial_window(self._order)
        for c in symbols:
            table.setdefault(window, []).append(c)
            window = advance(window, c)
        # terminal marker on the window after the last symbol
        table.setdefault(window, []).append(NONWORD)

        logger.debug(
            "built chain: order=%d states=%d transitions=%d",
            self._order,
            len(table),
            sum(len(v) for v in table.values()),
        )

    # generation ---------------------------------------------------------
    def generate(
        self,
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
    ) -> Iterator[Symbol]:
        """
        Lazily yield one generated run, symbol by symbol.

        Each call starts from the all-sentinel window and owns its own state.
        The run ends when NONWORD is sampled (it is never yielded). max_steps
        optionally caps the number of emitted symbols for cyclic chains.
        """
        source = rng if rng is not None else self._rng
        window = initial_window(self._order)
        emitted = 0
        while True:
            if max_steps is not None and emitted >= max_steps:
                logger.warning(
                    "generation stopped at safety cap of %d symbols", max_steps
                )
                return
            successors = self.successors(window)
            symbol = successors[source.randrange(len(successors))]
            if symbol is NONWORD:
                return
            yield symbol
            emitted += 1
            window = advance(window, symbol)

    def __iter__(self) -> Iterator[Symbol]:
        return self.generate()

    def each(
        self,
        callback: Callable[[Symbol], Any],
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
    ) -> int:
        """Run one generation, calling callback per emitted symbol. Returns the count."""
        count = 0
        for symbol in self.generate(rng=rng, max_steps=max_steps):
            callback(symbol)
            count += 1
        return count

    def sample(
        self,
        rng: Optional[RandomSource] = None,
        max_steps: Optional[int] = None,
    ) -> str:
        """One generated run joined into a string."""
        return "".join(str(s) for s in self.generate(rng=rng, max_steps=max_steps))

    # inspection ---------------------------------------------------------
    @property
    def order(self) -> int:
        return self._order

    @property
    def transitions(self) -> Mapping[Window, Successors]:
        """Read-only view of the flat window -> successors table."""
        return MappingProxyType(self._table)

    def successors(self, window: Window) -> Successors:
        try:
            return self._table[tuple(window)]
        except KeyError:
            raise ChainStateError(tuple(window)) from None

    def get_chain(self) -> Dict[Symbol, Any]:
        """
        Nested view of the table: one dict level per window position except
        the last; the innermost dict maps the final symbol to its successors.
        For order 1 this is simply {symbol: [successors]}.
        """
        root: Dict[Symbol, Any] = {}
        for window, successors in self._table.items():
            node = root
            for sym in window[:-1]:
                node = node.setdefault(sym, {})
            node[window[-1]] = list(successors)
        return root

    def stats(self) -> ChainStats:
        symbols = set()
        transitions = 0
        terminal = 0
        for successors in self._table.values():
            transitions += len(successors)
            if NONWORD in successors:
                terminal += 1
            symbols.update(s for s in successors if s is not NONWORD)
        return ChainStats(
            order=self._order,
            states=len(self._table),
            transitions=transitions,
            symbols=len(symbols),
            terminal_states=terminal,
        )

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, window: object) -> bool:
        try:
            return tuple(window) in self._table  # type: ignore[arg-type]
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"ChainModel(order={self._order}, states={len(self._table)})"
