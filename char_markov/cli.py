"""
cli.py - command line interface for char_markov
Features:
- Build a chain from a text file (or stdin) and print generated samples
- Inspect the transition table as a Rich table, with chain stats
- Export the chain as a JSON inspection dump
- Show/set values in the JSON config file
- Optional build timing via the file logger (-v)
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from char_markov.core.chain_model import NONWORD, ChainModel, Window
from char_markov.core.errors import ConfigError
from char_markov.utils.config_manager import DEFAULT_CONFIG_PATH, Config
from char_markov.utils.logger_utils import DEFAULT_LOG_PATH, Log
from char_markov.utils.model_store import export_chain

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="char-markov",
        description="Character-level Markov chain text generator.",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="JSON config file")
    parser.add_argument("--log-file", default=DEFAULT_LOG_PATH, help="log file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="log timings and debug info")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_source(p):
        p.add_argument("file", help="input text file, or - for stdin")
        p.add_argument("-n", "--order", type=int, default=None, help="chain order")

    gen = sub.add_parser("generate", help="print generated samples")
    add_source(gen)
    gen.add_argument("-c", "--count", type=int, default=None, help="number of samples")
    gen.add_argument("--seed", type=int, default=None, help="seed for reproducible output")
    gen.add_argument("--max-chars", type=int, default=None, help="per-sample safety cap (0 = none)")

    chain = sub.add_parser("chain", help="show the transition table")
    add_source(chain)
    chain.add_argument("--limit", type=int, default=50, help="max rows to show")

    exp = sub.add_parser("export", help="write the chain as JSON")
    add_source(exp)
    exp.add_argument("-o", "--output", default=None, help="output path")

    cfg = sub.add_parser("config", help="show or set config values")
    cfg.add_argument("key", nargs="?")
    cfg.add_argument("value", nargs="?")
    return parser


class CLI:
    """Dispatches parsed arguments to the command handlers."""

    def __init__(self, args: argparse.Namespace, log: Log):
        self.args = args
        self.log = log
        # only `config` writes a fresh config file
        self.cfg = Config(args.config, create=args.command == "config")
        self.label = self.cfg.get("nonword_label")

    def run(self) -> int:
        handler = getattr(self, f"_cmd_{self.args.command}")
        return handler()

    # helpers -------------------------------------------------------------
    def _read_source(self) -> str:
        path = self.args.file
        if path == "-":
            return sys.stdin.read()
        with open(path, "r", encoding="utf8") as f:
            return f.read()

    def _order(self) -> int:
        return self.args.order if self.args.order is not None else self.cfg["order"]

    def _build(self, rng=None) -> ChainModel:
        text = self._read_source()
        self.log.debug(f"building {self.args.file} with order {self._order()}")
        with self.log.time_block("build"):
            model = ChainModel(text, order=self._order(), rng=rng)
        self.log.metric("input chars", len(text))
        self.log.metric("states", len(model))
        return model

    def _render_symbol(self, sym) -> str:
        if sym is NONWORD:
            return self.label
        return repr(sym)[1:-1] if isinstance(sym, str) else str(sym)

    def _render_window(self, window: Window) -> str:
        return " ".join(self._render_symbol(s) for s in window)

    # COMMANDS ------------------------------------------------------------
    def _cmd_generate(self) -> int:
        seed = self.args.seed if self.args.seed is not None else self.cfg["seed"]
        count = self.args.count if self.args.count is not None else self.cfg["samples"]
        cap = self.args.max_chars if self.args.max_chars is not None else self.cfg["max_chars"]
        rng = random.Random(seed) if seed is not None else None

        model = self._build(rng=rng)
        for _ in range(max(0, count)):
            out = model.sample(max_steps=cap if cap and cap > 0 else None)
            if cap and cap > 0 and len(out) >= cap:
                self.log.warning(f"sample reached the {cap} char cap")
            console.print(out, markup=False, highlight=False, soft_wrap=True)
        return 0

    def _cmd_chain(self) -> int:
        model = self._build()
        table = Table(title=f"Transitions (order {model.order})", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Window", style="bold")
        table.add_column("Successors")
        table.add_column("Count", justify="right", style="magenta")

        for i, (window, successors) in enumerate(model.transitions.items(), 1):
            if i > self.args.limit:
                break
            rendered = ", ".join(self._render_symbol(s) for s in successors)
            table.add_row(str(i), Text(self._render_window(window)), Text(rendered), str(len(successors)))
        console.print(table)

        stats = model.stats()
        body = "\n".join(f"{k:16} {v}" for k, v in stats.items())
        console.print(Panel(body, title="Stats", border_style="cyan"))
        return 0

    def _cmd_export(self) -> int:
        model = self._build()
        target = self.args.output or self.cfg["export_path"]
        path = export_chain(model, target, nonword_label=self.label)
        console.print(Text.assemble(("exported ", "green"), f"{len(model)} states -> {path}"))
        return 0

    def _cmd_config(self) -> int:
        key, value = self.args.key, self.args.value
        if key is None:
            self.cfg.show(console)
            return 0
        if value is None:
            err_console.print("usage: char-markov config [KEY VALUE]", markup=False)
            return 2
        self.cfg.set(key, value)
        console.print(f"{key} = {self.cfg[key]!r}", markup=False)
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    log = Log(path=args.log_file, level="DEBUG" if args.verbose else "WARNING", echo=args.verbose)
    # ChainStateError is an internal error and propagates
    try:
        return CLI(args, log).run()
    except (ConfigError, OSError) as e:
        log.error(f"{args.command} failed: {e}")
        err_console.print(Text.assemble(("error: ", "red"), str(e)), highlight=False)
        return 1


if __name__ == "__main__":
    sys.exit(main())
