# config_manager.py - JSON config manager for the char_markov CLI

import json
import logging
import os

from rich.console import Console
from rich.table import Table

from char_markov.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "char_markov.json"

DEFAULTS = {
    "order": 3,             # chain order (window length)
    "samples": 1,           # generation runs per `generate` call
    "max_chars": 0,         # per-run safety cap, 0 = unbounded
    "seed": None,           # int seed for reproducible runs
    "export_path": os.path.join("data", "chain.json"),
    "nonword_label": "<NONWORD>",
}


class Config:
    def __init__(self, path=DEFAULT_CONFIG_PATH, create=True):
        self.path = path
        self.create = create
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("could not read config %s, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in DEFAULTS:
                    continue
                try:
                    self.data[k] = self._coerce(k, v)
                except ConfigError as e:
                    logger.warning("config %s: %s, keeping default %r", self.path, e, DEFAULTS[k])
        elif self.create:
            self.save()

    def save(self):
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def show(self, console=None):
        console = console or Console()
        table = Table(title=f"config ({self.path})", show_edge=False)
        table.add_column("key", style="cyan")
        table.add_column("value", style="bold")
        for k, v in self.data.items():
            table.add_row(k, json.dumps(v))
        console.print(table)

    def set(self, key, val):
        """Set a key, coercing the value to the type of its default, and save."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = self._coerce(key, val)
        self.save()

    @staticmethod
    def _coerce(key, val):
        default = DEFAULTS[key]
        if val is None and default is None:
            return None
        if isinstance(val, str) and val.lower() in ("none", "null"):
            if default is None:
                return None
            raise ConfigError(f"{key} cannot be null")
        # seed has no typed default, it is an optional int
        kind = int if default is None else type(default)
        try:
            return kind(val)
        except (TypeError, ValueError):
            raise ConfigError(f"invalid value for {key}: {val!r}") from None
