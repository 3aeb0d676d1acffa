# model_store.py - JSON inspection dump for a built chain
#
# Write-only: there is no loader, a model is rebuilt from its text.
#  - NONWORD as a key is rendered as `nonword_label`
#  - NONWORD inside a successor list is rendered as null

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from char_markov.core.chain_model import NONWORD, ChainModel
from char_markov.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_NONWORD_LABEL = "<NONWORD>"


def _render_key(sym: Any, label: str) -> str:
    return label if sym is NONWORD else str(sym)


def _render_node(node: Dict[Any, Any], label: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for sym, child in node.items():
        key = _render_key(sym, label)
        if isinstance(child, dict):
            out[key] = _render_node(child, label)
        else:
            out[key] = [None if s is NONWORD else s for s in child]
    return out


def chain_to_json(model: ChainModel, nonword_label: str = DEFAULT_NONWORD_LABEL) -> Dict[str, Any]:
    """
    JSON-safe rendering of model.get_chain().
    Returns:
        dict: {"order": N, "stats": {...}, "nonword": label, "chain": {...nested...}}
    Raises ConfigError when the label renders the same as a real symbol.
    """
    clashes = {
        sym
        for window in model.transitions
        for sym in window
        if sym is not NONWORD and str(sym) == nonword_label
    }
    if clashes:
        raise ConfigError(f"nonword_label {nonword_label!r} collides with an input symbol")
    return {
        "order": model.order,
        "stats": dict(model.stats()),
        "nonword": nonword_label,
        "chain": _render_node(model.get_chain(), nonword_label),
    }


def export_chain(
    model: ChainModel,
    path: Union[str, Path],
    nonword_label: str = DEFAULT_NONWORD_LABEL,
) -> Path:
    """
    Write the inspection dump to disk (indent=2), creating parent dirs.
    Returns the path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = chain_to_json(model, nonword_label)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info("exported chain (%d states) to %s", len(model), path)
    return path
