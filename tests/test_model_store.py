# tests/test_model_store.py
import json

import pytest

from char_markov.core.chain_model import ChainModel
from char_markov.core.errors import ConfigError
from char_markov.utils.model_store import chain_to_json, export_chain


def test_chain_to_json_renders_sentinel():
    data = chain_to_json(ChainModel("aab", order=1))
    assert data["order"] == 1
    assert data["nonword"] == "<NONWORD>"
    assert data["chain"] == {
        "<NONWORD>": ["a"],
        "a": ["a", "b"],
        "b": [None],
    }
    assert data["stats"]["states"] == 3


def test_chain_to_json_nested_for_higher_order():
    data = chain_to_json(ChainModel("abab", order=2), nonword_label="^")
    assert data["chain"] == {
        "^": {"^": ["a"], "a": ["b"]},
        "a": {"b": ["a", None]},
        "b": {"a": ["b"]},
    }


def test_export_chain_writes_json(tmp_path):
    target = tmp_path / "nested" / "chain.json"
    out = export_chain(ChainModel("héllo", order=2), target)
    assert out == target
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data["order"] == 2
    assert data["chain"]["<NONWORD>"]["<NONWORD>"] == ["h"]
    assert data["chain"]["h"]["é"] == ["l"]


def test_label_matching_a_real_symbol_is_rejected(tmp_path):
    model = ChainModel("ab", order=1)
    with pytest.raises(ConfigError):
        chain_to_json(model, nonword_label="a")
    with pytest.raises(ConfigError):
        export_chain(model, tmp_path / "chain.json", nonword_label="b")
    assert not (tmp_path / "chain.json").exists()
    # a label that matches nothing keeps every state
    data = chain_to_json(model, nonword_label="^")
    assert len(data["chain"]) == len(model) == 3
