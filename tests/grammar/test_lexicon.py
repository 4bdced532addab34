"""
Tests for the Lexical Resource Tables
=====================================
Defaults, override merging and the load/update/reset lifecycle.
"""

import json
import dataclasses

import pytest

from config_logging import ConfigurationError
from grammar import config as grammar_config
from grammar import lexicon as lexicon_module
from grammar.lexicon import (
    LexiconTables,
    get_lexicon,
    update_lexicon,
    load_lexicon_file,
    reset_lexicon,
)


class TestDefaults:
    """Stock table contents."""

    def test_contractions(self):
        tables = LexiconTables.defaults()
        assert len(tables.contractions) == 12
        assert tables.contractions["dont"] == "don't"

    def test_conciseness_delete_entry(self):
        assert LexiconTables.defaults().concise["in terms of"] == ""

    def test_hyphen_table_size(self):
        assert len(LexiconTables.defaults().hyphens) >= 75

    def test_verb_suffix_order(self):
        assert LexiconTables.defaults().verb_suffixes == ("ing", "ed", "es", "s")

    def test_table_names(self):
        names = LexiconTables.table_names()
        assert "nouns" in names
        assert "concise" in names

    def test_tables_are_immutable(self):
        tables = LexiconTables.defaults()
        with pytest.raises(dataclasses.FrozenInstanceError):
            tables.nouns = frozenset()
        with pytest.raises(TypeError):
            tables.contractions["aint"] = "ain't"

    def test_to_dict_is_json_serializable(self):
        data = LexiconTables.defaults().to_dict()
        assert json.loads(json.dumps(data))["contractions"]["cant"] == "can't"
        assert data["nouns"] == sorted(data["nouns"])


class TestMerged:
    """Tests for LexiconTables.merged()."""

    def test_set_tables_are_unioned(self):
        tables = LexiconTables.defaults().merged(nouns=["Widget"])
        assert "widget" in tables.nouns
        assert "car" in tables.nouns

    def test_mapping_keys_are_normalized(self):
        tables = LexiconTables.defaults().merged(concise={"In Close  Proximity to": "near"})
        assert tables.concise["in close proximity to"] == "near"
        assert tables.concise["in order to"] == "to"

    def test_override_wins(self):
        tables = LexiconTables.defaults().merged(concise={"in order to": "so as to"})
        assert tables.concise["in order to"] == "so as to"

    def test_verb_suffixes_replaced(self):
        tables = LexiconTables.defaults().merged(verb_suffixes=["ING", "ed"])
        assert tables.verb_suffixes == ("ing", "ed")

    def test_original_untouched(self):
        original = LexiconTables.defaults()
        original.merged(nouns=["gizmo"])
        assert "gizmo" not in original.nouns

    def test_unknown_table(self):
        with pytest.raises(ConfigurationError) as exc_info:
            LexiconTables.defaults().merged(adverbs=["quickly"])
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    def test_string_for_word_set(self):
        with pytest.raises(ConfigurationError):
            LexiconTables.defaults().merged(nouns="gizmo")

    def test_list_for_mapping(self):
        with pytest.raises(ConfigurationError):
            LexiconTables.defaults().merged(hyphens=["user friendly"])

    @pytest.mark.parametrize("value", ["ing", b"ing", 3])
    def test_bad_verb_suffixes(self, value):
        with pytest.raises(ConfigurationError):
            LexiconTables.defaults().merged(verb_suffixes=value)


class TestLifecycle:
    """get/update/load/reset of the process-wide tables."""

    def test_update_swaps_tables(self):
        before = get_lexicon()
        after = update_lexicon(nouns=["gizmo"])
        assert get_lexicon() is after
        assert "gizmo" in after.nouns
        # A snapshot taken earlier keeps its contents
        assert "gizmo" not in before.nouns

    def test_rejected_update_keeps_tables(self):
        before = get_lexicon()
        with pytest.raises(ConfigurationError):
            update_lexicon(bogus=["x"])
        assert get_lexicon() is before

    def test_string_verb_suffixes_rejected(self):
        before = get_lexicon()
        with pytest.raises(ConfigurationError):
            update_lexicon(verb_suffixes="ing")
        assert get_lexicon().verb_suffixes == before.verb_suffixes

    def test_reset(self):
        update_lexicon(nouns=["gizmo"])
        reset_lexicon()
        assert "gizmo" not in get_lexicon().nouns

    def test_load_file(self, tmp_path):
        path = tmp_path / "house_style.json"
        path.write_text(json.dumps({
            "nouns": ["gizmo"],
            "hyphens": {"user friendly": "user-friendly"},
        }), encoding="utf-8")

        tables = load_lexicon_file(path)
        assert "gizmo" in tables.nouns
        assert tables.hyphens["user friendly"] == "user-friendly"

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_lexicon_file(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_lexicon_file(path)

    def test_load_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('["gizmo"]', encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_lexicon_file(path)

    def test_configured_override_file(self, tmp_path, monkeypatch):
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"nouns": ["gizmo"]}), encoding="utf-8")
        grammar_config.set("lexicon.override_file", str(path))
        monkeypatch.setattr(lexicon_module, "_lexicon", None)

        assert "gizmo" in get_lexicon().nouns

    def test_broken_override_file_falls_back_to_defaults(self, tmp_path, monkeypatch):
        grammar_config.set("lexicon.override_file", str(tmp_path / "missing.json"))
        monkeypatch.setattr(lexicon_module, "_lexicon", None)

        tables = get_lexicon()
        assert "gizmo" not in tables.nouns
        assert tables.nouns == LexiconTables.defaults().nouns
