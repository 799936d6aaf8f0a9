"""Tests for JSONPresetStore.

Author: Michael Economou
Date: 2025-06-10
"""

import json

import pytest

from bulkrename.core.bulk_renamer import BulkRenamer
from bulkrename.core.exceptions import PresetNotFoundError
from bulkrename.operations.enumerate_operation import EnumerateOperation
from bulkrename.operations.remove_characters_operation import RemoveCharactersOperation
from bulkrename.utils.shared.json_preset_store import JSONPresetStore, get_default_config_dir


@pytest.fixture
def store(tmp_path):
    return JSONPresetStore(config_dir=tmp_path / "presets")


def sample_chain():
    remove = RemoveCharactersOperation()
    remove.set_custom_preset("_-", False)
    return [remove, EnumerateOperation(start=1, padding=3, separator="_")]


class TestJSONPresetStore:
    """Test cases for saving and loading presets."""

    def test_load_without_file(self, store):
        assert store.load() is True
        assert store.list_presets() == []

    def test_save_and_reload(self, store):
        store.save_preset("numbered", sample_chain())
        assert store.is_dirty
        assert store.save() is True
        assert not store.is_dirty

        reloaded = JSONPresetStore(config_dir=store.config_dir)
        assert reloaded.load() is True
        assert reloaded.list_presets() == ["numbered"]

        chain = reloaded.load_preset("numbered")
        previews = BulkRenamer(chain).get_rename_previews(["tree_a", "rock-b"])
        assert [p.result for p in previews] == ["treea_001", "rockb_002"]

    def test_file_format(self, store):
        store.save_preset("p", [EnumerateOperation()])
        store.save()
        data = json.loads(store.presets_file.read_text(encoding="utf-8"))
        assert data["presets"]["p"][0]["type"] == "enumerate"
        assert data["_metadata"]["app_name"] == "bulkrename"

    def test_backup_created_on_second_save(self, store):
        store.save_preset("a", [EnumerateOperation()])
        store.save()
        store.save_preset("b", [EnumerateOperation()])
        store.save()
        backup = json.loads(store.backup_file.read_text(encoding="utf-8"))
        assert list(backup["presets"]) == ["a"]

    def test_loaded_chains_are_independent(self, store):
        store.save_preset("p", sample_chain())
        first = store.load_preset("p")
        first[0].set_custom_preset("x", False)
        second = store.load_preset("p")
        assert second[0].custom_preset.characters == "_-"

    def test_delete_preset(self, store):
        store.save_preset("p", [])
        store.delete_preset("p")
        assert not store.has_preset("p")

    def test_missing_preset_raises(self, store):
        with pytest.raises(PresetNotFoundError):
            store.load_preset("nope")
        with pytest.raises(PresetNotFoundError):
            store.delete_preset("nope")

    def test_corrupt_file_reports_failure(self, store):
        store.config_dir.mkdir(parents=True)
        store.presets_file.write_text("{not json", encoding="utf-8")
        assert store.load() is False

    def test_ignores_malformed_entries(self, store):
        store.config_dir.mkdir(parents=True)
        store.presets_file.write_text(
            json.dumps({"presets": {"ok": [], "bad": "x"}}), encoding="utf-8"
        )
        assert store.load() is True
        assert store.list_presets() == ["ok"]


def test_default_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("BULKRENAME_CONFIG_DIR", str(tmp_path))
    assert get_default_config_dir() == tmp_path


def test_default_dir_in_home(monkeypatch):
    monkeypatch.delenv("BULKRENAME_CONFIG_DIR", raising=False)
    assert get_default_config_dir().name == ".bulkrename"
