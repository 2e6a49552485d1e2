"""
Verified-Source Classifier Tests
"""

import json

import pytest

from story_engine.verification import (
    DEFAULT_ALLOW_LIST_PATH, ENV_ALLOW_LIST_PATH,
    VerifiedSourceRegistry, default_registry, is_verified_source,
)


class TestClassification:

    @pytest.mark.parametrize("name", ["reuters", "REUTERS", "Reuters Newswire", "Reuters via Yahoo News"])
    def test_case_insensitive_substring(self, name):
        assert is_verified_source(name)

    @pytest.mark.parametrize("name", ["Random Blog", "", None, "   "])
    def test_not_verified(self, name):
        assert not is_verified_source(name)

    def test_whitespace_is_normalised(self):
        assert is_verified_source("The   Guardian  (UK)")
        assert is_verified_source("Al\tJazeera English")

    def test_default_list_covers_canonical_outlets(self):
        registry = default_registry()
        for name in ["AP News", "BBC", "The Guardian", "Bloomberg", "PTI", "Al Jazeera", "The Hindu"]:
            assert registry.is_verified(name), name

    def test_count_verified(self):
        registry = VerifiedSourceRegistry.from_names(["Reuters", "BBC"])
        assert registry.count_verified(["Reuters", "BBC World", "Random Blog", None]) == 2

    def test_contains(self):
        registry = VerifiedSourceRegistry.from_names(["Reuters"])
        assert "Reuters UK" in registry
        assert 42 not in registry


class TestRegistryConfiguration:

    def test_default_file_is_grouped(self):
        with open(DEFAULT_ALLOW_LIST_PATH, encoding="utf-8") as f:
            config = json.load(f)
        assert isinstance(config["sources"], dict)
        assert len(default_registry()) == sum(len(g) for g in config["sources"].values())

    def test_load_flat_list(self, tmp_path):
        path = tmp_path / "allow.json"
        path.write_text(json.dumps({"sources": ["Valley Gazette", "Harbour Times"]}), encoding="utf-8")

        registry = VerifiedSourceRegistry.load(path)

        assert len(registry) == 2
        assert registry.is_verified("valley gazette online")

    def test_load_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "allow.json"
        path.write_text(json.dumps({"sources": {"local": ["Harbour Times"]}}), encoding="utf-8")
        monkeypatch.setenv(ENV_ALLOW_LIST_PATH, str(path))

        registry = VerifiedSourceRegistry.load()

        assert registry.is_verified("Harbour Times")
        assert not registry.is_verified("Reuters")

    @pytest.mark.parametrize("payload", [
        {"outlets": ["Reuters"]},
        {"sources": "Reuters"},
        {"sources": {"wire": [1, 2]}},
        ["Reuters"],
    ])
    def test_malformed_allow_list_raises(self, tmp_path, payload):
        path = tmp_path / "allow.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(ValueError):
            VerifiedSourceRegistry.load(path)

    def test_extend_returns_new_registry(self):
        base = VerifiedSourceRegistry.from_names(["Reuters"])
        extended = base.extend(["Harbour Times"])

        assert extended.is_verified("Harbour Times")
        assert not base.is_verified("Harbour Times")
        assert extended.is_verified("Reuters")

    def test_blank_names_are_ignored(self):
        registry = VerifiedSourceRegistry.from_names(["", "  ", "BBC"])
        assert len(registry) == 1
        assert not registry.is_verified("anything")
