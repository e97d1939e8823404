"""Tests for stylesheet resolution through the bundler."""

import json
from pathlib import Path

import pytest

from emote_manifest.bundler import Bundler, StaticBundler, StatsBundler, resolve_css
from emote_manifest.core.errors import ChunkResolutionError, ConfigError


class TestResolveCss:
    """Test picking the stylesheet of a chunk."""

    def test_picks_css_file(self) -> None:
        bundler = StaticBundler({"emotes": ["emotes.abc123.js", "emotes.def456.css"]})

        assert resolve_css(bundler, "emotes") == "emotes.def456.css"

    def test_first_css_wins(self) -> None:
        bundler = StaticBundler({"emotes": ["a.css", "b.css"]})

        assert resolve_css(bundler, "emotes") == "a.css"

    def test_unknown_chunk(self) -> None:
        with pytest.raises(ChunkResolutionError, match="Unknown bundler chunk: emotes"):
            resolve_css(StaticBundler({"chat": ["chat.css"]}), "emotes")

    def test_chunk_without_css(self) -> None:
        with pytest.raises(ChunkResolutionError, match="no .css output"):
            resolve_css(StaticBundler({"emotes": ["emotes.js", "emotes.css.map"]}), "emotes")

    def test_static_bundler_is_a_bundler(self) -> None:
        assert isinstance(StaticBundler({}), Bundler)


class TestStatsBundler:
    """Test reading webpack-style stats."""

    def test_entrypoints_with_asset_objects(self) -> None:
        bundler = StatsBundler.from_stats(
            {"entrypoints": {"emotes": {"assets": [{"name": "emotes.abc.css"}, {"name": "emotes.abc.js"}]}}}
        )

        assert bundler.chunk_files("emotes") == ["emotes.abc.css", "emotes.abc.js"]

    def test_entrypoints_with_strings(self) -> None:
        bundler = StatsBundler.from_stats({"entrypoints": {"emotes": {"assets": ["emotes.abc.css"]}}})

        assert resolve_css(bundler, "emotes") == "emotes.abc.css"

    def test_assets_by_chunk_name(self) -> None:
        bundler = StatsBundler.from_stats(
            {"assetsByChunkName": {"emotes": ["emotes.abc.js", "emotes.abc.css"], "chat": "chat.abc.js"}}
        )

        assert resolve_css(bundler, "emotes") == "emotes.abc.css"
        assert bundler.chunk_files("chat") == ["chat.abc.js"]

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "stats.json"
        path.write_text(json.dumps({"assetsByChunkName": {"emotes": ["e.css"]}}), encoding="utf-8")

        assert resolve_css(StatsBundler.from_file(path), "emotes") == "e.css"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            StatsBundler.from_file(tmp_path / "stats.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "stats.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ConfigError, match="not valid JSON"):
            StatsBundler.from_file(path)
