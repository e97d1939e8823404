"""Build configuration and emote index loading.

Configuration files are JSON documents using the same camelCase keys the
bundler configuration uses:

    {
        "filename": "emote-manifest.json",
        "emotePath": "img/emotes",
        "index": "./assets/emotes.json",
        "emoteRoot": "./assets/emotes/emoticons",
        "animatedEmoteRoot": "./assets/emotes/emoticons-animated/gif",
        "cssChunk": "emotes",
        "modifiers": ["mirror", "flip"],
        "tags": ["nsfw", "weeb"]
    }

Relative paths are resolved against the directory of the config file.
"""

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .aggregator import VariantRoot, standard_roots
from .core.errors import ConfigError

# camelCase key -> required
CONFIG_KEYS = {
    "filename": True,
    "emotePath": True,
    "index": True,
    "emoteRoot": True,
    "animatedEmoteRoot": True,
    "cssChunk": True,
    "modifiers": False,
    "tags": False,
    "maxWorkers": False,
}

# Top-level field of the index document holding the emote names
INDEX_FIELD = "default"


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Config key '{key}' must be a non-empty string")
    return value


def _require_str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"Config key '{key}' must be a list of strings")
    return list(value)


def _resolve(path: str, base_dir: Path | None) -> Path:
    candidate = Path(path)
    if base_dir is not None and not candidate.is_absolute():
        candidate = base_dir / candidate
    return candidate


@dataclass
class ManifestConfig:
    """Settings for one manifest build."""

    filename: str
    emote_path: str
    index: Path
    emote_root: Path
    animated_emote_root: Path
    css_chunk: str
    modifiers: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    max_workers: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], base_dir: Path | None = None) -> "ManifestConfig":
        """Create a config from a camelCase dictionary.

        Args:
            data: Parsed configuration document
            base_dir: Directory relative paths are resolved against

        Raises:
            ConfigError: If a key is missing, unknown or has the wrong type
        """
        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object")

        missing = [key for key, required in CONFIG_KEYS.items() if required and key not in data]
        if missing:
            raise ConfigError(f"Missing config keys: {', '.join(missing)}")

        unknown = sorted(set(data) - set(CONFIG_KEYS))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        max_workers = data.get("maxWorkers")
        if max_workers is not None and (
            isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1
        ):
            raise ConfigError("Config key 'maxWorkers' must be a positive integer")

        return cls(
            filename=_require_str(data, "filename"),
            emote_path=_require_str(data, "emotePath"),
            index=_resolve(_require_str(data, "index"), base_dir),
            emote_root=_resolve(_require_str(data, "emoteRoot"), base_dir),
            animated_emote_root=_resolve(_require_str(data, "animatedEmoteRoot"), base_dir),
            css_chunk=_require_str(data, "cssChunk"),
            modifiers=_require_str_list(data, "modifiers"),
            tags=_require_str_list(data, "tags"),
            max_workers=max_workers,
        )

    @classmethod
    def from_file(cls, path: Path) -> "ManifestConfig":
        """Load a config file; relative paths resolve against its directory.

        Raises:
            ConfigError: If the file is missing, not JSON or invalid
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Config file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

        return cls.from_dict(data, base_dir=path.resolve().parent)

    def roots(self) -> list[VariantRoot]:
        """Variant roots of the standard layout below the two base directories."""
        return standard_roots(self.emote_root, self.animated_emote_root)


def load_index(path: Path) -> list[str]:
    """Load the canonical, ordered list of emote names.

    The index is a JSON document whose ``default`` field holds the names.

    Args:
        path: Path to the index document

    Returns:
        Emote names in index order

    Raises:
        ConfigError: If the document is missing, malformed or has duplicates
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Emote index not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Emote index {path} is not valid JSON: {e}") from e

    names = document.get(INDEX_FIELD) if isinstance(document, dict) else None
    if not isinstance(names, list) or not all(isinstance(n, str) and n for n in names):
        raise ConfigError(f"Emote index {path} must hold a list of names under '{INDEX_FIELD}'")

    duplicates = sorted(name for name, count in Counter(names).items() if count > 1)
    if duplicates:
        raise ConfigError(f"Emote index {path} lists names more than once: {', '.join(duplicates)}")

    return list(names)
