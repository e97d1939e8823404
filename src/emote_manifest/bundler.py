"""Bundler collaborator interface.

The bundler owns script and stylesheet compilation. The manifest only needs
one thing from it: the final (hashed) filename of the stylesheet produced for
a named chunk.
"""

import json
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from .core.errors import ChunkResolutionError, ConfigError

CSS_SUFFIX = ".css"


@runtime_checkable
class Bundler(Protocol):
    """Anything that can list the output files of a named chunk."""

    def chunk_files(self, chunk: str) -> list[str]:
        """Return the output filenames of a chunk.

        Raises:
            KeyError: If the chunk is unknown
        """
        ...


class StaticBundler:
    """Bundler backed by an in-memory chunk → files mapping.

    Example:
        >>> bundler = StaticBundler({"emotes": ["emotes.3f9a1c.css"]})
        >>> resolve_css(bundler, "emotes")
        'emotes.3f9a1c.css'
    """

    def __init__(self, chunks: dict[str, list[str]]):
        self.chunks = {name: list(files) for name, files in chunks.items()}

    def chunk_files(self, chunk: str) -> list[str]:
        return list(self.chunks[chunk])


class StatsBundler(StaticBundler):
    """Bundler reading a webpack-style stats document.

    Both ``entrypoints.<name>.assets`` (strings or ``{"name": ...}``
    objects) and ``assetsByChunkName.<name>`` (a string or list of strings)
    are understood. Entrypoints win when a name appears in both.
    """

    @classmethod
    def from_stats(cls, stats: dict[str, Any]) -> "StatsBundler":
        if not isinstance(stats, dict):
            raise ConfigError("Bundler stats must be a JSON object")

        chunks: dict[str, list[str]] = {}

        for name, files in (stats.get("assetsByChunkName") or {}).items():
            chunks[name] = [files] if isinstance(files, str) else [str(f) for f in files]

        for name, entry in (stats.get("entrypoints") or {}).items():
            assets = entry.get("assets", []) if isinstance(entry, dict) else []
            chunks[name] = [a["name"] if isinstance(a, dict) else str(a) for a in assets]

        return cls(chunks)

    @classmethod
    def from_file(cls, path: Path) -> "StatsBundler":
        """Load bundler stats from a JSON file.

        Raises:
            ConfigError: If the file is missing or not valid JSON
        """
        try:
            with path.open("r", encoding="utf-8") as f:
                stats = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError(f"Bundler stats file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Bundler stats file {path} is not valid JSON: {e}") from e

        return cls.from_stats(stats)


def resolve_css(bundler: Bundler, chunk: str) -> str:
    """Find the stylesheet produced for a chunk.

    Args:
        bundler: Bundler to query
        chunk: Name of the chunk holding the emote styles

    Returns:
        The first output filename of the chunk ending in ``.css``

    Raises:
        ChunkResolutionError: If the chunk is unknown or has no stylesheet
    """
    try:
        files = bundler.chunk_files(chunk)
    except KeyError as e:
        raise ChunkResolutionError(f"Unknown bundler chunk: {chunk}") from e

    for name in files:
        if name.endswith(CSS_SUFFIX):
            return name

    raise ChunkResolutionError(f"Bundler chunk {chunk} has no {CSS_SUFFIX} output")
