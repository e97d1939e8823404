"""Build output set.

The output set collects every artifact the build produces (emote images and
the manifest itself) keyed by output path. Registration is thread-safe and
write-once per path.
"""

import logging
import threading
from collections.abc import Iterator
from pathlib import Path

from .core.errors import OutputConflictError

logger = logging.getLogger(__name__)


class BuildOutputSet:
    """Thread-safe, write-once mapping from output path to content.

    Registering the same bytes twice under one path is a no-op, since
    content-addressed paths make that expected. Registering different bytes
    under an existing path raises OutputConflictError.

    Example:
        >>> outputs = BuildOutputSet()
        >>> outputs.register("img/emotes/kappa.1a2b3c.png", data)
        >>> outputs.write_to(Path("static"))
    """

    def __init__(self) -> None:
        self._entries: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def register(self, path: str, data: bytes) -> None:
        """Add an artifact to the output set.

        Args:
            path: Output path relative to the build output directory
            data: Artifact content

        Raises:
            OutputConflictError: If path already holds different content
        """
        with self._lock:
            existing = self._entries.get(path)
            if existing is not None:
                if existing != data:
                    raise OutputConflictError(path)
                return
            self._entries[path] = bytes(data)

    def merge(self, other: "BuildOutputSet") -> None:
        """Register every artifact of another output set, all or nothing.

        Every path is checked before anything is inserted, so a conflict
        leaves this set exactly as it was.

        Raises:
            OutputConflictError: If any path already holds different content
        """
        with other._lock:
            incoming = dict(other._entries)

        with self._lock:
            for path, data in incoming.items():
                existing = self._entries.get(path)
                if existing is not None and existing != data:
                    raise OutputConflictError(path)
            self._entries.update(incoming)

        logger.debug("Merged %d build outputs", len(incoming))

    def get(self, path: str) -> bytes | None:
        with self._lock:
            return self._entries.get(path)

    def paths(self) -> list[str]:
        """Return all registered paths, sorted."""
        with self._lock:
            return sorted(self._entries)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def write_to(self, directory: Path) -> list[Path]:
        """Write every artifact below a directory.

        Args:
            directory: Build output directory

        Returns:
            Paths of the files written

        Raises:
            ValueError: If an output path escapes the directory
            OSError: If a file cannot be written
        """
        base = directory.resolve()

        with self._lock:
            entries = sorted(self._entries.items())

        targets: list[tuple[Path, bytes]] = []
        for path, data in entries:
            target = (base / path).resolve()
            if not target.is_relative_to(base):
                raise ValueError(f"Output path {path} escapes output directory {directory}")
            targets.append((target, data))

        written: list[Path] = []
        for target, data in targets:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
            written.append(target)

        logger.info("Wrote %d build outputs to %s", len(written), base)
        return written
