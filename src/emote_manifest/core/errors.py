"""Exceptions raised while building an emote manifest.

Every failure aborts the whole build; nothing here is meant to be caught and
downgraded to a warning.
"""

from pathlib import Path


class EmoteManifestError(Exception):
    """Base class for all manifest build failures."""


class ConfigError(EmoteManifestError):
    """Configuration or index document is missing or malformed."""


class ScanError(EmoteManifestError):
    """A variant directory or image file could not be read."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ImageDecodeError(EmoteManifestError):
    """The pixel dimensions of an image file could not be determined."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class MissingEmoteError(EmoteManifestError):
    """One or more canonical emote names have no image file in any root."""

    def __init__(self, names: list[str]):
        self.names = list(names)
        super().__init__(f"missing file for emote {', '.join(self.names)}")


class ChunkResolutionError(EmoteManifestError):
    """The bundler could not provide a stylesheet for the requested chunk."""


class OutputConflictError(EmoteManifestError):
    """Two different payloads were registered under the same output path."""

    def __init__(self, path: str):
        super().__init__(f"Conflicting content registered for output: {path}")
        self.path = path


class ManifestValidationError(EmoteManifestError):
    """The assembled manifest does not conform to the manifest schema."""
