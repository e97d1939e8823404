"""Type definitions for emote manifests.

This module defines the TypedDict classes that mirror the JSON schema structure
defined in schemas/emote-manifest.schema.json, plus the in-memory image
variant record produced by the scanner.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TypedDict


class SizeClass(str, Enum):
    """Relative pixel density of an image variant."""

    X1 = "1x"
    X2 = "2x"
    X4 = "4x"

    def __str__(self) -> str:
        return self.value


class Dimensions(TypedDict):
    """Decoded pixel size of an image."""

    height: int
    width: int


class VersionDescriptor(TypedDict):
    """One renderable version of an emote."""

    path: str  # Content-addressed output path
    animated: bool
    dimensions: Dimensions
    size: str  # SizeClass value ("1x", "2x" or "4x")


class EmoteRecord(TypedDict):
    """All versions available for one canonical emote name."""

    name: str
    versions: list[VersionDescriptor]


class Manifest(TypedDict):
    """Complete emote manifest consumed by the chat client."""

    emotes: list[EmoteRecord]
    css: str  # Resolved filename of the emote stylesheet
    modifiers: list[str]
    tags: list[str]


@dataclass(frozen=True)
class ImageVariant:
    """A single image file read from one of the variant roots.

    Attributes:
        name: Emote name (file basename without its extension)
        size: Size class of the root the file was found in
        animated: Whether the file came from an animated root
        width: Decoded pixel width
        height: Decoded pixel height
        hash: First 6 hex characters of the SHA-1 of ``data``
        ext: File extension including the leading dot (may be empty)
        data: Raw file content
        source: Path the file was read from
    """

    name: str
    size: SizeClass
    animated: bool
    width: int
    height: int
    hash: str
    ext: str
    data: bytes = field(repr=False)
    source: Path | None = field(default=None, compare=False)

    @property
    def dimensions(self) -> Dimensions:
        """Pixel size in manifest form (a new dict on every access)."""
        return {"height": self.height, "width": self.width}
