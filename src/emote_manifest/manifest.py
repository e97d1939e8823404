"""Manifest assembly and serialization."""

import json
import logging

from .core.errors import ManifestValidationError
from .core.types import EmoteRecord, Manifest
from .core.validator import validate_manifest_with_error_details
from .outputs import BuildOutputSet

logger = logging.getLogger(__name__)


def build_manifest(
    records: list[EmoteRecord],
    css: str,
    modifiers: list[str],
    tags: list[str],
) -> Manifest:
    """Assemble the manifest document.

    Key order is fixed (emotes, css, modifiers, tags) and every list keeps
    the order it was given in.
    """
    return {
        "emotes": list(records),
        "css": css,
        "modifiers": list(modifiers),
        "tags": list(tags),
    }


def serialize_manifest(manifest: Manifest) -> bytes:
    """Encode a manifest as compact UTF-8 JSON."""
    return json.dumps(manifest, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


class ManifestBuilder:
    """Builds, validates and registers the emote manifest."""

    def __init__(self, outputs: BuildOutputSet, filename: str):
        self.outputs = outputs
        self.filename = filename

    def emit(
        self,
        records: list[EmoteRecord],
        css: str,
        modifiers: list[str],
        tags: list[str],
    ) -> Manifest:
        """Register the manifest under the configured filename.

        Args:
            records: Emote records in index order
            css: Resolved filename of the emote stylesheet
            modifiers: Modifier names, passed through unchanged
            tags: Tag names, passed through unchanged

        Returns:
            The registered manifest

        Raises:
            ManifestValidationError: If the manifest violates the schema
            OutputConflictError: If a different manifest is already registered
        """
        manifest = build_manifest(records, css, modifiers, tags)
        is_valid, error_msg = validate_manifest_with_error_details(manifest)
        if not is_valid:
            raise ManifestValidationError(f"Manifest {self.filename} failed validation: {error_msg}")

        self.outputs.register(self.filename, serialize_manifest(manifest))
        logger.info("Registered manifest %s with %d emotes", self.filename, len(records))
        return manifest
