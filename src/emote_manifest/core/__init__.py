"""Core utilities for manifest generation.

This package contains the error hierarchy, type definitions, content
hashing, dimension probing and schema validation used by every stage
of the build.
"""

from .errors import (
    ChunkResolutionError,
    ConfigError,
    EmoteManifestError,
    ImageDecodeError,
    ManifestValidationError,
    MissingEmoteError,
    OutputConflictError,
    ScanError,
)
from .metadata import HASH_LENGTH, hash_content, probe_dimensions
from .types import Dimensions, EmoteRecord, ImageVariant, Manifest, SizeClass, VersionDescriptor
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "ChunkResolutionError",
    "ConfigError",
    "Dimensions",
    "EmoteManifestError",
    "EmoteRecord",
    "HASH_LENGTH",
    "ImageDecodeError",
    "ImageVariant",
    "Manifest",
    "ManifestValidationError",
    "MissingEmoteError",
    "OutputConflictError",
    "ScanError",
    "SizeClass",
    "VersionDescriptor",
    "hash_content",
    "probe_dimensions",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
