"""Emote Manifest Builder.

This package turns directories of static and animated emote images, split
into 1x/2x/4x density variants, into content-addressed build outputs and a
single JSON manifest the chat client uses to resolve emote names.
"""

from .aggregator import VariantRoot, aggregate_variants, standard_roots
from .bundler import Bundler, StaticBundler, StatsBundler, resolve_css
from .config import ManifestConfig, load_index
from .core import (
    ChunkResolutionError,
    ConfigError,
    EmoteManifestError,
    EmoteRecord,
    ImageDecodeError,
    ImageVariant,
    Manifest,
    ManifestValidationError,
    MissingEmoteError,
    OutputConflictError,
    ScanError,
    SizeClass,
    VersionDescriptor,
    validate_manifest,
    validate_manifest_with_error_details,
)
from .manifest import ManifestBuilder, build_manifest, serialize_manifest
from .matcher import EmoteMatch, asset_path, match_emotes
from .outputs import BuildOutputSet
from .pipeline import ManifestPipeline
from .scanner import list_image_files, read_variant, scan_directory
from .writer import AssetWriter

from .cli import generate_manifest, main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "ManifestPipeline",
    "ManifestConfig",
    "BuildOutputSet",
    "load_index",
    # Stages
    "VariantRoot",
    "standard_roots",
    "aggregate_variants",
    "list_image_files",
    "read_variant",
    "scan_directory",
    "EmoteMatch",
    "match_emotes",
    "asset_path",
    "AssetWriter",
    "ManifestBuilder",
    "build_manifest",
    "serialize_manifest",
    # Bundler collaborator
    "Bundler",
    "StaticBundler",
    "StatsBundler",
    "resolve_css",
    # Types
    "SizeClass",
    "ImageVariant",
    "EmoteRecord",
    "VersionDescriptor",
    "Manifest",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Errors
    "EmoteManifestError",
    "ConfigError",
    "ScanError",
    "ImageDecodeError",
    "ManifestValidationError",
    "MissingEmoteError",
    "ChunkResolutionError",
    "OutputConflictError",
    # CLI
    "generate_manifest",
    "main",
]
