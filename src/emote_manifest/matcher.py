"""Matching of scanned variants against the canonical emote index."""

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from .core.errors import MissingEmoteError
from .core.types import EmoteRecord, ImageVariant, VersionDescriptor

logger = logging.getLogger(__name__)


def asset_path(emote_path: str, variant: ImageVariant) -> str:
    """Compute the content-addressed output path of a variant.

    Identical bytes always map to the same path and any content change
    produces a new one.

    Example:
        ("img/emotes", kappa.png with hash 1a2b3c) -> "img/emotes/kappa.1a2b3c.png"

    Args:
        emote_path: Output directory prefix for emote images
        variant: The image variant

    Returns:
        Output path using forward slashes
    """
    prefix = emote_path.rstrip("/")
    filename = f"{variant.name}.{variant.hash}{variant.ext}"
    return f"{prefix}/{filename}" if prefix else filename


@dataclass
class EmoteMatch:
    """All variants found for one canonical emote name."""

    name: str
    variants: list[ImageVariant] = field(default_factory=list)

    def to_record(self, emote_path: str) -> EmoteRecord:
        """Convert the match into a manifest record.

        Args:
            emote_path: Output directory prefix for emote images

        Returns:
            EmoteRecord with one version per variant, in variant order
        """
        versions: list[VersionDescriptor] = [
            {
                "path": asset_path(emote_path, variant),
                "animated": variant.animated,
                "dimensions": variant.dimensions,
                "size": variant.size.value,
            }
            for variant in self.variants
        ]
        return {"name": self.name, "versions": versions}


def match_emotes(index: list[str], variants: list[ImageVariant]) -> list[EmoteMatch]:
    """Collect the variants of every canonical emote.

    Every name without a single variant is collected before failing, so one
    run reports all missing emotes at once.

    Args:
        index: Canonical emote names, in manifest order
        variants: All scanned variants

    Returns:
        One EmoteMatch per index name, in index order

    Raises:
        MissingEmoteError: If any name has no variant in any root
    """
    by_name: dict[str, list[ImageVariant]] = defaultdict(list)
    for variant in variants:
        by_name[variant.name].append(variant)

    matches: list[EmoteMatch] = []
    missing: list[str] = []

    for name in index:
        found = by_name.get(name, [])
        if not found:
            missing.append(name)
            continue
        matches.append(EmoteMatch(name=name, variants=list(found)))

    if missing:
        logger.error("No image files found for %d emote(s): %s", len(missing), ", ".join(missing))
        raise MissingEmoteError(missing)

    unused = set(by_name) - set(index)
    if unused:
        logger.debug("Ignoring %d image name(s) not in the index: %s", len(unused), ", ".join(sorted(unused)))

    return matches
