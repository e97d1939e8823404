"""Manifest build pipeline.

This module wires the stages together: resolve the emote stylesheet, load
the index, scan the variant roots, match them against the index, register
the images and finally register the manifest. Any failure aborts the build
before the manifest is registered.
"""

import logging

from .aggregator import VariantRoot, aggregate_variants
from .bundler import Bundler, resolve_css
from .config import ManifestConfig, load_index
from .core.types import ImageVariant, Manifest
from .manifest import ManifestBuilder
from .matcher import EmoteMatch, match_emotes
from .outputs import BuildOutputSet
from .writer import AssetWriter

logger = logging.getLogger(__name__)


class ManifestPipeline:
    """Main interface for emote manifest generation.

    Example:
        >>> config = ManifestConfig.from_file(Path("emotes.config.json"))
        >>> bundler = StatsBundler.from_file(Path("stats.json"))
        >>> pipeline = ManifestPipeline(config, bundler)
        >>> manifest = pipeline.build()
        >>> pipeline.outputs.write_to(Path("static"))
    """

    def __init__(
        self,
        config: ManifestConfig,
        bundler: Bundler,
        outputs: BuildOutputSet | None = None,
        roots: list[VariantRoot] | None = None,
    ):
        """Initialize the pipeline.

        Args:
            config: Build configuration
            bundler: Bundler used to resolve the emote stylesheet
            outputs: Output set to register artifacts in (a new one by default)
            roots: Variant roots to scan (the standard six by default)
        """
        self.config = config
        self.bundler = bundler
        self.outputs = outputs if outputs is not None else BuildOutputSet()
        self.roots = roots if roots is not None else config.roots()

    def scan(self) -> list[ImageVariant]:
        """Scan every variant root."""
        return aggregate_variants(self.roots, max_workers=self.config.max_workers)

    def load_index(self) -> list[str]:
        """Load the canonical emote names."""
        index = load_index(self.config.index)
        logger.info("Loaded %d emote names from %s", len(index), self.config.index)
        return index

    def match(self, variants: list[ImageVariant], index: list[str] | None = None) -> list[EmoteMatch]:
        """Match scanned variants against the emote index (loaded if not given)."""
        if index is None:
            index = self.load_index()
        return match_emotes(index, variants)

    def build(self) -> Manifest:
        """Run the whole build and register every output.

        Returns:
            The registered manifest

        Raises:
            EmoteManifestError: If any stage fails
            OutputConflictError: If self.outputs already holds a different artifact
                under one of the build paths; self.outputs is then left untouched
        """
        css = resolve_css(self.bundler, self.config.css_chunk)
        logger.info("Resolved stylesheet for chunk %s: %s", self.config.css_chunk, css)

        index = self.load_index()
        matches = self.match(self.scan(), index)

        # Nothing reaches self.outputs until the manifest has validated
        staged = BuildOutputSet()
        records = AssetWriter(staged, self.config.emote_path).write(matches)
        manifest = ManifestBuilder(staged, self.config.filename).emit(
            records,
            css,
            self.config.modifiers,
            self.config.tags,
        )

        self.outputs.merge(staged)

        return manifest
