"""Content-addressed emote asset writer."""

import logging

from .core.types import EmoteRecord
from .matcher import EmoteMatch, asset_path
from .outputs import BuildOutputSet

logger = logging.getLogger(__name__)


class AssetWriter:
    """Registers matched emote images in the build output set.

    Each variant lands at ``<emote_path>/<name>.<hash><ext>``; the returned
    records reference exactly those paths.
    """

    def __init__(self, outputs: BuildOutputSet, emote_path: str):
        self.outputs = outputs
        self.emote_path = emote_path

    def write(self, matches: list[EmoteMatch]) -> list[EmoteRecord]:
        """Register every matched variant and build the emote records.

        Args:
            matches: Matched emotes in manifest order

        Returns:
            One EmoteRecord per match, in the same order

        Raises:
            OutputConflictError: If two different files map to one path
        """
        records: list[EmoteRecord] = []
        count = 0

        for match in matches:
            for variant in match.variants:
                self.outputs.register(asset_path(self.emote_path, variant), variant.data)
                count += 1
            records.append(match.to_record(self.emote_path))

        logger.info("Registered %d emote images for %d emotes", count, len(records))
        return records
