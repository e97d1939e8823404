"""Variant root layout and aggregation.

Emotes live on disk under two base directories, one for static and one for
animated images. Each base directory holds the 1x files directly and the
higher densities in ``2x`` and ``4x`` subdirectories. That convention is
expressed here as a list of VariantRoot entries so callers (and tests) can
supply any other layout.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path

from .core.types import ImageVariant, SizeClass
from .scanner import scan_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariantRoot:
    """A directory of emote images sharing one size class and animation state."""

    path: Path
    size: SizeClass
    animated: bool


def standard_roots(emote_root: Path, animated_emote_root: Path) -> list[VariantRoot]:
    """Build the six roots of the standard on-disk layout.

    Args:
        emote_root: Base directory of static emotes
        animated_emote_root: Base directory of animated emotes

    Returns:
        Roots for 1x, 2x and 4x of both the static and the animated base
    """
    roots: list[VariantRoot] = []
    for size in SizeClass:
        for base, animated in ((emote_root, False), (animated_emote_root, True)):
            path = base if size is SizeClass.X1 else base / size.value
            roots.append(VariantRoot(path=path, size=size, animated=animated))
    return roots


def aggregate_variants(
    roots: list[VariantRoot],
    max_workers: int | None = None,
) -> list[ImageVariant]:
    """Scan every root and merge the results into one flat list.

    Each root is scanned with scan_directory on its own thread; reading,
    hashing and probing of the individual files is spread over a second
    thread pool shared by all roots. The first failure cancels any root
    not yet started and is re-raised.

    Args:
        roots: Variant roots to scan
        max_workers: File pool size (None for the executor default)

    Returns:
        All variants, grouped by root in the order given

    Raises:
        ScanError: If a directory or file cannot be read
        ImageDecodeError: If any image cannot be probed
    """
    logger.info("Scanning %d emote directories", len(roots))

    results: list[list[ImageVariant]] = [[] for _ in roots]

    file_pool = ThreadPoolExecutor(max_workers=max_workers)
    root_pool = ThreadPoolExecutor(max_workers=len(roots) or 1)
    with file_pool, root_pool:
        future_to_index: dict[Future[list[ImageVariant]], int] = {
            root_pool.submit(scan_directory, root.path, root.size, root.animated, file_pool): i
            for i, root in enumerate(roots)
        }

        try:
            for future in as_completed(future_to_index):
                results[future_to_index[future]] = future.result()
        except BaseException:
            for pending in future_to_index:
                pending.cancel()
            raise

    variants = [variant for scanned in results for variant in scanned]
    logger.info("Read %d image files", len(variants))
    return variants
