"""Directory scanning and image variant collection.

This module reads one variant directory (non-recursively) and turns every
regular file in it into an ImageVariant tagged with the size class and
animation state of that directory.
"""

import logging
import os
from concurrent.futures import Executor
from pathlib import Path

from .core.errors import ScanError
from .core.metadata import hash_content, probe_dimensions
from .core.types import ImageVariant, SizeClass

logger = logging.getLogger(__name__)


def split_name(filename: str) -> tuple[str, str]:
    """Split a filename into emote name and extension.

    Only the last extension is stripped, and the extension keeps its
    leading dot.

    Example:
        "kappa.png" -> ("kappa", ".png")
        "pepe.hands.gif" -> ("pepe.hands", ".gif")

    Args:
        filename: Bare filename without directory components

    Returns:
        Tuple of (name, ext); ext is empty when there is no extension
    """
    return os.path.splitext(filename)


def list_image_files(directory: Path) -> list[Path]:
    """List the regular files directly inside a directory.

    Subdirectories, symlinks to directories and other non-file entries are
    skipped, as are hidden files. Symlinks to regular files are followed.

    Args:
        directory: Directory to list

    Returns:
        File paths sorted by filename

    Raises:
        ScanError: If the directory is missing or cannot be listed
    """
    files: list[Path] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.name.startswith("."):
                    logger.debug("Skipping hidden file %s", entry.path)
                    continue
                if entry.is_file():
                    files.append(Path(entry.path))
    except FileNotFoundError as e:
        raise ScanError(f"Emote directory not found: {directory}", directory) from e
    except NotADirectoryError as e:
        raise ScanError(f"Emote path is not a directory: {directory}", directory) from e
    except OSError as e:
        raise ScanError(f"Cannot list emote directory {directory}: {e}", directory) from e

    return sorted(files, key=lambda p: p.name)


def read_variant(path: Path, size: SizeClass, animated: bool) -> ImageVariant:
    """Read one image file into an ImageVariant.

    Args:
        path: Image file to read
        size: Size class of the directory the file lives in
        animated: Whether the directory holds animated emotes

    Returns:
        Fully populated ImageVariant

    Raises:
        ScanError: If the file cannot be read
        ImageDecodeError: If the image dimensions cannot be determined
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ScanError(f"Cannot read emote file {path}: {e}", path) from e

    name, ext = split_name(path.name)
    dimensions = probe_dimensions(data, path)
    variant = ImageVariant(
        name=name,
        size=size,
        animated=animated,
        width=dimensions["width"],
        height=dimensions["height"],
        hash=hash_content(data),
        ext=ext,
        data=data,
        source=path,
    )

    logger.debug(
        "Read %s (%s%s): %dx%d hash=%s",
        path,
        size.value,
        " animated" if animated else "",
        variant.width,
        variant.height,
        variant.hash,
    )
    return variant


def scan_directory(
    directory: Path,
    size: SizeClass,
    animated: bool,
    executor: Executor | None = None,
) -> list[ImageVariant]:
    """Scan a single variant directory.

    Args:
        directory: Directory containing the image files
        size: Size class to tag every variant with
        animated: Animated flag to tag every variant with
        executor: Optional executor to read files concurrently

    Returns:
        One ImageVariant per file, in filename order

    Raises:
        ScanError: If the directory or a file cannot be read
        ImageDecodeError: If any image cannot be probed
    """
    files = list_image_files(directory)

    if executor is None:
        return [read_variant(path, size, animated) for path in files]

    return list(executor.map(lambda path: read_variant(path, size, animated), files))
