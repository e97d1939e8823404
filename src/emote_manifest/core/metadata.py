"""Metadata extraction for emote image files.

This module handles content hashing and pixel dimension probing. Unlike a
best-effort metadata pass, a probe failure here is fatal: the client trusts
every dimension in the manifest.
"""

import hashlib
import io
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import ImageDecodeError
from .types import Dimensions

# Number of hex characters of the SHA-1 digest embedded in output paths
HASH_LENGTH = 6


def hash_content(data: bytes) -> str:
    """Return the short content hash used in output paths.

    Args:
        data: Raw file content

    Returns:
        First HASH_LENGTH hex characters of the SHA-1 digest
    """
    return hashlib.sha1(data).hexdigest()[:HASH_LENGTH]


def probe_dimensions(data: bytes, path: Path) -> Dimensions:
    """Read the pixel dimensions of an encoded image.

    Only the image header is parsed; pixel data is never decoded.

    Args:
        data: Raw image bytes
        path: Path the bytes came from, used in error messages

    Returns:
        Dimensions with height and width in pixels

    Raises:
        ImageDecodeError: If the bytes are not a recognisable image, or the
            header declares more pixels than Pillow agrees to open
    """
    try:
        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Image {path} is too large to decode: {e}", path) from e
    except (UnidentifiedImageError, OSError, EOFError, SyntaxError, ValueError) as e:
        raise ImageDecodeError(f"Cannot read image dimensions of {path}: {e}", path) from e

    if width <= 0 or height <= 0:
        raise ImageDecodeError(f"Image {path} has invalid dimensions {width}x{height}", path)

    return Dimensions(height=height, width=width)
