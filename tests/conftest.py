"""Shared fixtures for emote manifest tests."""

import io
import json
import struct
import zlib
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from emote_manifest.config import ManifestConfig


def make_png(width: int, height: int, color: tuple[int, int, int, int] = (255, 0, 0, 255)) -> bytes:
    """Encode a solid-colour PNG."""
    buffer = io.BytesIO()
    Image.new("RGBA", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


def make_gif(width: int, height: int, frames: int = 2) -> bytes:
    """Encode a small animated GIF."""
    images = [Image.new("P", (width, height), i * 40) for i in range(frames)]
    buffer = io.BytesIO()
    images[0].save(buffer, format="GIF", save_all=True, append_images=images[1:], duration=100, loop=0)
    return buffer.getvalue()


def make_png_header(width: int, height: int) -> bytes:
    """Encode a PNG whose IHDR claims the given size but carries no pixel data."""

    def chunk(kind: bytes, body: bytes) -> bytes:
        return struct.pack(">I", len(body)) + kind + body + struct.pack(">I", zlib.crc32(kind + body))

    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    return (
        b"\x89PNG\r\n\x1a\n"
        + chunk(b"IHDR", ihdr)
        + chunk(b"IDAT", zlib.compress(b""))
        + chunk(b"IEND", b"")
    )


@pytest.fixture
def write_file() -> Callable[[Path, bytes], Path]:
    """Write bytes to a path, creating parent directories."""

    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def emote_tree(tmp_path: Path, write_file) -> Path:
    """Create the standard six-root layout with a few emotes.

    Layout:
        emoticons/kappa.png            28x32
        emoticons/2x/kappa.png         56x64
        emoticons/4x/kappa.png         112x128
        emoticons/pepe.png             32x32
        emoticons/2x/                  (pepe has no 2x)
        emoticons/4x/pepe.png          128x128
        animated/pog.gif               30x30
        animated/2x/pog.gif            60x60
        animated/4x/                   (empty)
    """
    static = tmp_path / "emoticons"
    animated = tmp_path / "animated"

    write_file(static / "kappa.png", make_png(28, 32))
    write_file(static / "2x" / "kappa.png", make_png(56, 64))
    write_file(static / "4x" / "kappa.png", make_png(112, 128))
    write_file(static / "pepe.png", make_png(32, 32, (0, 255, 0, 255)))
    write_file(static / "4x" / "pepe.png", make_png(128, 128, (0, 255, 0, 255)))
    write_file(animated / "pog.gif", make_gif(30, 30))
    write_file(animated / "2x" / "pog.gif", make_gif(60, 60))
    (animated / "4x").mkdir(parents=True)

    return tmp_path


@pytest.fixture
def index_file(emote_tree: Path) -> Path:
    path = emote_tree / "emotes.json"
    path.write_text(json.dumps({"default": ["pog", "kappa", "pepe"]}), encoding="utf-8")
    return path


@pytest.fixture
def config(emote_tree: Path, index_file: Path) -> ManifestConfig:
    return ManifestConfig(
        filename="emote-manifest.json",
        emote_path="img/emotes",
        index=index_file,
        emote_root=emote_tree / "emoticons",
        animated_emote_root=emote_tree / "animated",
        css_chunk="emotes",
        modifiers=["mirror", "flip", "rain"],
        tags=["nsfw", "weeb"],
        max_workers=4,
    )
