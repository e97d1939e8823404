"""Tests for variant root layout and aggregation."""

from pathlib import Path

import pytest

from conftest import make_png
from emote_manifest.aggregator import VariantRoot, aggregate_variants, standard_roots
from emote_manifest.core.errors import ImageDecodeError, ScanError
from emote_manifest.core.types import SizeClass


class TestStandardRoots:
    """Test the six-way on-disk convention."""

    def test_six_roots(self) -> None:
        roots = standard_roots(Path("static"), Path("animated"))

        assert set(roots) == {
            VariantRoot(Path("static"), SizeClass.X1, False),
            VariantRoot(Path("animated"), SizeClass.X1, True),
            VariantRoot(Path("static/2x"), SizeClass.X2, False),
            VariantRoot(Path("animated/2x"), SizeClass.X2, True),
            VariantRoot(Path("static/4x"), SizeClass.X4, False),
            VariantRoot(Path("animated/4x"), SizeClass.X4, True),
        }
        assert len(roots) == 6


class TestAggregateVariants:
    """Test scanning every root into one collection."""

    def test_collects_all_roots(self, emote_tree: Path) -> None:
        roots = standard_roots(emote_tree / "emoticons", emote_tree / "animated")

        variants = aggregate_variants(roots, max_workers=4)

        summary = sorted((v.name, v.size.value, v.animated) for v in variants)
        assert summary == [
            ("kappa", "1x", False),
            ("kappa", "2x", False),
            ("kappa", "4x", False),
            ("pepe", "1x", False),
            ("pepe", "4x", False),
            ("pog", "1x", True),
            ("pog", "2x", True),
        ]

    def test_dimensions_follow_files(self, emote_tree: Path) -> None:
        roots = standard_roots(emote_tree / "emoticons", emote_tree / "animated")

        dims = {(v.name, v.size.value): v.dimensions for v in aggregate_variants(roots)}

        assert dims[("kappa", "1x")] == {"height": 32, "width": 28}
        assert dims[("kappa", "4x")] == {"height": 128, "width": 112}
        assert dims[("pog", "2x")] == {"height": 60, "width": 60}

    def test_serial_and_parallel_agree(self, emote_tree: Path) -> None:
        roots = standard_roots(emote_tree / "emoticons", emote_tree / "animated")

        assert aggregate_variants(roots, max_workers=1) == aggregate_variants(roots, max_workers=8)

    def test_custom_roots(self, tmp_path: Path, write_file) -> None:
        """Test that any root list can be scanned, not just the standard six."""
        write_file(tmp_path / "hd" / "kappa.png", make_png(8, 8))

        variants = aggregate_variants([VariantRoot(tmp_path / "hd", SizeClass.X2, False)])

        assert len(variants) == 1
        assert variants[0].size is SizeClass.X2

    def test_missing_root_fails(self, emote_tree: Path) -> None:
        """Test that a missing size directory aborts the scan."""
        roots = standard_roots(emote_tree / "emoticons", emote_tree / "does-not-exist")

        with pytest.raises(ScanError, match="does-not-exist"):
            aggregate_variants(roots)

    def test_roots_keep_their_order(self, tmp_path: Path, write_file) -> None:
        """Test that results are grouped by root in the order the roots are given."""
        write_file(tmp_path / "b" / "zed.png", make_png(2, 2))
        write_file(tmp_path / "a" / "alpha.png", make_png(2, 2))
        write_file(tmp_path / "a" / "beta.png", make_png(2, 2))
        roots = [
            VariantRoot(tmp_path / "b", SizeClass.X1, False),
            VariantRoot(tmp_path / "a", SizeClass.X2, False),
        ]

        variants = aggregate_variants(roots, max_workers=3)

        assert [(v.name, v.size) for v in variants] == [
            ("zed", SizeClass.X1),
            ("alpha", SizeClass.X2),
            ("beta", SizeClass.X2),
        ]

    def test_empty_root_list(self) -> None:
        assert aggregate_variants([]) == []

    def test_undecodable_file_fails(self, emote_tree: Path, write_file) -> None:
        write_file(emote_tree / "emoticons" / "2x" / "broken.png", b"garbage")
        roots = standard_roots(emote_tree / "emoticons", emote_tree / "animated")

        with pytest.raises(ImageDecodeError, match="broken.png"):
            aggregate_variants(roots, max_workers=2)
