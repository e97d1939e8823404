"""Command-line interface for the emote manifest builder.

This module provides the CLI entry point that builds the emote manifest and
writes it, together with every content-addressed emote image, into the build
output directory.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .bundler import Bundler, StaticBundler, StatsBundler
from .config import ManifestConfig
from .core.errors import EmoteManifestError
from .core.types import Manifest
from .outputs import BuildOutputSet
from .pipeline import ManifestPipeline


def generate_manifest(
    config: ManifestConfig,
    bundler: Bundler,
    outputs: BuildOutputSet | None = None,
) -> tuple[Manifest, BuildOutputSet]:
    """Build the emote manifest and collect every output.

    Args:
        config: Build configuration
        bundler: Bundler used to resolve the emote stylesheet
        outputs: Optional output set to register artifacts in

    Returns:
        Tuple of (manifest, output set)

    Raises:
        EmoteManifestError: If the build fails
    """
    print(f"Scanning emotes: {config.emote_root}, {config.animated_emote_root}", file=sys.stderr)
    pipeline = ManifestPipeline(config, bundler, outputs=outputs)
    manifest = pipeline.build()

    versions = sum(len(emote["versions"]) for emote in manifest["emotes"])
    print(f"Found {len(manifest['emotes'])} emotes with {versions} versions", file=sys.stderr)

    return manifest, pipeline.outputs


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emote-manifest",
        description="Build the content-addressed emote assets and their JSON manifest",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve the stylesheet from bundler stats
  emote-manifest --config emotes.config.json --stats dist/stats.json --output-dir static

  # Pass the stylesheet name directly and print the manifest
  emote-manifest --config emotes.config.json --css emotes.3f9a1c.css --dry-run
        """,
    )

    parser.add_argument("--config", required=True, help="Path to the JSON build configuration")

    css_group = parser.add_mutually_exclusive_group(required=True)
    css_group.add_argument("--stats", help="Bundler stats JSON used to resolve the emote stylesheet")
    css_group.add_argument("--css", help="Filename of the emote stylesheet (skips bundler lookup)")

    parser.add_argument(
        "--output-dir",
        default="static",
        help="Directory the manifest and images are written to (default: static)",
    )
    parser.add_argument("--workers", type=int, help="Number of threads used to read images")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the manifest to stdout without writing any files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the manifest builder."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be a positive integer")

    try:
        config = ManifestConfig.from_file(Path(args.config))
        if args.workers is not None:
            config.max_workers = args.workers

        bundler: Bundler
        if args.css:
            bundler = StaticBundler({config.css_chunk: [args.css]})
        else:
            bundler = StatsBundler.from_file(Path(args.stats))

        manifest, outputs = generate_manifest(config, bundler)

        if args.dry_run:
            json.dump(manifest, sys.stdout, indent=2, ensure_ascii=False)
            print()
            return

        written = outputs.write_to(Path(args.output_dir))
        print(f"Wrote {len(written)} files to {args.output_dir}", file=sys.stderr)

    except (EmoteManifestError, OSError, ValueError) as e:
        print(f"Error: Failed to generate manifest: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
