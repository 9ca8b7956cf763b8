"""CLI entry-point for sketch_catalog.

Usage:
    python -m sketch_catalog curation [--limit N]
    python -m sketch_catalog random [--num N]
    python -m sketch_catalog sketch <id>
    python -m sketch_catalog size <id>
    python -m sketch_catalog urls <id>
    python -m sketch_catalog thumbnail <id> [--images DIR]

Global options: ``--base-url URL``, ``--timeout SECONDS``, ``-v/--verbose``.
All commands print canonical JSON to stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable

from sketch_catalog import __version__
from sketch_catalog.assets import ThumbnailAssets
from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.core.config import OPENPROCESSING_API_BASE, CatalogConfig
from sketch_catalog.urls import (
    make_sketch_embed_url,
    make_sketch_link_url,
    make_thumbnail_url,
)
from sketch_catalog.utils.exit_codes import ExitCode
from sketch_catalog.utils.json_norm import stable_json_dumps

Handler = Callable[[CatalogAggregator, argparse.Namespace], Awaitable[Any]]


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {n}")
    return n


# ── command handlers ────────────────────────────────────────────────


async def _cmd_curation(catalog: CatalogAggregator, args: argparse.Namespace) -> Any:
    return await catalog.curation_sketches(args.limit)


async def _cmd_random(catalog: CatalogAggregator, args: argparse.Namespace) -> Any:
    return await catalog.random_curation_sketches(args.num)


async def _cmd_sketch(catalog: CatalogAggregator, args: argparse.Namespace) -> Any:
    return await catalog.sketch(args.id)


async def _cmd_size(catalog: CatalogAggregator, args: argparse.Namespace) -> Any:
    return await catalog.sketch_size(args.id)


async def _cmd_urls(_: CatalogAggregator, args: argparse.Namespace) -> Any:
    return {
        "link": make_sketch_link_url(args.id),
        "embed": make_sketch_embed_url(args.id),
        "thumbnail": make_thumbnail_url(args.id),
    }


async def _cmd_thumbnail(catalog: CatalogAggregator, args: argparse.Namespace) -> Any:
    source = await catalog.thumbnail_source(args.id)
    if isinstance(source, str):
        return {"kind": "remote", "src": source}
    return {"kind": "local", **source.to_dict()}


# ── parser ──────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sketch_catalog",
        description="Fetch and inspect OpenProcessing sketch metadata",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--base-url",
        default=OPENPROCESSING_API_BASE,
        help=f"API base URL (default: {OPENPROCESSING_API_BASE})",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("curation", help="Print the merged curation catalog")
    p.add_argument("--limit", type=_positive_int, default=None, help="Per-collection fetch limit")
    p.set_defaults(func=_cmd_curation)

    p = sub.add_parser("random", help="Print a random sample of the catalog")
    p.add_argument("--num", type=_positive_int, default=4, help="Sample size (default: 4)")
    p.set_defaults(func=_cmd_random)

    p = sub.add_parser("sketch", help="Print one sketch's metadata")
    p.add_argument("id")
    p.set_defaults(func=_cmd_sketch)

    p = sub.add_parser("size", help="Print the inferred canvas size of a sketch")
    p.add_argument("id")
    p.set_defaults(func=_cmd_size)

    p = sub.add_parser("urls", help="Print link, embed and thumbnail URLs")
    p.add_argument("id")
    p.set_defaults(func=_cmd_urls)

    p = sub.add_parser("thumbnail", help="Resolve the thumbnail source of a sketch")
    p.add_argument("id")
    p.add_argument("--images", default=None, help="Directory of bundled {id}.png thumbnails")
    p.set_defaults(func=_cmd_thumbnail)

    return parser


async def _run(handler: Handler, args: argparse.Namespace, catalog: CatalogAggregator) -> Any:
    async with catalog:
        return await handler(catalog, args)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    assets = ThumbnailAssets()
    images = getattr(args, "images", None)
    if images is not None:
        images_dir = Path(images)
        if not images_dir.is_dir():
            print(f"error: --images is not a directory: {images_dir}", file=sys.stderr)
            return ExitCode.ERROR
        assets = ThumbnailAssets.from_directory(images_dir)

    config = CatalogConfig(api_base=args.base_url, timeout=args.timeout)
    catalog = CatalogAggregator(config, assets=assets)
    result = asyncio.run(_run(args.func, args, catalog))
    sys.stdout.write(stable_json_dumps(result))
    return ExitCode.SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
