"""
sketch_catalog.api
==================

Programmatic entrypoints for page templates and build scripts.

Each function delegates to a process-wide :class:`CatalogAggregator` that is
created on first use. Services that want their own client, cache or asset
set construct an aggregator directly, or install one with
:func:`set_default_catalog`.

Usage::

    from sketch_catalog.api import get_curation_sketches, get_sketch_size

    items = await get_curation_sketches(limit=20)
    size = await get_sketch_size(items[0].visual_id)
"""

from __future__ import annotations

from sketch_catalog.assets import ImageAsset
from sketch_catalog.catalog import Catalog, CatalogAggregator
from sketch_catalog.model.sketch import CurationItem, Dimensions, SketchDetail
from sketch_catalog.urls import (  # noqa: F401
    THUMBNAIL_DIMENSIONS,
    make_sketch_embed_url,
    make_sketch_link_url,
    make_thumbnail_url,
)

_default: CatalogAggregator | None = None


def get_default_catalog() -> CatalogAggregator:
    global _default
    if _default is None:
        _default = CatalogAggregator()
    return _default


def set_default_catalog(catalog: CatalogAggregator | None) -> CatalogAggregator | None:
    """Install *catalog* as the default; returns the previous one.

    Passing ``None`` resets to lazy creation. The caller owns closing the
    returned aggregator.
    """
    global _default
    previous, _default = _default, catalog
    return previous


async def get_curation_sketches(limit: int | None = None) -> Catalog:
    return await get_default_catalog().curation_sketches(limit)


async def get_sketch(sketch_id: str) -> SketchDetail:
    return await get_default_catalog().sketch(sketch_id)


async def get_sketch_size(sketch_id: str) -> Dimensions:
    return await get_default_catalog().sketch_size(sketch_id)


async def get_sketch_thumbnail_source(sketch_id: str) -> ImageAsset | str:
    return await get_default_catalog().thumbnail_source(sketch_id)


async def get_random_curation_sketches(num: int = 4) -> tuple[CurationItem, ...]:
    return await get_default_catalog().random_curation_sketches(num)
