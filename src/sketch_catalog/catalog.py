"""
sketch_catalog.catalog
======================

``CatalogAggregator`` — the OpenProcessing sketch catalog used by the site.

Operations:
  - ``curation_sketches(limit)``   merged 2025 priority picks + 2024 curation
  - ``sketch(id)``                 detail record, served from the catalog when possible
  - ``sketch_size(id)``            canvas size inferred from p5.js source
  - ``random_curation_sketches(n)`` memoized random sample of the catalog
  - ``thumbnail_source(id)``       local image handle or remote thumbnail URL

Every memoized operation owns a ``MemoCache`` on the instance; nothing is
shared between aggregators. Upstream failures are logged and replaced by
defaults, so none of these operations raise for network or payload trouble.

Usage::

    async with CatalogAggregator() as catalog:
        items = await catalog.curation_sketches()
        size = await catalog.sketch_size(items[0].visual_id)
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Mapping
from typing import Any

import httpx

from sketch_catalog.assets import ImageAsset, ThumbnailAssets
from sketch_catalog.core.config import CatalogConfig
from sketch_catalog.core.fetch import fetch_json
from sketch_catalog.core.memo import MemoCache
from sketch_catalog.model import Curation, SketchMode
from sketch_catalog.model.sketch import (
    UNKNOWN_DIMENSIONS,
    CurationItem,
    Dimensions,
    SketchDetail,
)
from sketch_catalog.normalize import normalize_curation_items
from sketch_catalog.sampling import pick_distinct
from sketch_catalog.sizing import infer_canvas_size
from sketch_catalog.urls import make_thumbnail_url

logger = logging.getLogger(__name__)

Catalog = tuple[CurationItem, ...]


def merge_curations(
    old: list[CurationItem],
    new: list[CurationItem],
    priority_ids: tuple[str, ...],
) -> Catalog:
    """Pinned 2025 items in pin-list order, then every 2024 item.

    Items of the new curation that are not pinned are dropped.
    """
    rank = {sid: i for i, sid in enumerate(priority_ids)}
    pinned = sorted(
        (item for item in new if item.visual_id in rank),
        key=lambda item: rank[item.visual_id],
    )
    return (
        *(item.with_curation(Curation.Y2025) for item in pinned),
        *(item.with_curation(Curation.Y2024) for item in old),
    )


class CatalogAggregator:
    """Fetches, normalizes and memoizes sketch metadata."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        assets: ThumbnailAssets | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or CatalogConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=self.config.api_base,
            timeout=self.config.timeout,
        )
        self.assets = assets if assets is not None else ThumbnailAssets()
        self._rng = rng

        self._curation_cache: MemoCache[Catalog] = MemoCache("curation_sketches")
        self._sketch_cache: MemoCache[SketchDetail] = MemoCache("sketch")
        self._size_cache: MemoCache[Dimensions] = MemoCache("sketch_size")
        self._random_cache: MemoCache[tuple[CurationItem, ...]] = MemoCache(
            "random_curation_sketches"
        )

    # ── lifecycle ───────────────────────────────────────────────────

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "CatalogAggregator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ── curation ────────────────────────────────────────────────────

    async def _fetch_curation(self, curation_id: str, limit: int | None) -> list[CurationItem]:
        params = {"limit": limit} if limit else None
        payload = await fetch_json(
            self._client,
            f"curation/{curation_id}/sketches",
            params=params,
            fallback=[],
            op="getCurationSketches",
            ident=curation_id,
        )
        return normalize_curation_items(payload)

    async def curation_sketches(self, limit: int | None = None) -> Catalog:
        """Return the merged catalog.

        *limit* bounds each upstream collection separately, so the merged
        result may be longer than *limit*.
        """

        async def compute() -> Catalog:
            old, new = await asyncio.gather(
                self._fetch_curation(self.config.old_curation_id, limit),
                self._fetch_curation(self.config.new_curation_id, limit),
            )
            merged = merge_curations(old, new, self.config.priority_ids)
            logger.debug(
                f"curation_sketches(limit={limit}): {len(merged)} items "
                f"({len(old)} old, {len(new)} new)"
            )
            return merged

        return await self._curation_cache.get_or_compute(limit, compute)

    # ── sketch detail ───────────────────────────────────────────────

    async def sketch(self, sketch_id: str) -> SketchDetail:
        """Detail record for *sketch_id*; a blank placeholder if unreadable."""
        key = str(sketch_id)

        async def compute() -> SketchDetail:
            for item in await self.curation_sketches():
                if item.visual_id == key:
                    return item.to_detail()

            payload = await fetch_json(
                self._client,
                f"sketch/{key}",
                fallback=None,
                op="getSketch",
                ident=key,
            )
            # error bodies ({"success": false, ...}) decode fine but carry no sketch
            if not isinstance(payload, Mapping) or "visualID" not in payload:
                return SketchDetail.placeholder(key)
            return SketchDetail.from_dict(payload)

        return await self._sketch_cache.get_or_compute(key, compute)

    # ── dimensions ──────────────────────────────────────────────────

    async def sketch_size(self, sketch_id: str) -> Dimensions:
        """Canvas size declared in the sketch's p5.js source, if static."""
        key = str(sketch_id)

        async def compute() -> Dimensions:
            detail = await self.sketch(key)
            if detail.mode != SketchMode.P5JS.value:
                return UNKNOWN_DIMENSIONS

            tabs = await fetch_json(
                self._client,
                f"sketch/{key}/code",
                fallback=[],
                op="getSketchSize",
                ident=key,
            )
            if not isinstance(tabs, list):
                tabs = []
            return infer_canvas_size(tabs)

        return await self._size_cache.get_or_compute(key, compute)

    # ── thumbnails ──────────────────────────────────────────────────

    async def thumbnail_source(self, sketch_id: str) -> ImageAsset | str:
        """Local thumbnail handle when bundled, else the remote thumbnail URL."""
        asset = await self.assets.load(str(sketch_id))
        if asset is not None:
            return asset
        return make_thumbnail_url(str(sketch_id))

    # ── random sample ───────────────────────────────────────────────

    async def random_curation_sketches(self, num: int = 4) -> tuple[CurationItem, ...]:
        """A random sample of distinct catalog entries.

        Memoized by *num*: the same sample is returned for the lifetime of
        this aggregator.
        """

        async def compute() -> tuple[CurationItem, ...]:
            catalog = await self.curation_sketches()
            picked = pick_distinct(
                catalog,
                num,
                cap_multiplier=self.config.sample_cap_multiplier,
                rng=self._rng,
            )
            if len(picked) < min(num, len(catalog)):
                logger.info(
                    f"random_curation_sketches({num}): retry cap reached, "
                    f"returning {len(picked)} items"
                )
            return tuple(picked)

        return await self._random_cache.get_or_compute(num, compute)
