"""Shared fixtures: an in-memory OpenProcessing API behind httpx.MockTransport."""

from __future__ import annotations

import random
import re
from collections import Counter
from typing import Any, Callable

import httpx
import pytest

from sketch_catalog.assets import ThumbnailAssets
from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.core.config import OPENPROCESSING_API_BASE, CatalogConfig

OLD_ID = "87649"
NEW_ID = "89576"

_CURATION_RE = re.compile(r"^/api/curation/(?P<cid>[^/]+)/sketches$")
_CODE_RE = re.compile(r"^/api/sketch/(?P<sid>[^/]+)/code$")
_SKETCH_RE = re.compile(r"^/api/sketch/(?P<sid>[^/]+)$")


def raw_item(visual_id: Any, **overrides: Any) -> dict[str, Any]:
    """Curation payload element shaped like the upstream API's."""
    item = {
        "visualID": visual_id,
        "title": f"Sketch {visual_id}",
        "description": "",
        "instructions": "",
        "mode": "p5js",
        "createdOn": "2024-05-01 12:00:00",
        "userID": 1000 + int(visual_id),
        "submittedOn": "2024-05-02 12:00:00",
        "fullname": "Someone",
    }
    item.update(overrides)
    return item


class FakeOpenProcessing:
    """Routes the three upstream endpoints to dicts filled in by each test.

    A ``None`` value for a key answers 500 with a non-JSON body; a missing
    key answers 404 with a JSON error object.
    """

    def __init__(self) -> None:
        self.curations: dict[str, Any] = {OLD_ID: [], NEW_ID: []}
        self.sketches: dict[str, Any] = {}
        self.code: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []
        self.hits: Counter[str] = Counter()

    def _answer(self, table: dict[str, Any], key: str) -> httpx.Response:
        if key not in table:
            return httpx.Response(404, json={"success": False, "message": "not found"})
        body = table[key]
        if body is None:
            return httpx.Response(500, text="<html>Internal Server Error</html>")
        return httpx.Response(200, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if m := _CURATION_RE.match(path):
            self.hits["curation"] += 1
            return self._answer(self.curations, m["cid"])
        if m := _CODE_RE.match(path):
            self.hits["code"] += 1
            return self._answer(self.code, m["sid"])
        if m := _SKETCH_RE.match(path):
            self.hits["sketch"] += 1
            return self._answer(self.sketches, m["sid"])
        return httpx.Response(404)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url=OPENPROCESSING_API_BASE,
        )


@pytest.fixture
def upstream() -> FakeOpenProcessing:
    return FakeOpenProcessing()


@pytest.fixture
def make_catalog(upstream: FakeOpenProcessing) -> Callable[..., CatalogAggregator]:
    """Factory for aggregators wired to the fake upstream."""

    def factory(
        *,
        config: CatalogConfig | None = None,
        assets: ThumbnailAssets | None = None,
        seed: int = 1234,
    ) -> CatalogAggregator:
        return CatalogAggregator(
            config,
            client=upstream.client(),
            assets=assets,
            rng=random.Random(seed),
        )

    return factory
