"""
Curation Router
===============
Endpoints for the merged curation catalog.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.web_api.deps import get_catalog
from sketch_catalog.web_api.schemas import CurationItemOut

router = APIRouter()


@router.get("", response_model=List[CurationItemOut])
async def list_curation(
    limit: Optional[int] = Query(default=None, ge=1, description="Per-collection fetch limit"),
    catalog: CatalogAggregator = Depends(get_catalog),
):
    """
    Merged catalog: pinned 2025 sketches first, then the 2024 curation.

    - **limit**: bounds each upstream collection, not the merged total
    """
    items = await catalog.curation_sketches(limit)
    return [CurationItemOut.from_item(item) for item in items]


@router.get("/random", response_model=List[CurationItemOut])
async def random_curation(
    num: int = Query(default=4, ge=1, description="Sample size"),
    catalog: CatalogAggregator = Depends(get_catalog),
):
    """
    Random sample of the catalog. The sample is fixed per ``num`` for the
    lifetime of the process.
    """
    items = await catalog.random_curation_sketches(num)
    return [CurationItemOut.from_item(item) for item in items]
