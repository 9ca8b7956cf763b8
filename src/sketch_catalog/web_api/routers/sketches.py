"""
Sketches Router
===============
Per-sketch metadata, canvas size, URLs and thumbnail resolution.
"""
from fastapi import APIRouter, Depends

from sketch_catalog.catalog import CatalogAggregator
from sketch_catalog.urls import (
    make_sketch_embed_url,
    make_sketch_link_url,
    make_thumbnail_url,
)
from sketch_catalog.web_api.deps import get_catalog
from sketch_catalog.web_api.schemas import (
    DimensionsOut,
    SketchDetailOut,
    SketchUrlsOut,
    ThumbnailOut,
)

router = APIRouter()


@router.get("/{sketch_id}", response_model=SketchDetailOut)
async def get_sketch(sketch_id: str, catalog: CatalogAggregator = Depends(get_catalog)):
    """
    Sketch metadata. Unknown or unreachable sketches come back as a blank
    record carrying only the requested id.
    """
    return SketchDetailOut.from_detail(await catalog.sketch(sketch_id))


@router.get("/{sketch_id}/size", response_model=DimensionsOut)
async def get_sketch_size(sketch_id: str, catalog: CatalogAggregator = Depends(get_catalog)):
    """Canvas size parsed from the sketch's p5.js source, if static."""
    return DimensionsOut.from_dimensions(await catalog.sketch_size(sketch_id))


@router.get("/{sketch_id}/urls", response_model=SketchUrlsOut)
async def get_sketch_urls(sketch_id: str):
    return SketchUrlsOut(
        link=make_sketch_link_url(sketch_id),
        embed=make_sketch_embed_url(sketch_id),
        thumbnail=make_thumbnail_url(sketch_id),
    )


@router.get("/{sketch_id}/thumbnail", response_model=ThumbnailOut)
async def get_sketch_thumbnail(sketch_id: str, catalog: CatalogAggregator = Depends(get_catalog)):
    return ThumbnailOut.from_source(await catalog.thumbnail_source(sketch_id))
