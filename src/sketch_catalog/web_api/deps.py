"""
Request Dependencies
====================
The aggregator lives on ``app.state`` so every request shares one cache.
"""
from fastapi import Request

from sketch_catalog.catalog import CatalogAggregator


def get_catalog(request: Request) -> CatalogAggregator:
    return request.app.state.catalog
