"""sketch_catalog — OpenProcessing sketch metadata for the community site."""

__all__ = [
    "__version__",
    "CatalogAggregator",
    "CatalogConfig",
    "get_curation_sketches",
    "get_random_curation_sketches",
    "get_sketch",
    "get_sketch_size",
    "get_sketch_thumbnail_source",
    "make_sketch_embed_url",
    "make_sketch_link_url",
    "make_thumbnail_url",
]
__version__ = "0.1.0"

from sketch_catalog.api import (  # noqa: E402
    get_curation_sketches,
    get_random_curation_sketches,
    get_sketch,
    get_sketch_size,
    get_sketch_thumbnail_source,
)
from sketch_catalog.catalog import CatalogAggregator  # noqa: E402
from sketch_catalog.core.config import CatalogConfig  # noqa: E402
from sketch_catalog.urls import (  # noqa: E402
    make_sketch_embed_url,
    make_sketch_link_url,
    make_thumbnail_url,
)
