"""URL builders for OpenProcessing sketch pages, embeds and thumbnails."""

from __future__ import annotations

SKETCH_BASE_URL = "https://openprocessing.org/sketch/"
THUMBNAIL_BASE_URL = "https://openprocessing-usercontent.s3.amazonaws.com/thumbnails/"

# Nominal edge length (px) thumbnails are rendered at on the site.
THUMBNAIL_DIMENSIONS = 400


def make_sketch_link_url(sketch_id: str) -> str:
    return f"{SKETCH_BASE_URL}{sketch_id}"


def make_sketch_embed_url(sketch_id: str) -> str:
    return (
        f"{SKETCH_BASE_URL}{sketch_id}/embed/"
        "?plusEmbedFullscreen=true&plusEmbedInstructions=false"
    )


def make_thumbnail_url(sketch_id: str) -> str:
    return f"{THUMBNAIL_BASE_URL}visualThumbnail{sketch_id}@2x.jpg"
