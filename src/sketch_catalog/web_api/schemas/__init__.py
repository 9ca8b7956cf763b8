"""
Pydantic Schemas
================
Response models for the API. Field names follow the upstream camelCase
payloads so templates can consume either source unchanged.
"""
from .sketch import (
    CurationItemOut,
    DimensionsOut,
    SketchDetailOut,
    SketchUrlsOut,
    ThumbnailOut,
)

__all__ = [
    "CurationItemOut",
    "DimensionsOut",
    "SketchDetailOut",
    "SketchUrlsOut",
    "ThumbnailOut",
]
