"""Enums shared across the catalog, CLI and web layers."""

from __future__ import annotations

from enum import Enum


class Curation(str, Enum):
    """Which yearly curation a catalog entry came from."""

    Y2024 = "2024"
    Y2025 = "2025"


class SketchMode(str, Enum):
    """Renderer identifiers reported by the upstream ``mode`` field.

    Only ``P5JS`` has a statically inferable canvas size.
    """

    P5JS = "p5js"
    PROCESSINGJS = "pjs"
    HTML = "html"
