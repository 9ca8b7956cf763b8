"""Curation payload normalization."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sketch_catalog.model.sketch import CurationItem


def normalize_curation_items(payload: Any) -> list[CurationItem]:
    """Coerce a decoded curation payload into ``CurationItem`` records.

    Anything other than a list (an upstream error object, ``None``) yields
    an empty list. Identifiers are forced to strings; missing fields stay
    ``None``. Elements that are not mappings are read as empty mappings.
    """
    if not isinstance(payload, list):
        return []
    return [
        CurationItem.from_dict(raw if isinstance(raw, Mapping) else {})
        for raw in payload
    ]
