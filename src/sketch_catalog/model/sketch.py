"""Sketch value records — normalized upstream metadata."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from . import Curation

# Upstream (camelCase) key -> attribute name.
_CURATION_FIELDS: dict[str, str] = {
    "visualID": "visual_id",
    "title": "title",
    "description": "description",
    "instructions": "instructions",
    "mode": "mode",
    "createdOn": "created_on",
    "userID": "user_id",
    "submittedOn": "submitted_on",
    "fullname": "fullname",
}

_DETAIL_FIELDS: dict[str, str] = {
    "visualID": "visual_id",
    "title": "title",
    "description": "description",
    "instructions": "instructions",
    "license": "license",
    "userID": "user_id",
    "submittedOn": "submitted_on",
    "createdOn": "created_on",
    "mode": "mode",
}


def _string_id(raw: Any) -> str:
    return str(raw) if raw is not None else ""


@dataclass(frozen=True, slots=True)
class CurationItem:
    """One entry of a curated collection.

    ``curation`` is only set once the item has been merged into the catalog.
    Only the ids are coerced to ``str``; other fields hold whatever the
    upstream JSON decoded to.
    Upstream keys this record does not model are kept in ``extra`` and
    re-emitted by :meth:`to_dict`.
    """

    visual_id: str
    title: Any = None
    description: Any = None
    instructions: Any = None
    mode: Any = None
    created_on: Any = None
    user_id: str = ""
    submitted_on: Any = None
    fullname: Any = None
    curation: Curation | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CurationItem":
        kwargs: dict[str, Any] = {
            attr: raw.get(key) for key, attr in _CURATION_FIELDS.items()
        }
        kwargs["visual_id"] = _string_id(raw.get("visualID"))
        kwargs["user_id"] = _string_id(raw.get("userID"))
        extra = {
            k: v for k, v in raw.items() if k not in _CURATION_FIELDS and k != "curation"
        }
        return cls(**kwargs, extra=extra)

    def with_curation(self, curation: Curation) -> "CurationItem":
        return replace(self, curation=curation)

    def to_detail(self) -> "SketchDetail":
        """Reshape into a detail record; curation data carries no license."""
        return SketchDetail(
            visual_id=self.visual_id,
            title=self.title,
            description=self.description,
            instructions=self.instructions,
            license="",
            user_id=self.user_id,
            submitted_on=self.submitted_on,
            created_on=self.created_on,
            mode=self.mode,
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = dict(self.extra)
        for key, attr in _CURATION_FIELDS.items():
            d[key] = getattr(self, attr)
        if self.curation is not None:
            d["curation"] = self.curation.value
        return d


@dataclass(frozen=True, slots=True)
class SketchDetail:
    """Metadata for a single sketch."""

    visual_id: str
    title: Any = None
    description: Any = None
    instructions: Any = None
    license: Any = None
    user_id: str = ""
    submitted_on: Any = None
    created_on: Any = None
    mode: Any = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SketchDetail":
        kwargs: dict[str, Any] = {
            attr: raw.get(key) for key, attr in _DETAIL_FIELDS.items()
        }
        kwargs["visual_id"] = _string_id(raw.get("visualID"))
        kwargs["user_id"] = _string_id(raw.get("userID"))
        return cls(**kwargs)

    @classmethod
    def placeholder(cls, sketch_id: str) -> "SketchDetail":
        """Stand-in used when the detail endpoint cannot be read."""
        return cls(
            visual_id=str(sketch_id),
            title="",
            description="",
            instructions="",
            license="",
            user_id="",
            submitted_on="",
            created_on="",
            mode="",
        )

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, attr) for key, attr in _DETAIL_FIELDS.items()}


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Inferred canvas size; both fields are ``None`` when unknown."""

    width: float | None = None
    height: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"width": self.width, "height": self.height}


UNKNOWN_DIMENSIONS = Dimensions()


def is_curation_item(item: Any) -> bool:
    """True for catalog entries, as opposed to site collection entries."""
    if isinstance(item, CurationItem):
        return True
    return isinstance(item, Mapping) and "visualID" in item
