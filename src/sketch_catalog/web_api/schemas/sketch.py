"""
Sketch Schemas
==============
Response models for curation and sketch endpoints.
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from sketch_catalog.assets import ImageAsset
from sketch_catalog.model.sketch import CurationItem, Dimensions, SketchDetail


class CurationItemOut(BaseModel):
    """One merged catalog entry

    Only the ids are normalized; other fields pass through as upstream
    sent them.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "visualID": "2690038",
                "title": "Falling leaves",
                "description": "",
                "instructions": "Click to reset",
                "mode": "p5js",
                "createdOn": "2025-03-01 10:00:00",
                "userID": "412345",
                "submittedOn": "2025-03-02 08:00:00",
                "fullname": "Ada",
                "curation": "2025",
            }
        },
    )

    visualID: str
    title: Optional[Any] = None
    description: Optional[Any] = None
    instructions: Optional[Any] = None
    mode: Optional[Any] = None
    createdOn: Optional[Any] = None
    userID: str = ""
    submittedOn: Optional[Any] = None
    fullname: Optional[Any] = None
    curation: Optional[Literal["2024", "2025"]] = None

    @classmethod
    def from_item(cls, item: CurationItem) -> "CurationItemOut":
        return cls(**item.to_dict())


class SketchDetailOut(BaseModel):
    """Metadata for a single sketch"""

    visualID: str
    title: Optional[Any] = None
    description: Optional[Any] = None
    instructions: Optional[Any] = None
    license: Optional[Any] = None
    userID: str = ""
    submittedOn: Optional[Any] = None
    createdOn: Optional[Any] = None
    mode: Optional[Any] = None

    @classmethod
    def from_detail(cls, detail: SketchDetail) -> "SketchDetailOut":
        return cls(**detail.to_dict())


class DimensionsOut(BaseModel):
    """Inferred canvas size; both null when unknown"""

    width: Optional[float] = Field(default=None)
    height: Optional[float] = Field(default=None)

    @classmethod
    def from_dimensions(cls, dims: Dimensions) -> "DimensionsOut":
        return cls(width=dims.width, height=dims.height)


class SketchUrlsOut(BaseModel):
    """Derived URLs for a sketch"""

    link: str
    embed: str
    thumbnail: str


class ThumbnailOut(BaseModel):
    """Resolved thumbnail: a bundled image or the remote screenshot"""

    kind: Literal["local", "remote"]
    src: str
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None

    @classmethod
    def from_source(cls, source) -> "ThumbnailOut":
        if isinstance(source, ImageAsset):
            return cls(kind="local", **source.to_dict())
        return cls(kind="remote", src=source)
