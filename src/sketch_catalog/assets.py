"""Locally bundled thumbnail images.

Some sketches ship a hand-picked thumbnail instead of the upstream
screenshot. They are registered as an explicit ``{id}.png`` -> loader
mapping; :meth:`ThumbnailAssets.from_directory` builds that mapping from an
``images/`` folder at startup.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Awaitable, Callable, Iterator

from PIL import Image

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImageAsset:
    """Metadata handle for a local image."""

    path: Path
    width: int
    height: int
    format: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "src": self.path.as_posix(),
            "width": self.width,
            "height": self.height,
            "format": self.format,
        }


AssetLoader = Callable[[], Awaitable[ImageAsset]]


def read_image_asset(path: Path) -> ImageAsset:
    """Read size and format from the image header (pixels are not decoded)."""
    with Image.open(path) as im:
        width, height = im.size
        fmt = (im.format or path.suffix.lstrip(".")).lower()
    return ImageAsset(path=path, width=width, height=height, format=fmt)


def file_loader(path: Path) -> AssetLoader:
    async def load() -> ImageAsset:
        return await asyncio.to_thread(read_image_asset, path)

    return load


def asset_key(sketch_id: str) -> str:
    return f"{sketch_id}.png"


class ThumbnailAssets(Mapping[str, AssetLoader]):
    """Read-only mapping of ``"{id}.png"`` to an async image loader."""

    def __init__(self, loaders: Mapping[str, AssetLoader] | None = None) -> None:
        self._loaders: dict[str, AssetLoader] = dict(loaders or {})

    @classmethod
    def from_directory(cls, directory: Path | str) -> "ThumbnailAssets":
        """Register every ``*.png`` directly inside *directory*.

        A missing directory yields an empty mapping.
        """
        root = Path(directory)
        if not root.is_dir():
            logger.debug(f"No thumbnail directory at {root}")
            return cls()
        loaders = {p.name: file_loader(p) for p in sorted(root.glob("*.png")) if p.is_file()}
        logger.debug(f"Registered {len(loaders)} local thumbnails from {root}")
        return cls(loaders)

    def __getitem__(self, key: str) -> AssetLoader:
        return self._loaders[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._loaders)

    def __len__(self) -> int:
        return len(self._loaders)

    async def load(self, sketch_id: str) -> ImageAsset | None:
        loader = self._loaders.get(asset_key(sketch_id))
        if loader is None:
            return None
        return await loader()
