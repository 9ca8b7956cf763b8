"""
Configuration settings for the API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List, Optional

from sketch_catalog.core.config import OPENPROCESSING_API_BASE, CatalogConfig


@dataclass
class Settings:
    """API Configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Upstream
    OPENPROCESSING_API_BASE: str = OPENPROCESSING_API_BASE
    HTTP_TIMEOUT: Optional[float] = None  # seconds; unset means no timeout

    # Bundled {id}.png thumbnails
    THUMBNAIL_DIR: str = "images"

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is None:
                continue
            field_type = self.__dataclass_fields__[key].type
            if field_type == bool:
                setattr(self, key, env_value.lower() in ("true", "1", "yes"))
            elif field_type == int:
                setattr(self, key, int(env_value))
            elif field_type == Optional[float]:
                setattr(self, key, float(env_value) if env_value else None)
            elif field_type == List[str]:
                setattr(self, key, env_value.split(","))
            else:
                setattr(self, key, env_value)

    def catalog_config(self) -> CatalogConfig:
        return CatalogConfig(api_base=self.OPENPROCESSING_API_BASE, timeout=self.HTTP_TIMEOUT)


# Global settings instance
settings = Settings()
