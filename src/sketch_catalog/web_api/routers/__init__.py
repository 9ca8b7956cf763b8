"""
API Routers
===========
Each router handles a specific slice of the catalog.
"""
from . import curation, health, sketches

__all__ = ["curation", "health", "sketches"]
