"""
Sketch Catalog Web API
======================
FastAPI service exposing the sketch catalog as JSON for site templates.

Quick Start:
    uvicorn sketch_catalog.web_api.main:app --reload
"""
from .main import app

__all__ = ["app"]
