"""
Health Check Router
===================
Endpoints for health checks and readiness checks.
"""
from fastapi import APIRouter, Request

from sketch_catalog import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check(request: Request):
    """
    Readiness check endpoint.
    Ready once the catalog aggregator has been created.
    """
    if getattr(request.app.state, "catalog", None) is None:
        return {"status": "starting"}
    return {"status": "ready"}
