"""
Health Check Router
==================
Liveness endpoint.
"""
from fastapi import APIRouter

from nameclutch import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}
