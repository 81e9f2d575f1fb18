"""API routes for counter statistics."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from service.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# These will be set by app.py
_registry = None


def init(registry):
    """Initialize with the seed registry reference."""
    global _registry
    _registry = registry


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    """Return raw counter values per namespace (requires basic auth)."""
    return {
        "timestamp": format_timestamp(),
        "namespaces": {str(ns): _registry.value(ns) for ns in _registry.namespaces()},
    }
