"""ID minting routes."""

from typing import Optional

from fastapi import APIRouter, HTTPException

from core.errors import NamespaceNotInitialized
from internal.logging import get_logger

router = APIRouter(prefix="/api/v1", tags=["ids"])

# These will be set by app.py
_generator = None
_default_block_id = 1


def init(generator, default_block_id=1):
    """Initialize with the generator and the block id used when none is given."""
    global _generator, _default_block_id
    _generator = generator
    _default_block_id = default_block_id



def _parse_int(raw):
    """int() of a query value, or the raw string so make() rejects it."""
    try:
        return int(raw)
    except ValueError:
        return raw


@router.post("/ids/{namespace}")
async def make_id(namespace: str, block_id: Optional[str] = None, unixtime: Optional[str] = None):
    """Mint one ID for a registered namespace."""
    block_id = _default_block_id if block_id is None else _parse_int(block_id)
    if unixtime is not None:
        unixtime = _parse_int(unixtime)
    try:
        result = _generator.make(namespace, block_id, unixtime)
    except NamespaceNotInitialized:
        raise HTTPException(status_code=404, detail=f"unknown namespace: {namespace}")

    if not result.ok:
        get_logger().warn("id rejected", error=result.error.message, namespace=namespace,
                          block_id=block_id, unixtime=unixtime)
        raise HTTPException(status_code=400, detail=result.error.message)

    # JSON numbers above 2**53 lose precision in JS clients
    return {"namespace": namespace, "id": result.value, "id_str": str(result.value)}
