"""
Read-only catalog of example properties.
"""

from fastapi import APIRouter

from dayuse.catalog import PROPERTIES

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/properties")
async def list_properties():
    return PROPERTIES
