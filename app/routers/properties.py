# =============================================================================
# app/routers/properties.py - Property CRUD Endpoints
# =============================================================================
# Handles property creation, lookup, replacement, deletion and the
# boundary area endpoint. Business logic lives in PropertyService.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, status
from pydantic import BaseModel, Field

from core.services.property_service import PropertyService
from core.models.property import (
    AreaResponse,
    PropertyCreate,
    PropertyList,
    PropertyResponse,
    PropertyUpdate,
)

router = APIRouter()

PropertyId = Annotated[str, Path(description="Property UUID")]


# =============================================================================
# Response Models
# =============================================================================

class PropertyEnvelope(BaseModel):
    """A single property plus a status message."""
    message: str
    property: PropertyResponse


class PropertyDeleteResponse(BaseModel):
    """Response when deleting a property."""
    property_id: str = Field(..., examples=["550e8400-e29b-41d4-a716-446655440000"])
    message: str = Field(default="Property deleted successfully")


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=PropertyList)
async def list_properties():
    """
    List all properties.

    An empty database is not an error: the list is empty and the
    message says so.
    """
    rows = PropertyService.list_properties()

    if not rows:
        return PropertyList(message="No property in the database")

    return PropertyList(
        message="Properties fetched successfully",
        length=len(rows),
        properties=rows,
    )


@router.get("/{property_id}", response_model=PropertyEnvelope)
async def get_property(property_id: PropertyId):
    """Get a single property by id."""
    row = PropertyService.get_property(property_id)

    return PropertyEnvelope(message="Property fetched successfully", property=row)


@router.post("", response_model=PropertyEnvelope, status_code=status.HTTP_201_CREATED)
async def create_property(request: PropertyCreate):
    """
    Create a property.

    Names are unique. The boundary must have at least the configured
    minimum number of points (3 by default).
    """
    row = PropertyService.create_property(request)

    return PropertyEnvelope(message="Property added successfully", property=row)


@router.put("/{property_id}", response_model=PropertyEnvelope)
async def replace_property(property_id: PropertyId, request: PropertyUpdate):
    """
    Replace a property.

    The body is validated exactly like POST; every field is overwritten.
    """
    row = PropertyService.update_property(property_id, request)

    return PropertyEnvelope(message="Property edited successfully", property=row)


@router.delete("/{property_id}", response_model=PropertyDeleteResponse)
async def delete_property(property_id: PropertyId):
    """Delete a property."""
    row = PropertyService.delete_property(property_id)

    return PropertyDeleteResponse(property_id=str(row["id"]))


@router.get("/{property_id}/area", response_model=AreaResponse)
async def get_property_area(property_id: PropertyId):
    """
    Area of the property's boundary polygon.

    Computed on every request with the shoelace formula from the stored
    boundary (lat as x, lng as y), rounded to a whole number. No unit
    conversion is applied.
    """
    area = PropertyService.get_property_area(property_id)

    return AreaResponse(area=area)
