# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - property.py: Property CRUD schemas, boundary points and area result
#
# These models define the "contract" between API and clients.
# =============================================================================

from .property import (
    AreaResponse,
    Location,
    Point,
    PropertyCreate,
    PropertyList,
    PropertyResponse,
    PropertyType,
    PropertyUpdate,
)

__all__ = [
    "AreaResponse",
    "Location",
    "Point",
    "PropertyCreate",
    "PropertyList",
    "PropertyResponse",
    "PropertyType",
    "PropertyUpdate",
]
