# =============================================================================
# core/models/property.py - Property Schemas
# =============================================================================
# These models define the API contract for property operations:
# - Point: One boundary vertex (lat, lng)
# - Location: Postal location of a property
# - PropertyCreate / PropertyUpdate: Input for creating or replacing a property
# - PropertyResponse: Output when returning a stored property to clients
# - AreaResponse: Output of the boundary area endpoint
#
# A property's boundary is an ordered list of points. The polygon is closed
# implicitly: the last point connects back to the first.
# =============================================================================

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from app.config import settings


class PropertyType(str, Enum):
    """Kinds of property the API accepts."""
    HOUSE = "house"
    SHOP = "shop"
    LAND = "land"


class Point(BaseModel):
    """
    A single boundary vertex.

    Immutable once constructed. Older records spell the longitude key
    "lang", so that name is accepted on input as well.

    Example:
        {"lat": 45.07, "lng": 7.68}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    lat: float = Field(
        ...,
        allow_inf_nan=False,
        description="Latitude (used as the x coordinate)"
    )

    lng: float = Field(
        ...,
        allow_inf_nan=False,
        validation_alias=AliasChoices("lng", "lang"),
        description="Longitude (used as the y coordinate)"
    )


class Location(BaseModel):
    """Where the property is. Only `state` is optional."""
    country: str = Field(..., min_length=1, examples=["Italy"])
    state: str | None = Field(default=None, examples=["Piedmont"])
    city: str = Field(..., min_length=1, examples=["Turin"])
    address: str = Field(..., min_length=1, examples=["Via Roma 1"])


class PropertyCreate(BaseModel):
    """
    Schema for creating a property.

    The boundary must have at least MIN_BOUNDARY_POINTS vertices
    (3 by default). There is no upper bound.

    Example:
        {
            "type": "land",
            "name": "North Field",
            "location": {"country": "Italy", "city": "Turin", "address": "Via Roma 1"},
            "boundary": [
                {"lat": 0, "lng": 0},
                {"lat": 0, "lng": 4},
                {"lat": 4, "lng": 4},
                {"lat": 4, "lng": 0}
            ]
        }
    """

    type: PropertyType = Field(
        ...,
        description="Property type: house, shop or land"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Unique human-readable property name"
    )

    location: Location = Field(
        ...,
        description="Postal location of the property"
    )

    # Ordered boundary vertices; order defines the polygon edges
    boundary: list[Point] = Field(
        ...,
        description="Ordered boundary vertices (closed implicitly)"
    )

    @field_validator("boundary")
    @classmethod
    def check_boundary_length(cls, value: list[Point]) -> list[Point]:
        """Reject boundaries with too few points to form a polygon."""
        minimum = settings.MIN_BOUNDARY_POINTS
        if len(value) < minimum:
            raise ValueError(
                f"Boundary must have at least {minimum} points, got {len(value)}"
            )
        return value

    def to_record(self) -> dict:
        """Serialize to the row shape stored in the database."""
        return self.model_dump(mode="json")


class PropertyUpdate(PropertyCreate):
    """
    Schema for replacing a property (PUT).

    Same shape and rules as PropertyCreate: the whole record is replaced.
    """


class PropertyResponse(BaseModel):
    """
    Schema for returning a stored property to clients.

    Returned by:
    - POST /properties
    - GET /properties/{id}
    - PUT /properties/{id}
    - GET /properties (inside PropertyList)
    """

    model_config = ConfigDict(from_attributes=True)

    id: UUID = Field(..., description="Unique property identifier")
    created_at: datetime | None = Field(
        default=None,
        description="Timestamp when the property was created"
    )
    type: PropertyType
    name: str
    location: Location
    boundary: list[Point] = Field(default_factory=list)

    @field_validator("boundary", mode="before")
    @classmethod
    def null_boundary_as_empty(cls, value):
        """Rows stored without a boundary are listed with an empty one."""
        return [] if value is None else value


class PropertyList(BaseModel):
    """Schema for listing all properties."""
    message: str
    length: int = Field(default=0, ge=0)
    properties: list[PropertyResponse] = Field(default_factory=list)


class AreaResponse(BaseModel):
    """Area of a property's boundary polygon, in squared coordinate units."""
    area: int = Field(..., ge=0, examples=[16])
