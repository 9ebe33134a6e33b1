# =============================================================================
# core/services/property_service.py - Property Business Logic
# =============================================================================
# Handles property CRUD operations and the boundary area lookup.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
import math
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import parse_uuid
from core.geometry import compute_area
from core.models.property import PropertyCreate, PropertyUpdate
from app.config import settings
from app.exceptions import (
    AreaComputationError,
    DuplicatePropertyNameError,
    PropertyNotFoundError,
)

logger = logging.getLogger(__name__)


class PropertyService:
    """
    Service for property management operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _require_id(property_id: str | UUID) -> str:
        """Parse an identifier; a malformed one is reported as not found."""
        parsed = parse_uuid(property_id)
        if parsed is None:
            raise PropertyNotFoundError(str(property_id))
        return str(parsed)

    @staticmethod
    def create_property(data: PropertyCreate) -> dict[str, Any]:
        """
        Create a new property.

        Args:
            data: Validated property payload

        Returns:
            Created property dict with id and created_at

        Raises:
            DuplicatePropertyNameError: If the name is already taken
        """
        try:
            row = SupabaseClient.insert_property(data.to_record())
        except SupabaseClientError as e:
            if e.code == "UNIQUE_VIOLATION":
                raise DuplicatePropertyNameError(data.name) from e
            logger.error(f"Failed to create property: {e}")
            raise

        logger.info(f"Created property: {row['id']} ({data.name})")
        return row

    @staticmethod
    def list_properties() -> list[dict[str, Any]]:
        """Return every stored property, oldest first."""
        return SupabaseClient.fetch_properties()

    @staticmethod
    def get_property(property_id: str | UUID) -> dict[str, Any]:
        """
        Get a property by ID.

        Raises:
            PropertyNotFoundError: If the id is malformed or doesn't exist
        """
        property_id_str = PropertyService._require_id(property_id)

        row = SupabaseClient.fetch_property(property_id_str)
        if not row:
            raise PropertyNotFoundError(property_id_str)

        return row

    @staticmethod
    def update_property(
        property_id: str | UUID,
        data: PropertyUpdate,
    ) -> dict[str, Any]:
        """
        Replace a property's fields.

        Raises:
            PropertyNotFoundError: If the id is malformed or doesn't exist
            DuplicatePropertyNameError: If the new name is already taken
        """
        property_id_str = PropertyService._require_id(property_id)

        try:
            row = SupabaseClient.update_property(property_id_str, data.to_record())
        except SupabaseClientError as e:
            if e.code == "UNIQUE_VIOLATION":
                raise DuplicatePropertyNameError(data.name) from e
            logger.error(f"Failed to update property: {e}")
            raise

        if not row:
            raise PropertyNotFoundError(property_id_str)

        logger.info(f"Updated property: {property_id_str}")
        return row

    @staticmethod
    def delete_property(property_id: str | UUID) -> dict[str, Any]:
        """
        Delete a property.

        Returns:
            The deleted property dict

        Raises:
            PropertyNotFoundError: If the id is malformed or doesn't exist
        """
        property_id_str = PropertyService._require_id(property_id)

        row = SupabaseClient.delete_property(property_id_str)
        if not row:
            raise PropertyNotFoundError(property_id_str)

        logger.info(f"Deleted property: {property_id_str}")
        return row

    @staticmethod
    def get_property_area(property_id: str | UUID) -> int:
        """
        Compute the area of a stored property's boundary.

        The area is derived on every call and never written back.

        Returns:
            Area in squared coordinate units, rounded to a whole number

        Raises:
            PropertyNotFoundError: If the id is malformed or doesn't exist
            AreaComputationError: If the stored boundary is too short or
                holds non-numeric coordinates
        """
        row = PropertyService.get_property(property_id)
        property_id_str = str(row.get("id", property_id))
        boundary = row.get("boundary") or []

        minimum = settings.MIN_BOUNDARY_POINTS
        if len(boundary) < minimum:
            raise AreaComputationError(
                property_id_str,
                f"boundary has {len(boundary)} points, at least {minimum} required",
            )

        try:
            area = compute_area(boundary)
        except (KeyError, TypeError, ValueError) as e:
            raise AreaComputationError(property_id_str, f"malformed boundary point: {e}") from e

        if not math.isfinite(area):
            raise AreaComputationError(property_id_str, "boundary coordinates are not finite")

        logger.debug(f"Computed area {area} for property {property_id_str}")
        return int(area)
