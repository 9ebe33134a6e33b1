# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for reading and writing property rows.
#
# Boundaries are stored as a JSONB column, so a property row is a document:
#   {id, created_at, type, name, location: {...}, boundary: [{lat, lng}, ...]}
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   row = SupabaseClient.fetch_property(property_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code for "no rows returned" on .single()
NO_ROWS_CODE = "PGRST116"

# Postgres unique_violation
UNIQUE_VIOLATION_CODE = "23505"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code and a suggestion for fixing the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def _is_unique_violation(error: Exception) -> bool:
    return getattr(error, "code", None) == UNIQUE_VIOLATION_CODE


class SupabaseClient:
    """
    Typed wrapper for Supabase property operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        rows = SupabaseClient.fetch_properties()
        row = SupabaseClient.fetch_property("550e8400-...")
        boundary = row["boundary"] if row else None
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _table(cls):
        return cls.get_client().table(settings.PROPERTIES_TABLE)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_properties(cls) -> list[dict[str, Any]]:
        """
        Fetch all properties, oldest first.

        Returns:
            List of property row dicts (possibly empty)

        Raises:
            SupabaseClientError: If query fails
        """
        try:
            response = (
                cls._table()
                .select("*")
                .order("created_at", desc=False)
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} properties")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch properties: {e}",
                code="FETCH_PROPERTIES_FAILED",
                suggestion=f"Check that the {settings.PROPERTIES_TABLE} table is accessible",
            )

    @classmethod
    def fetch_property(cls, property_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch a property by ID.

        Args:
            property_id: The property UUID

        Returns:
            Property row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        property_id_str = normalize_uuid(property_id)

        try:
            response = (
                cls._table()
                .select("*")
                .eq("id", property_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch property: {e}",
                code="FETCH_PROPERTY_FAILED",
                suggestion="Check that the property id exists",
                details={"property_id": property_id_str}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert_property(cls, record: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new property row.

        Args:
            record: Row data (type, name, location, boundary)

        Returns:
            Inserted row with generated id and created_at

        Raises:
            SupabaseClientError: If insert fails. Code is UNIQUE_VIOLATION
                when the name is already taken.
        """
        try:
            response = cls._table().insert(record).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            if _is_unique_violation(e):
                raise SupabaseClientError(
                    message="Property name already exists",
                    code="UNIQUE_VIOLATION",
                    details={"name": record.get("name")}
                )
            raise SupabaseClientError(
                message=f"Failed to insert property: {e}",
                code="INSERT_PROPERTY_FAILED",
                details={"name": record.get("name")}
            )

    @classmethod
    def update_property(
        cls,
        property_id: str | UUID,
        record: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Replace the fields of an existing property row.

        Returns:
            Updated row, or None if no row has that id

        Raises:
            SupabaseClientError: If update fails. Code is UNIQUE_VIOLATION
                when the new name is already taken.
        """
        property_id_str = normalize_uuid(property_id)

        try:
            response = (
                cls._table()
                .update(record)
                .eq("id", property_id_str)
                .execute()
            )

            return response.data[0] if response.data else None

        except Exception as e:
            if _is_unique_violation(e):
                raise SupabaseClientError(
                    message="Property name already exists",
                    code="UNIQUE_VIOLATION",
                    details={"property_id": property_id_str, "name": record.get("name")}
                )
            raise SupabaseClientError(
                message=f"Failed to update property: {e}",
                code="UPDATE_PROPERTY_FAILED",
                details={"property_id": property_id_str}
            )

    @classmethod
    def delete_property(cls, property_id: str | UUID) -> dict[str, Any] | None:
        """
        Delete a property row.

        Returns:
            Deleted row, or None if no row has that id

        Raises:
            SupabaseClientError: If delete fails
        """
        property_id_str = normalize_uuid(property_id)

        try:
            response = (
                cls._table()
                .delete()
                .eq("id", property_id_str)
                .execute()
            )

            return response.data[0] if response.data else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete property: {e}",
                code="DELETE_PROPERTY_FAILED",
                details={"property_id": property_id_str}
            )

    @classmethod
    def ping(cls) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        cls._table().select("id").limit(1).execute()
