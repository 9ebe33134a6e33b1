# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Example:
        property_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        property_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def parse_uuid(value: str | UUID) -> UUID | None:
    """
    Parse a client-supplied identifier.

    Returns None instead of raising when the value is not a valid UUID,
    so callers can report it the same way as a missing record.
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None
