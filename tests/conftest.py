# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest


# =============================================================================
# Fixtures
# =============================================================================

PROPERTY_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def property_id():
    """A well-formed property UUID."""
    return PROPERTY_ID


@pytest.fixture
def sample_property_payload():
    """Valid request body for creating a property (a 4x4 square)."""
    return {
        "type": "land",
        "name": "North Field",
        "location": {
            "country": "Italy",
            "state": "Piedmont",
            "city": "Turin",
            "address": "Via Roma 1",
        },
        "boundary": [
            {"lat": 0, "lng": 0},
            {"lat": 0, "lng": 4},
            {"lat": 4, "lng": 4},
            {"lat": 4, "lng": 0},
        ],
    }


@pytest.fixture
def sample_property_row(sample_property_payload):
    """Property row as returned by Supabase."""
    return {
        "id": PROPERTY_ID,
        "created_at": "2024-01-15T10:30:00+00:00",
        **sample_property_payload,
    }
