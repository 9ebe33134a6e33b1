# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the property models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Points are immutable and accept the legacy "lang" key
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

from unittest.mock import patch
from uuid import UUID

import pytest
from pydantic import ValidationError

from app.config import settings
from core.models import (
    AreaResponse,
    Location,
    Point,
    PropertyCreate,
    PropertyList,
    PropertyResponse,
    PropertyType,
    PropertyUpdate,
)


# =============================================================================
# Point Tests
# =============================================================================

class TestPoint:
    """Tests for the Point model."""

    def test_valid_point(self):
        point = Point(lat=45.07, lng=7.68)

        assert point.lat == 45.07
        assert point.lng == 7.68

    def test_legacy_lang_alias(self):
        point = Point.model_validate({"lat": 1, "lang": 2})
        assert point.lng == 2

    def test_point_is_immutable(self):
        point = Point(lat=1, lng=2)

        with pytest.raises(ValidationError):
            point.lat = 5

    def test_rejects_non_numeric(self):
        with pytest.raises(ValidationError):
            Point(lat="north", lng=2)

    def test_rejects_nan(self):
        with pytest.raises(ValidationError):
            Point(lat=float("nan"), lng=2)

    def test_rejects_missing_coordinate(self):
        with pytest.raises(ValidationError):
            Point.model_validate({"lat": 1})


# =============================================================================
# Property Tests
# =============================================================================

class TestPropertyCreate:
    """Tests for PropertyCreate validation."""

    def test_valid_property(self, sample_property_payload):
        prop = PropertyCreate(**sample_property_payload)

        assert prop.type == PropertyType.LAND
        assert prop.location.city == "Turin"
        assert len(prop.boundary) == 4

    def test_boundary_order_preserved(self, sample_property_payload):
        prop = PropertyCreate(**sample_property_payload)

        assert [(p.lat, p.lng) for p in prop.boundary] == [(0, 0), (0, 4), (4, 4), (4, 0)]

    def test_three_points_is_enough(self, sample_property_payload):
        sample_property_payload["boundary"] = sample_property_payload["boundary"][:3]
        prop = PropertyCreate(**sample_property_payload)
        assert len(prop.boundary) == 3

    def test_no_upper_bound_on_points(self, sample_property_payload):
        sample_property_payload["boundary"] = [{"lat": i, "lng": i * i} for i in range(50)]
        prop = PropertyCreate(**sample_property_payload)
        assert len(prop.boundary) == 50

    def test_rejects_two_points(self, sample_property_payload):
        sample_property_payload["boundary"] = sample_property_payload["boundary"][:2]

        with pytest.raises(ValidationError) as exc_info:
            PropertyCreate(**sample_property_payload)

        assert "at least 3 points" in str(exc_info.value)

    def test_rejects_invalid_type(self, sample_property_payload):
        sample_property_payload["type"] = "castle"

        with pytest.raises(ValidationError):
            PropertyCreate(**sample_property_payload)

    @pytest.mark.parametrize("field", ["type", "name", "location", "boundary"])
    def test_rejects_missing_field(self, sample_property_payload, field):
        del sample_property_payload[field]

        with pytest.raises(ValidationError):
            PropertyCreate(**sample_property_payload)

    @pytest.mark.parametrize("field", ["country", "city", "address"])
    def test_rejects_incomplete_location(self, sample_property_payload, field):
        del sample_property_payload["location"][field]

        with pytest.raises(ValidationError):
            PropertyCreate(**sample_property_payload)

    def test_state_is_optional(self, sample_property_payload):
        del sample_property_payload["location"]["state"]
        prop = PropertyCreate(**sample_property_payload)
        assert prop.location.state is None

    def test_rejects_empty_name(self, sample_property_payload):
        sample_property_payload["name"] = ""

        with pytest.raises(ValidationError):
            PropertyCreate(**sample_property_payload)

    def test_to_record_is_json_ready(self, sample_property_payload):
        record = PropertyCreate(**sample_property_payload).to_record()

        assert record["type"] == "land"
        assert record["boundary"][1] == {"lat": 0.0, "lng": 4.0}
        assert record["location"]["country"] == "Italy"

    def test_update_shares_validation(self, sample_property_payload):
        sample_property_payload["boundary"] = []

        with pytest.raises(ValidationError):
            PropertyUpdate(**sample_property_payload)


# =============================================================================
# Response Model Tests
# =============================================================================

class TestResponseModels:
    """Tests for response models."""

    def test_property_response_from_row(self, sample_property_row):
        response = PropertyResponse.model_validate(sample_property_row)

        assert response.id == UUID(sample_property_row["id"])
        assert response.created_at is not None
        assert response.boundary[2] == Point(lat=4, lng=4)

    def test_property_response_reads_legacy_rows(self, sample_property_row):
        sample_property_row["boundary"] = [{"lat": 1, "lang": 2}] * 3
        response = PropertyResponse.model_validate(sample_property_row)
        assert response.boundary[0].lng == 2

    def test_property_response_null_boundary(self, sample_property_row):
        sample_property_row["boundary"] = None
        response = PropertyResponse.model_validate(sample_property_row)
        assert response.boundary == []

    def test_property_list_defaults(self):
        listing = PropertyList(message="No property in the database")

        assert listing.length == 0
        assert listing.properties == []

    def test_location_model(self):
        location = Location(country="Italy", city="Turin", address="Via Roma 1")
        assert location.state is None

    def test_area_response_rejects_negative(self):
        with pytest.raises(ValidationError):
            AreaResponse(area=-1)


# =============================================================================
# Configurable Minimum Tests
# =============================================================================

class TestMinimumBoundaryPoints:
    """MIN_BOUNDARY_POINTS raises the vertex minimum for incoming boundaries."""

    def test_raised_minimum_rejects_four_points(self, sample_property_payload):
        with patch.object(settings, "MIN_BOUNDARY_POINTS", 5):
            with pytest.raises(ValidationError) as exc_info:
                PropertyCreate(**sample_property_payload)

        assert "at least 5 points" in str(exc_info.value)

    def test_raised_minimum_accepts_five_points(self, sample_property_payload):
        sample_property_payload["boundary"].append({"lat": 2, "lng": -1})

        with patch.object(settings, "MIN_BOUNDARY_POINTS", 5):
            prop = PropertyCreate(**sample_property_payload)

        assert len(prop.boundary) == 5
