# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Property Records API:
# - test_geometry.py: Boundary area (shoelace formula)
# - test_models.py: Pydantic model validation
# - test_config.py: Settings validation
# - test_supabase_client.py: Supabase wrapper error mapping
# - test_property_service.py: Service layer with a mocked database
# - test_api.py: Endpoint behaviour through the FastAPI TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
