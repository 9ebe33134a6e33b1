# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic:
# - geometry.py: Boundary polygon area (shoelace formula)
# - models/: Pydantic schemas for data validation
# - services/: Property CRUD on top of the Supabase client
#
# geometry.py has no framework or database imports and can be used alone.
# =============================================================================
