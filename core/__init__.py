# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic logic:
# - models/: Pydantic schemas for request and response bodies
# - services/: Prediction service used by the HTTP layer
#
# Code in this package should NOT import from FastAPI or Mangum.
# This keeps the logic testable and reusable.
# =============================================================================
