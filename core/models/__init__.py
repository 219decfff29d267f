# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - prediction.py: Prediction request/response and greeting schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .prediction import (
    GreetingResponse,
    PredictionRequest,
    PredictionResponse,
)

__all__ = [
    "GreetingResponse",
    "PredictionRequest",
    "PredictionResponse",
]
