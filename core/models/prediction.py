# =============================================================================
# core/models/prediction.py - Prediction Schemas
# =============================================================================
# These models define the API contract for the demo endpoints:
# - PredictionRequest: Arbitrary JSON object of input features
# - PredictionResponse: Fixed prediction label returned to clients
# - GreetingResponse: Root endpoint greeting
#
# The request body is deliberately unstructured: any JSON object is accepted
# and none of its keys are inspected.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field, RootModel


class PredictionRequest(RootModel[dict[str, Any]]):
    """
    Input features for a prediction.

    Any JSON object is valid, including the empty object. Arrays, strings
    and numbers at the top level are rejected.

    Example:
        {
            "feature1": "value"
        }
    """

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"feature1": "value"},
                {},
            ]
        }
    }

    @property
    def features(self) -> dict[str, Any]:
        return self.root


class PredictionResponse(BaseModel):
    """Prediction result."""
    prediction: str = Field(..., examples=["positive"])


class GreetingResponse(BaseModel):
    """Root endpoint greeting."""
    message: str = Field(..., examples=["Hello from FastAPI on AWS Lambda!"])
