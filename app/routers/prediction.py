# =============================================================================
# app/routers/prediction.py - Demo Endpoints
# =============================================================================
# GET  /         - greeting
# POST /predict  - accepts any JSON object, returns a fixed prediction
# =============================================================================

from fastapi import APIRouter

from core.models.prediction import GreetingResponse, PredictionRequest, PredictionResponse
from core.services.prediction_service import PredictionService

router = APIRouter()


@router.get("/", response_model=GreetingResponse)
async def read_root():
    """Root endpoint - returns a greeting."""
    return PredictionService.greeting()


@router.post("/predict", response_model=PredictionResponse)
async def predict(payload: PredictionRequest):
    """
    Return a prediction for the posted features.

    The body must be a JSON object. Its contents are not validated.

    Example:
        curl -X POST http://localhost:8080/predict \\
          -H "Content-Type: application/json" \\
          -d '{"feature1": "value"}'
    """
    return PredictionService.predict(payload.features)
