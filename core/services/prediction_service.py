# =============================================================================
# core/services/prediction_service.py - Prediction Business Logic
# =============================================================================
# Stand-in for a model: every request gets the same label back.
# Swap PREDICTION_LABEL for a real model call when one exists.
# =============================================================================

import logging
from typing import Any

from core.models.prediction import GreetingResponse, PredictionResponse

logger = logging.getLogger(__name__)

GREETING_MESSAGE = "Hello from FastAPI on AWS Lambda!"
PREDICTION_LABEL = "positive"


class PredictionService:
    """
    Service for the demo prediction endpoints.

    Stateless: nothing is read from or written to storage.
    """

    @staticmethod
    def greeting() -> GreetingResponse:
        """Return the fixed root greeting."""
        return GreetingResponse(message=GREETING_MESSAGE)

    @staticmethod
    def predict(features: dict[str, Any]) -> PredictionResponse:
        """
        Produce a prediction for the given features.

        Args:
            features: Arbitrary input features (never inspected)

        Returns:
            PredictionResponse with the fixed label
        """
        logger.debug(f"Prediction requested with {len(features)} feature(s)")
        return PredictionResponse(prediction=PREDICTION_LABEL)
