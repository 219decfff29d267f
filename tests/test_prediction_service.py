# =============================================================================
# tests/test_prediction_service.py - Service and Model Tests
# =============================================================================
# Unit tests for the framework-agnostic core package.
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import GreetingResponse, PredictionRequest, PredictionResponse
from core.services import PredictionService
from core.services.prediction_service import GREETING_MESSAGE, PREDICTION_LABEL


# =============================================================================
# Model Tests
# =============================================================================

class TestPredictionRequest:
    """Tests for PredictionRequest model."""

    def test_accepts_arbitrary_object(self, sample_features):
        """Any JSON object is accepted as-is."""
        request = PredictionRequest.model_validate(sample_features)
        assert request.features == {"feature1": "value"}

    def test_accepts_empty_object(self):
        """The empty object is a valid request."""
        assert PredictionRequest.model_validate({}).features == {}

    def test_accepts_nested_values(self):
        """Values are not constrained to any type."""
        data = {"a": [1, 2, 3], "b": {"c": None}, "d": 1.5}
        assert PredictionRequest.model_validate(data).features == data

    @pytest.mark.parametrize("payload", [[1, 2], "text", 42, None])
    def test_rejects_non_object(self, payload):
        """Top-level arrays and scalars are rejected."""
        with pytest.raises(ValidationError):
            PredictionRequest.model_validate(payload)


class TestResponses:
    """Tests for response models."""

    def test_prediction_response_serializes(self):
        response = PredictionResponse(prediction="positive")
        assert response.model_dump() == {"prediction": "positive"}

    def test_greeting_response_requires_message(self):
        with pytest.raises(ValidationError):
            GreetingResponse()


# =============================================================================
# Service Tests
# =============================================================================

class TestPredictionService:
    """Tests for PredictionService."""

    def test_greeting_is_fixed(self):
        """Greeting always returns the same message."""
        assert PredictionService.greeting().message == GREETING_MESSAGE
        assert GREETING_MESSAGE == "Hello from FastAPI on AWS Lambda!"

    def test_predict_returns_fixed_label(self, sample_features):
        """Prediction is the fixed label."""
        result = PredictionService.predict(sample_features)
        assert result == PredictionResponse(prediction=PREDICTION_LABEL)
        assert result.prediction == "positive"

    def test_predict_ignores_input(self):
        """Different inputs give the same prediction."""
        first = PredictionService.predict({})
        second = PredictionService.predict({"feature1": 1, "feature2": [True]})
        assert first == second

    def test_predict_does_not_mutate_input(self, sample_features):
        before = dict(sample_features)
        PredictionService.predict(sample_features)
        assert sample_features == before
