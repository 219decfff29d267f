# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .prediction_service import PredictionService

__all__ = [
    "PredictionService",
]
