import asyncio
import logging
from typing import Any

from ..core.config import settings
from ..core.errors import GenerationError
from ..models.base import PricePredictor
from ..models.synthetic_model import SyntheticPricePredictor
from ..schemas import PredictionResponse
from .validation import validate_prediction_request

logger = logging.getLogger(__name__)

class PredictionService:
    """
    Orchestrates:
      raw input → validation → simulated model latency → predictor
    Used directly in-process and behind POST /predict.
    """
    def __init__(self, predictor: PricePredictor | None = None,
                 delay_seconds: float = settings.PREDICTION_DELAY_SECONDS):
        self.predictor = predictor or SyntheticPricePredictor()
        self.delay_seconds = delay_seconds

    async def predict(self, raw: Any) -> PredictionResponse:
        # Validation errors surface before any latency is simulated
        request = validate_prediction_request(raw)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        try:
            response = self.predictor.predict(request)
        except GenerationError:
            raise
        except Exception as exc:
            raise GenerationError("Price predictor failed") from exc

        logger.info(
            "prediction outcode=%s price=%d trend=%s",
            request.outcode, response.predicted_price, response.price_trend.value,
        )
        return response
