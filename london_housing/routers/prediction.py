import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.errors import GenerationError
from ..core.metrics import PREDICTIONS
from ..core.security import rate_limit
from ..schemas import ErrorResponse, PredictionRequest, PredictionResponse
from ..services.prediction_service import PredictionService

logger = logging.getLogger(__name__)

router = APIRouter()

def service_dep() -> PredictionService:
    # Cheap factory; the predictor holds no state beyond its random source.
    return PredictionService()

@router.post(
    "/predict",
    response_model=PredictionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def post_predict(
    body: PredictionRequest,
    _lim = Depends(rate_limit),
    svc: PredictionService = Depends(service_dep),
):
    try:
        result = await svc.predict(body)
    except GenerationError:
        PREDICTIONS.labels(outcome="error").inc()
        logger.exception("prediction generation failed")
        return JSONResponse(status_code=500, content={"message": "Failed to get prediction"})
    except Exception:
        PREDICTIONS.labels(outcome="error").inc()
        logger.exception("unexpected prediction failure")
        return JSONResponse(status_code=500, content={"message": "Failed to get prediction"})

    PREDICTIONS.labels(outcome="success").inc()
    return result
