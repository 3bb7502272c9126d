import asyncio
import random
import time

import pytest

from london_housing.core.errors import GenerationError, PredictionValidationError
from london_housing.models.synthetic_model import SyntheticPricePredictor
from london_housing.schemas import PredictionResponse
from london_housing.services.prediction_service import PredictionService


class CountingPredictor:
    def __init__(self, inner=None, fail_with=None):
        self.inner = inner or SyntheticPricePredictor(rng=random.Random(1))
        self.fail_with = fail_with
        self.calls = 0

    def predict(self, request):
        self.calls += 1
        if self.fail_with:
            raise self.fail_with
        return self.inner.predict(request)


def test_predict_returns_full_response(payload):
    svc = PredictionService(CountingPredictor(), delay_seconds=0)
    out = asyncio.run(svc.predict(payload))
    assert isinstance(out, PredictionResponse)
    assert out.predicted_price == 757_000
    assert len(out.price_history_chart_data) == 12


def test_response_serializes_with_camel_case_keys(payload):
    svc = PredictionService(CountingPredictor(), delay_seconds=0)
    data = asyncio.run(svc.predict(payload)).model_dump(mode="json", by_alias=True)
    assert set(data) == {"predictedPrice", "priceTrend", "averageAreaPrice", "priceHistoryChartData"}
    assert set(data["priceHistoryChartData"][0]) == {"month", "price"}
    assert data["priceTrend"] in {"increasing", "decreasing", "stable"}


def test_invalid_input_never_reaches_predictor(payload):
    predictor = CountingPredictor()
    svc = PredictionService(predictor, delay_seconds=0)
    payload.update(bedrooms=11, area=-5, monthOfSale="2024-13")
    with pytest.raises(PredictionValidationError) as exc_info:
        asyncio.run(svc.predict(payload))
    assert len(exc_info.value.violations) == 3
    assert predictor.calls == 0


def test_unexpected_predictor_failure_becomes_generation_error(payload):
    svc = PredictionService(CountingPredictor(fail_with=ZeroDivisionError("boom")), delay_seconds=0)
    with pytest.raises(GenerationError) as exc_info:
        asyncio.run(svc.predict(payload))
    assert isinstance(exc_info.value.__cause__, ZeroDivisionError)


def test_generation_error_passes_through(payload):
    err = GenerationError("backend down")
    svc = PredictionService(CountingPredictor(fail_with=err), delay_seconds=0)
    with pytest.raises(GenerationError) as exc_info:
        asyncio.run(svc.predict(payload))
    assert exc_info.value is err


def test_simulated_latency_is_applied(payload):
    svc = PredictionService(CountingPredictor(), delay_seconds=0.05)
    start = time.perf_counter()
    asyncio.run(svc.predict(payload))
    assert time.perf_counter() - start >= 0.05


def test_concurrent_predictions_are_independent(payload):
    svc = PredictionService(SyntheticPricePredictor(), delay_seconds=0.01)
    other = dict(payload, bedrooms=5)

    async def run_both():
        return await asyncio.gather(svc.predict(payload), svc.predict(other))

    a, b = asyncio.run(run_both())
    assert a.predicted_price == 757_000
    assert b.predicted_price > a.predicted_price
