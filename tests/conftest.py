import random

import pytest
from fastapi.testclient import TestClient

from london_housing.core.cache import cache, rate_cache
from london_housing.main import create_app
from london_housing.models.synthetic_model import SyntheticPricePredictor
from london_housing.models.template_model import TemplateTextGenerator
from london_housing.routers import prediction, regions
from london_housing.services.insight_service import RegionInsightService
from london_housing.services.prediction_service import PredictionService


class FixedRandom:
    """Random source that always draws the same value; choice picks by index."""

    def __init__(self, value=0.5, choice_index=0):
        self.value = value
        self.choice_index = choice_index
        self.choice_calls = 0

    def random(self):
        return self.value

    def choice(self, seq):
        self.choice_calls += 1
        return seq[self.choice_index]


@pytest.fixture(autouse=True)
def clear_cache():
    """Insight summaries and rate-limit buckets must not leak between tests."""
    cache.clear()
    rate_cache.clear()
    yield
    cache.clear()
    rate_cache.clear()


@pytest.fixture
def payload():
    return {
        "fullAddress": "12 Willow Lane, Whitechapel, London",
        "outcode": "E1",
        "bedrooms": 3,
        "bathrooms": 1,
        "receptionRooms": 2,
        "area": 120,
        "tenure": "Freehold",
        "propertyType": "Terraced",
        "currentEnergyRating": "D",
        "monthOfSale": "2025-01",
    }


@pytest.fixture
def app():
    """Create an application instance with zero simulated latency."""
    app = create_app()
    app.dependency_overrides[prediction.service_dep] = lambda: PredictionService(
        SyntheticPricePredictor(rng=random.Random(42)), delay_seconds=0
    )
    app.dependency_overrides[regions.insight_service_dep] = lambda: RegionInsightService(
        TemplateTextGenerator(), delay_seconds=0
    )
    return app


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI application."""
    return TestClient(app)
