import random
from .base import PricePredictor, RandomSource
from ..core.config import settings
from ..core.utils import round_to_thousand, parse_month, month_sequence, month_label
from ..schemas import (
    PredictionRequest, PredictionResponse, PricePoint, PriceTrend, Tenure, EnergyRating,
)

ENERGY_RATING_MODIFIERS = {
    EnergyRating.A: 1.10,
    EnergyRating.B: 1.05,
    EnergyRating.C: 1.00,
    EnergyRating.D: 0.95,
    EnergyRating.E: 0.90,
    EnergyRating.F: 0.85,
    EnergyRating.G: 0.80,
}
FREEHOLD_MODIFIER = 1.1

# Outcode prefix tiers, checked in order; the first match wins
LOCATION_TIERS = (
    (("SW", "W", "N"), 1.20),
    (("E", "SE"), 1.05),
)

SERIES_START_RATIO = 0.98
SERIES_MONTHS = 12

def location_modifier(outcode: str) -> float:
    for prefixes, modifier in LOCATION_TIERS:
        if outcode.startswith(prefixes):
            return modifier
    return 1.0

def derive_trend(history: list[PricePoint], stable_band_pct: float) -> PriceTrend:
    """Label the series by the relative move from its first to its last point."""
    first, last = history[0].price, history[-1].price
    change_pct = (last - first) / first * 100.0 if first else 0.0
    if change_pct > stable_band_pct:
        return PriceTrend.INCREASING
    if change_pct < -stable_band_pct:
        return PriceTrend.DECREASING
    return PriceTrend.STABLE

class SyntheticPricePredictor(PricePredictor):
    """
    Formula-based placeholder model. The price is a linear function of the
    rooms and floor area, scaled by tenure, energy rating and location; the
    monthly series is a random walk around it. No training data involved.
    """
    def __init__(
        self,
        rng: RandomSource | None = None,
        trend_mode: str = settings.TREND_MODE,
        stable_band_pct: float = settings.TREND_STABLE_BAND_PCT,
        base: int = settings.PRICE_BASE,
        per_bedroom: int = settings.PRICE_PER_BEDROOM,
        per_bathroom: int = settings.PRICE_PER_BATHROOM,
        per_reception_room: int = settings.PRICE_PER_RECEPTION_ROOM,
        per_sqm: int = settings.PRICE_PER_SQM,
    ):
        if trend_mode not in ("derived", "legacy"):
            raise ValueError(f"Unknown trend mode: {trend_mode}")
        self.rng = rng or random.Random()
        self.trend_mode = trend_mode
        self.stable_band_pct = stable_band_pct
        self.base = base
        self.per_bedroom = per_bedroom
        self.per_bathroom = per_bathroom
        self.per_reception_room = per_reception_room
        self.per_sqm = per_sqm

    def base_price(self, req: PredictionRequest) -> float:
        price = float(self.base)
        price += req.bedrooms * self.per_bedroom
        price += req.bathrooms * self.per_bathroom
        price += req.reception_rooms * self.per_reception_room
        price += req.area * self.per_sqm
        if req.tenure == Tenure.FREEHOLD:
            price *= FREEHOLD_MODIFIER
        price *= ENERGY_RATING_MODIFIERS[req.current_energy_rating]
        price *= location_modifier(req.outcode)
        return price

    def price_history(self, predicted_price: int, month_of_sale: str) -> list[PricePoint]:
        year, month = parse_month(month_of_sale)
        last_price = predicted_price * SERIES_START_RATIO
        points = []
        for y, m in month_sequence(year, month, SERIES_MONTHS):
            # Uniform noise in [-0.4%, +1.1%)
            last_price *= 1 + (self.rng.random() * 0.015 - 0.004)
            points.append(PricePoint(month=month_label(y, m), price=round_to_thousand(last_price)))
        return points

    def predict(self, request: PredictionRequest) -> PredictionResponse:
        predicted_price = round_to_thousand(self.base_price(request))
        history = self.price_history(predicted_price, request.month_of_sale)

        if self.trend_mode == "legacy":
            trend = self.rng.choice(list(PriceTrend))
        else:
            trend = derive_trend(history, self.stable_band_pct)

        average_area_price = round_to_thousand(predicted_price * (0.8 + self.rng.random() * 0.3))

        return PredictionResponse(
            predicted_price=predicted_price,
            price_trend=trend,
            average_area_price=average_area_price,
            price_history_chart_data=history,
        )
