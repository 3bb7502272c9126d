import random

import pytest

from london_housing.core.utils import month_sequence, round_to_thousand
from london_housing.models.synthetic_model import SyntheticPricePredictor, location_modifier
from london_housing.schemas import PriceTrend
from london_housing.services.validation import validate_prediction_request

from conftest import FixedRandom


def _request(payload, **overrides):
    data = dict(payload)
    data.update(overrides)
    return validate_prediction_request(data)


def _price(payload, **overrides):
    return SyntheticPricePredictor(rng=random.Random(0)).predict(_request(payload, **overrides)).predicted_price


def test_worked_example_price(payload):
    # 690000 base, x1.1 freehold, x0.95 rating D, x1.05 for an E outcode
    assert _price(payload) == 757_000


def test_history_has_twelve_rounded_points(payload):
    out = SyntheticPricePredictor().predict(_request(payload))
    history = out.price_history_chart_data
    assert len(history) == 12
    for point in history:
        assert point.price >= 0
        assert point.price % 1000 == 0
    assert out.predicted_price % 1000 == 0
    assert out.average_area_price % 1000 == 0


def test_history_labels_start_at_month_of_sale(payload):
    out = SyntheticPricePredictor().predict(_request(payload))
    assert [p.month for p in out.price_history_chart_data] == [
        "Jan 2025", "Feb 2025", "Mar 2025", "Apr 2025", "May 2025", "Jun 2025",
        "Jul 2025", "Aug 2025", "Sep 2025", "Oct 2025", "Nov 2025", "Dec 2025",
    ]


def test_history_labels_roll_over_year(payload):
    out = SyntheticPricePredictor().predict(_request(payload, monthOfSale="2024-11"))
    labels = [p.month for p in out.price_history_chart_data]
    assert labels[:3] == ["Nov 2024", "Dec 2024", "Jan 2025"]
    assert labels[-1] == "Oct 2025"


def test_month_sequence_wraps_december():
    assert month_sequence(2023, 12, 3) == [(2023, 12), (2024, 1), (2024, 2)]


@pytest.mark.parametrize("field,low,high", [
    ("bedrooms", 2, 3),
    ("bathrooms", 0, 1),
    ("receptionRooms", 4, 5),
    ("area", 80, 90),
])
def test_price_increases_with_size(payload, field, low, high):
    assert _price(payload, **{field: high}) > _price(payload, **{field: low})


def test_energy_rating_ordering(payload):
    prices = [_price(payload, currentEnergyRating=r) for r in "ABCDEFG"]
    assert prices == sorted(prices, reverse=True)
    assert len(set(prices)) == 7


def test_freehold_beats_leasehold(payload):
    assert _price(payload, tenure="Freehold") > _price(payload, tenure="Leasehold")


@pytest.mark.parametrize("outcode,modifier", [
    ("SW1", 1.20), ("W1", 1.20), ("WC1", 1.20), ("N1", 1.20), ("NW1", 1.20),
    ("SE1", 1.05), ("E1", 1.05), ("EC1", 1.05),
    ("IG1", 1.0), ("CR0", 1.0),
])
def test_location_modifier_tiers(outcode, modifier):
    assert location_modifier(outcode) == modifier


def test_property_type_does_not_move_price(payload):
    assert _price(payload, propertyType="Flat") == _price(payload, propertyType="Detached")


def test_constants_are_configurable(payload):
    predictor = SyntheticPricePredictor(rng=random.Random(0), base=0, per_bedroom=0,
                                        per_bathroom=0, per_reception_room=0, per_sqm=1000)
    req = _request(payload, tenure="Leasehold", currentEnergyRating="C", outcode="IG1", area=100)
    assert predictor.predict(req).predicted_price == 100_000


def test_falling_series_is_labelled_decreasing(payload):
    out = SyntheticPricePredictor(rng=FixedRandom(0.0)).predict(_request(payload))
    prices = [p.price for p in out.price_history_chart_data]
    assert prices == sorted(prices, reverse=True)
    assert out.price_trend is PriceTrend.DECREASING
    assert out.average_area_price == 606_000  # 757000 * 0.8, rounded


def test_rising_series_is_labelled_increasing(payload):
    out = SyntheticPricePredictor(rng=FixedRandom(0.99)).predict(_request(payload))
    assert out.price_history_chart_data[-1].price > out.price_history_chart_data[0].price
    assert out.price_trend is PriceTrend.INCREASING


def test_flat_series_is_labelled_stable(payload):
    out = SyntheticPricePredictor(rng=FixedRandom(4 / 15)).predict(_request(payload))
    assert {p.price for p in out.price_history_chart_data} == {742_000}  # 757000 * 0.98
    assert out.price_trend is PriceTrend.STABLE


def test_legacy_mode_draws_trend_at_random(payload):
    rng = FixedRandom(0.0, choice_index=0)
    out = SyntheticPricePredictor(rng=rng, trend_mode="legacy").predict(_request(payload))
    assert rng.choice_calls == 1
    # Falling series, yet the label is whatever was drawn
    assert out.price_trend is PriceTrend.INCREASING


def test_derived_mode_does_not_draw_trend(payload):
    rng = FixedRandom(0.5)
    SyntheticPricePredictor(rng=rng).predict(_request(payload))
    assert rng.choice_calls == 0


def test_unknown_trend_mode_rejected():
    with pytest.raises(ValueError):
        SyntheticPricePredictor(trend_mode="vibes")


def test_seeded_source_is_reproducible(payload):
    a = SyntheticPricePredictor(rng=random.Random(7)).predict(_request(payload))
    b = SyntheticPricePredictor(rng=random.Random(7)).predict(_request(payload))
    assert a == b


def test_average_area_price_within_band(payload):
    for seed in range(20):
        out = SyntheticPricePredictor(rng=random.Random(seed)).predict(_request(payload))
        assert 0.8 * 757_000 - 500 <= out.average_area_price <= 1.1 * 757_000 + 500


@pytest.mark.parametrize("value,expected", [
    (757_102.5, 757_000), (757_500, 758_000), (2_500, 3_000), (1_499.99, 1_000), (0, 0),
])
def test_round_to_thousand_rounds_half_up(value, expected):
    assert round_to_thousand(value) == expected
