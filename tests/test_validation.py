import pytest

from london_housing.core.errors import PredictionValidationError
from london_housing.schemas import MONTH_OF_SALE_FORMAT_DESC, EnergyRating, PropertyType, Tenure
from london_housing.services.validation import validate_prediction_request


def _fields(exc_info):
    return {v.field for v in exc_info.value.violations}


def test_valid_request_is_normalized(payload):
    payload["outcode"] = " e1 "
    req = validate_prediction_request(payload)
    assert req.outcode == "E1"
    assert req.tenure is Tenure.FREEHOLD
    assert req.property_type is PropertyType.TERRACED
    assert req.current_energy_rating is EnergyRating.D
    assert req.reception_rooms == 2
    assert req.month_of_sale == "2025-01"
    assert req.longitude is None and req.latitude is None


def test_optional_coordinates_accepted(payload):
    payload.update(longitude=-0.06, latitude=51.52)
    req = validate_prediction_request(payload)
    assert req.longitude == -0.06
    assert req.latitude == 51.52


def test_all_violations_are_reported_together(payload):
    payload.update(bedrooms=11, area=-5, monthOfSale="2024-13")
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    violations = exc_info.value.violations
    assert len(violations) == 3
    assert _fields(exc_info) == {"bedrooms", "area", "monthOfSale"}
    month = next(v for v in violations if v.field == "monthOfSale")
    assert month.message == MONTH_OF_SALE_FORMAT_DESC
    assert all(v.message for v in violations)


def test_enum_fields_reject_unknown_values(payload):
    payload.update(tenure="Feudal", propertyType="Castle", currentEnergyRating="H")
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"tenure", "propertyType", "currentEnergyRating"}


def test_short_address_and_outcode(payload):
    payload.update(fullAddress="   abc  ", outcode="E")
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"fullAddress", "outcode"}


def test_missing_fields_are_all_listed():
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request({})
    assert _fields(exc_info) == {
        "fullAddress", "outcode", "bedrooms", "bathrooms", "receptionRooms", "area",
        "tenure", "propertyType", "currentEnergyRating", "monthOfSale",
    }


def test_non_object_body_rejected():
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(["not", "an", "object"])
    assert _fields(exc_info) == {"body"}


@pytest.mark.parametrize("month", ["2025-1", "2025-00", "25-01", "2025/01", "2025-01-01"])
def test_month_of_sale_format_rejected(payload, month):
    payload["monthOfSale"] = month
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"monthOfSale"}


@pytest.mark.parametrize("month", ["2025-01", "2024-10", "1999-12"])
def test_month_of_sale_format_accepted(payload, month):
    payload["monthOfSale"] = month
    assert validate_prediction_request(payload).month_of_sale == month


@pytest.mark.parametrize("field", ["bedrooms", "bathrooms", "receptionRooms"])
def test_room_bounds_are_inclusive(payload, field):
    payload[field] = 0
    validate_prediction_request(payload)
    payload[field] = 10
    validate_prediction_request(payload)
    payload[field] = -1
    with pytest.raises(PredictionValidationError):
        validate_prediction_request(payload)


def test_fractional_rooms_rejected(payload):
    payload["bedrooms"] = 2.5
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"bedrooms"}


def test_area_must_be_strictly_positive(payload):
    payload["area"] = 0
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"area"}
    payload["area"] = 0.5
    assert validate_prediction_request(payload).area == 0.5


@pytest.mark.parametrize("area", [float("inf"), float("-inf"), float("nan"), 1e306, 100_001])
def test_area_must_be_finite_and_realistic(payload, area):
    payload["area"] = area
    with pytest.raises(PredictionValidationError) as exc_info:
        validate_prediction_request(payload)
    assert _fields(exc_info) == {"area"}


def test_area_upper_bound_is_inclusive(payload):
    payload["area"] = 100_000
    assert validate_prediction_request(payload).area == 100_000
