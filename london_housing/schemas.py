import re
from enum import Enum
from pydantic import BaseModel, Field, field_validator

MONTH_OF_SALE_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"
MONTH_OF_SALE_FORMAT_DESC = "Month of sale must be in YYYY-MM format (e.g., 2024-07)."

class Tenure(str, Enum):
    FREEHOLD = "Freehold"
    LEASEHOLD = "Leasehold"

class PropertyType(str, Enum):
    FLAT = "Flat"
    DETACHED = "Detached"
    TERRACED = "Terraced"
    SEMI_DETACHED = "Semi-detached"
    BUNGALOW = "Bungalow"
    MAISONETTE = "Maisonette"

class EnergyRating(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

class PriceTrend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"

class PriceCategory(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PredictionRequest(BaseModel):
    """Property details submitted from the prediction form."""

    model_config = {"populate_by_name": True, "str_strip_whitespace": True, "allow_inf_nan": False}

    full_address: str = Field(alias="fullAddress", min_length=5)
    outcode: str = Field(min_length=2)
    longitude: float | None = None
    latitude: float | None = None
    bedrooms: int = Field(ge=0, le=10)
    bathrooms: int = Field(ge=0, le=10)
    reception_rooms: int = Field(alias="receptionRooms", ge=0, le=10)
    area: float = Field(gt=0, le=100_000, description="Floor area in square meters")
    tenure: Tenure
    property_type: PropertyType = Field(alias="propertyType")
    current_energy_rating: EnergyRating = Field(alias="currentEnergyRating")
    month_of_sale: str = Field(alias="monthOfSale")

    @field_validator("outcode", mode="before")
    @classmethod
    def _upper_outcode(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("month_of_sale")
    @classmethod
    def _check_month(cls, v: str) -> str:
        if not re.fullmatch(MONTH_OF_SALE_PATTERN, v):
            raise ValueError(MONTH_OF_SALE_FORMAT_DESC)
        return v


class PricePoint(BaseModel):
    month: str  # e.g. "Jan 2025"
    price: int = Field(ge=0)

class PredictionResponse(BaseModel):
    model_config = {"populate_by_name": True}

    predicted_price: int = Field(alias="predictedPrice", ge=0)
    price_trend: PriceTrend = Field(alias="priceTrend")
    average_area_price: int = Field(alias="averageAreaPrice", ge=0)
    price_history_chart_data: list[PricePoint] = Field(
        alias="priceHistoryChartData", min_length=12, max_length=12
    )


class RegionInsightRequest(BaseModel):
    region: str = Field(min_length=1, description="London outcode, e.g. E1, SW1")

class RegionInsightResponse(BaseModel):
    region: str
    summary: str


class OutcodeOut(BaseModel):
    model_config = {"populate_by_name": True}

    id: str
    name: str
    avg_price: int = Field(alias="avgPrice")
    price_category: PriceCategory = Field(alias="priceCategory")
    description: str

class PropertyOut(BaseModel):
    id: str
    name: str
    address: str
    price: int
    currency: str = "GBP"
    type: PropertyType
    bedrooms: int
    area: float | None = None
    region: str
    image: str
    description: str

class PriceBounds(BaseModel):
    min: int
    max: int

class OptionsOut(BaseModel):
    model_config = {"populate_by_name": True}

    tenures: list[str]
    property_types: list[str] = Field(alias="propertyTypes")
    energy_ratings: list[str] = Field(alias="energyRatings")
    bedrooms: list[int]
    bathrooms: list[int]
    reception_rooms: list[int] = Field(alias="receptionRooms")
    regions: list[str]
    price_bounds: PriceBounds = Field(alias="priceBounds")


class ErrorDetail(BaseModel):
    field: str
    message: str

class ErrorResponse(BaseModel):
    message: str
    errors: list[ErrorDetail] | None = None


class QuarterlyPricePoint(BaseModel):
    quarter: str  # e.g. "Q1 2023"
    price: int = Field(ge=0)

class RegionMarketOut(BaseModel):
    model_config = {"populate_by_name": True}

    region_id: str = Field(alias="regionId")
    region_name: str = Field(alias="regionName")
    current_average_price: int = Field(alias="currentAveragePrice")
    quarterly_price_history: list[QuarterlyPricePoint] = Field(alias="quarterlyPriceHistory")
    price_rank: str = Field(alias="priceRank")
