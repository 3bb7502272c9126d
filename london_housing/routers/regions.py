import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from ..core.errors import GenerationError, RegionNotFoundError
from ..core.security import rate_limit
from ..data.base import OutcodeRecord
from ..schemas import (
    ErrorResponse, OutcodeOut, PriceCategory, QuarterlyPricePoint, RegionInsightRequest,
    RegionInsightResponse, RegionMarketOut,
)
from ..services.insight_service import RegionInsightService
from ..services.listing_service import ListingService

logger = logging.getLogger(__name__)

router = APIRouter()

def insight_service_dep() -> RegionInsightService:
    return RegionInsightService()

def listing_service_dep() -> ListingService:
    return ListingService()

def _outcode_out(o: OutcodeRecord) -> OutcodeOut:
    return OutcodeOut(
        id=o.id, name=o.name, avg_price=o.avg_price,
        price_category=o.price_category, description=o.description,
    )

@router.post(
    "/insights",
    response_model=RegionInsightResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def post_insights(
    body: RegionInsightRequest,
    _lim = Depends(rate_limit),
    svc: RegionInsightService = Depends(insight_service_dep),
):
    try:
        return await svc.get_insights(body.region)
    except GenerationError:
        logger.exception("region insight generation failed region=%s", body.region)
        return JSONResponse(status_code=500, content={"message": "Failed to get region insights"})

@router.get("/outcodes", response_model=list[OutcodeOut])
def list_outcodes(
    min_price: int | None = Query(default=None, ge=0),
    max_price: int | None = Query(default=None, ge=0),
    category: PriceCategory | None = None,
    svc: ListingService = Depends(listing_service_dep),
):
    records = svc.filter_outcodes(
        min_price=min_price, max_price=max_price,
        category=category.value if category else None,
    )
    return [_outcode_out(o) for o in records]

@router.get("/outcodes/{outcode_id}", response_model=OutcodeOut)
def get_outcode(outcode_id: str, svc: ListingService = Depends(listing_service_dep)):
    try:
        return _outcode_out(svc.reference.outcode(outcode_id))
    except RegionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

@router.get("/outcodes/{outcode_id}/market", response_model=RegionMarketOut)
def get_outcode_market(outcode_id: str, svc: ListingService = Depends(listing_service_dep)):
    try:
        market = svc.region_market(outcode_id)
    except RegionNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return RegionMarketOut(
        region_id=market.region_id,
        region_name=market.region_name,
        current_average_price=market.current_average_price,
        quarterly_price_history=[
            QuarterlyPricePoint(quarter=q.quarter, price=q.price) for q in market.quarterly_price_history
        ],
        price_rank=market.price_rank,
    )
