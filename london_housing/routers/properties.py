from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.config import settings
from ..core.errors import PropertyNotFoundError
from ..data.base import PropertyListing
from ..schemas import OptionsOut, PriceBounds, PropertyOut, PropertyType
from .regions import listing_service_dep
from ..services.listing_service import ListingService

router = APIRouter()

def _property_out(p: PropertyListing) -> PropertyOut:
    return PropertyOut(
        id=p.id, name=p.name, address=p.address, price=p.price, currency=settings.CURRENCY,
        type=p.type, bedrooms=p.bedrooms, area=p.area, region=p.region,
        image=p.image, description=p.description,
    )

@router.get("/properties", response_model=list[PropertyOut])
def list_properties(
    max_price: int | None = Query(default=None, ge=0),
    property_type: PropertyType | None = None,
    region: str | None = None,
    min_bedrooms: int | None = Query(default=None, ge=0),
    search: str | None = None,
    svc: ListingService = Depends(listing_service_dep),
):
    listings = svc.filter_properties(
        max_price=max_price,
        property_type=property_type.value if property_type else None,
        region=region,
        min_bedrooms=min_bedrooms,
        search=search,
    )
    return [_property_out(p) for p in listings]

@router.get("/properties/{property_id}", response_model=PropertyOut)
def get_property(property_id: str, svc: ListingService = Depends(listing_service_dep)):
    try:
        return _property_out(svc.reference.property(property_id))
    except PropertyNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

@router.get("/options", response_model=OptionsOut)
def get_options(svc: ListingService = Depends(listing_service_dep)):
    low, high = svc.price_bounds()
    return OptionsOut(**svc.reference.options(), price_bounds=PriceBounds(min=low, max=high))
