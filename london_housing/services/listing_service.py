import random
from dataclasses import dataclass
from datetime import date

from ..core.utils import round_to_thousand
from ..data.base import OutcodeRecord, PropertyListing
from ..data.reference import ReferenceData, reference_data
from ..models.base import RandomSource

MIN_PRICE_FLOOR = 100_000
MAX_PRICE_CEILING = 3_000_000
HISTORY_YEARS = 5
HISTORY_QUARTERS = 12

@dataclass(frozen=True)
class QuarterlyPrice:
    quarter: str  # e.g. "Q1 2023"
    price: int

@dataclass(frozen=True)
class RegionMarket:
    region_id: str
    region_name: str
    current_average_price: int
    quarterly_price_history: list[QuarterlyPrice]
    price_rank: str  # e.g. "Rank: 2 of 10"

def quarter_of(month: int) -> int:
    return (month - 1) // 3 + 1

class ListingService:
    """Client-side style filtering over the static outcode and listing tables."""

    def __init__(self, reference: ReferenceData | None = None, rng: RandomSource | None = None):
        self.reference = reference or reference_data
        self.rng = rng or random.Random()

    def price_bounds(self) -> tuple[int, int]:
        """Slider range for the map page: never narrower than 100k–3M."""
        prices = [o.avg_price for o in self.reference.outcodes()]
        if not prices:
            return MIN_PRICE_FLOOR, MAX_PRICE_CEILING
        return max(0, min(min(prices), MIN_PRICE_FLOOR)), max(max(prices), MAX_PRICE_CEILING)

    def filter_outcodes(self, min_price: int | None = None, max_price: int | None = None,
                        category: str | None = None) -> list[OutcodeRecord]:
        out = []
        for o in self.reference.outcodes():
            if min_price is not None and o.avg_price < min_price:
                continue
            if max_price is not None and o.avg_price > max_price:
                continue
            if category and o.price_category != category:
                continue
            out.append(o)
        return out

    def filter_properties(self, max_price: int | None = None, property_type: str | None = None,
                          region: str | None = None, min_bedrooms: int | None = None,
                          search: str | None = None) -> list[PropertyListing]:
        term = search.strip().lower() if search else ""
        region = region.strip().upper() if region else None
        out = []
        for p in self.reference.properties():
            if max_price is not None and p.price > max_price:
                continue
            if property_type and p.type != property_type:
                continue
            if region and p.region != region:
                continue
            if min_bedrooms is not None and p.bedrooms < min_bedrooms:
                continue
            if term and not any(term in s.lower() for s in (p.name, p.address, p.description)):
                continue
            out.append(p)
        out.sort(key=lambda p: p.price)
        return out

    def price_rank(self, outcode_id: str) -> str:
        ranked = sorted(self.reference.outcodes(), key=lambda o: o.avg_price, reverse=True)
        ids = [o.id for o in ranked]
        if outcode_id not in ids:
            return "Rank: N/A"
        return f"Rank: {ids.index(outcode_id) + 1} of {len(ids)}"

    def quarterly_history(self, record: OutcodeRecord, today: date) -> list[QuarterlyPrice]:
        """
        Synthetic quarterly averages for the completed quarters of the last
        five years: a random start near the area average, then a gentle walk.
        Only the most recent twelve quarters are returned.
        """
        current_quarter = quarter_of(today.month)
        history: list[QuarterlyPrice] = []
        price = record.avg_price * (0.95 + self.rng.random() * 0.1)
        for year in range(today.year - HISTORY_YEARS, today.year + 1):
            for q in range(1, 5):
                if year == today.year and q >= current_quarter:
                    break
                if history:
                    price = history[-1].price * (0.995 + self.rng.random() * 0.01)
                history.append(QuarterlyPrice(quarter=f"Q{q} {year}", price=round_to_thousand(price)))
        return history[-HISTORY_QUARTERS:]

    def region_market(self, outcode_id: str, today: date | None = None) -> RegionMarket:
        record = self.reference.outcode(outcode_id)
        history = self.quarterly_history(record, today or date.today())
        return RegionMarket(
            region_id=record.id,
            region_name=record.name,
            current_average_price=record.avg_price,
            quarterly_price_history=history or [QuarterlyPrice(f"Avg. {record.id}", record.avg_price)],
            price_rank=self.price_rank(record.id),
        )
