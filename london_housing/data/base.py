from typing import Protocol, Optional, Sequence
from dataclasses import dataclass

# ----- Data shapes (immutable reference rows) -----

@dataclass(frozen=True)
class OutcodeRecord:
    id: str                   # outcode, e.g. "SW1"
    name: str                 # e.g. "Westminster, Belgravia, Pimlico"
    avg_price: int
    price_category: str       # low | medium | high
    description: str

@dataclass(frozen=True)
class PropertyListing:
    id: str
    name: str
    address: str
    price: int
    type: str                 # Flat | Detached | Terraced | Semi-detached | ...
    bedrooms: int
    region: str               # outcode the listing sits in
    image: str
    description: str
    area: Optional[float] = None  # square meters

# ----- Protocols (interfaces) -----

class ReferenceProvider(Protocol):
    def outcodes(self) -> Sequence[OutcodeRecord]: ...
    def outcode(self, outcode_id: str) -> OutcodeRecord: ...
    def properties(self) -> Sequence[PropertyListing]: ...
    def property(self, property_id: str) -> PropertyListing: ...
