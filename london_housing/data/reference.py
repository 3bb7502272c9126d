"""
Static London reference tables. Built once at import and never mutated;
the tuples of frozen dataclasses make accidental writes fail loudly.
"""
from typing import Sequence
from .base import OutcodeRecord, PropertyListing, ReferenceProvider
from ..core.errors import RegionNotFoundError, PropertyNotFoundError
from ..core.utils import normalize_region

PLACEHOLDER_IMAGE = "https://placehold.co/600x400.png"

TENURE_OPTIONS = ("Freehold", "Leasehold")
PROPERTY_TYPE_OPTIONS = ("Flat", "Detached", "Terraced", "Semi-detached", "Bungalow", "Maisonette")
ENERGY_RATING_OPTIONS = ("A", "B", "C", "D", "E", "F", "G")
BEDROOM_OPTIONS = (0, 1, 2, 3, 4, 5, 6)
BATHROOM_OPTIONS = (0, 1, 2, 3, 4, 5)
RECEPTION_OPTIONS = (0, 1, 2, 3, 4)

# Outcodes selectable on the prediction form
REGION_OPTIONS = tuple(sorted((
    "E1", "E10", "E11", "E13", "E14", "E15", "E17", "E18", "E3", "E4",
    "E5", "E7", "E8", "EC1Y", "EC2Y", "EC4A", "N10", "N11", "N12",
    "N13", "N14", "N15", "N16", "N17", "N18", "N19", "N2", "N20",
    "N21", "N22", "N4", "N5", "N6", "N7", "N8", "N9", "NW1", "NW10",
    "NW11", "NW2", "NW3", "NW4", "NW5", "NW6", "NW7", "NW8", "SE1",
    "SE10", "SE11", "SE12", "SE13", "SE14", "SE15", "SE16", "SE17",
    "SE18", "SE19", "SE2", "SE20", "SE21", "SE23", "SE24", "SE25",
    "SE26", "SE27", "SE28", "SE3", "SE4", "SE5", "SE6", "SE7", "SE9",
    "SW10", "SW11", "SW12", "SW13", "SW14", "SW15", "SW16", "SW17",
    "SW18", "SW19", "SW1E", "SW1P", "SW1V", "SW1X", "SW1Y", "SW2",
    "SW3", "SW4", "SW5", "SW6", "SW7", "SW8", "W10", "W11", "W12",
    "W13", "W14", "W1B", "W1D", "W1F", "W1H", "W1J", "W1K", "W1W",
    "W2", "W4", "W5", "W6", "W7", "W8", "W9", "WC1B", "WC1H", "WC1R",
    "WC1X", "WC2B", "WC2H", "WC2N", "E12", "E6", "N1", "N3", "NW9",
    "SE22", "SE8", "SW1H", "SW20", "SW9", "W1G", "W1T", "W3", "WC1A",
    "WC1E", "WC2E", "E2", "E9", "EC1R", "EC2A", "SW1W", "W1U", "WC1N",
    "EC4R", "E16", "EC1N", "SW1A", "W1S", "EC1A", "EC1M", "EC4V",
    "E1W", "EC3V", "EC4Y", "EC1V", "EC4M", "EC3A", "EC3N", "WC2R",
    "EC3M", "EC2M", "EC3R", "WC2A", "WC1V", "EC2V", "EC2R", "W1C",
)))

OUTCODES: tuple[OutcodeRecord, ...] = (
    OutcodeRecord("E1", "Whitechapel, Stepney, Mile End", 650_000, "medium",
                  "A vibrant and diverse area with a mix of historic and modern housing."),
    OutcodeRecord("SW1", "Westminster, Belgravia, Pimlico", 2_500_000, "high",
                  "One of London's most prestigious and expensive areas, home to landmarks and luxury properties."),
    OutcodeRecord("N1", "Islington, Barnsbury, Canonbury", 900_000, "medium",
                  "A popular and affluent residential area known for its Georgian architecture and trendy amenities."),
    OutcodeRecord("SE1", "Waterloo, Bermondsey, Southwark", 750_000, "medium",
                  "A dynamic riverside district with significant regeneration, offering a mix of property types."),
    OutcodeRecord("W1", "Mayfair, Marylebone, Soho", 3_000_000, "high",
                  "An ultra-exclusive central London area, renowned for luxury retail, dining, and prime real estate."),
    OutcodeRecord("IG1", "Ilford", 350_000, "low",
                  "An East London suburban town offering more affordable housing options with good transport links."),
    OutcodeRecord("CR0", "Croydon", 400_000, "low",
                  "A major South London hub undergoing significant development, known for its relative affordability."),
    OutcodeRecord("NW1", "Camden Town, Regent's Park", 1_100_000, "high",
                  "Known for its vibrant markets, music scene, and proximity to Regent's Park."),
    OutcodeRecord("WC1", "Bloomsbury, Holborn", 1_300_000, "high",
                  "A historic and intellectual hub, home to universities, museums, and garden squares."),
    OutcodeRecord("EC1", "Clerkenwell, Farringdon, Barbican", 950_000, "medium",
                  "A trendy area with a mix of tech companies, design studios, and historic buildings."),
)

PROPERTIES: tuple[PropertyListing, ...] = (
    PropertyListing("1", "Charming Victorian Terrace in E1", "12 Willow Lane, Whitechapel, E1",
                    720_000, "Terraced", 3, "E1", PLACEHOLDER_IMAGE,
                    "A beautiful terraced house in the heart of E1, retaining many original features.", 120),
    PropertyListing("2", "Modern 2-Bed Flat, City Views", "Apt 15, Skyline Apartments, Westminster, SW1",
                    1_800_000, "Flat", 2, "SW1", PLACEHOLDER_IMAGE,
                    "Luxury flat in a prestigious SW1 development, offering stunning panoramic city views and concierge service.", 100),
    PropertyListing("3", "Spacious Detached Family Home", "Oakwood House, Barnsbury, N1",
                    1_200_000, "Detached", 4, "N1", PLACEHOLDER_IMAGE,
                    "Perfect for families, this detached N1 home boasts a large garden and proximity to excellent schools.", 180),
    PropertyListing("4", "Cosy Semi-Detached Cottage", "Rose Cottage, Bermondsey Street, SE1",
                    650_000, "Semi-detached", 2, "SE1", PLACEHOLDER_IMAGE,
                    "A charming and characterful semi-detached cottage in a sought-after SE1 location, with a private garden.", 85),
    PropertyListing("5", "Affordable Starter Flat in Ilford", "2B, Union Court, Ilford, IG1",
                    320_000, "Flat", 1, "IG1", PLACEHOLDER_IMAGE,
                    "An ideal first-time buy or investment property in IG1, offering great value and transport links.", 50),
    PropertyListing("6", "Large Detached House, Croydon", "The Beeches, Addiscombe Road, CR0",
                    950_000, "Detached", 5, "CR0", PLACEHOLDER_IMAGE,
                    "An expansive detached residence in CR0 with modern amenities, multiple reception rooms, and a large driveway.", 250),
    PropertyListing("7", "Stylish Apartment in Mayfair", "Park Lane Chambers, Mayfair, W1",
                    3_500_000, "Flat", 3, "W1", PLACEHOLDER_IMAGE,
                    "An exquisitely designed apartment in W1, offering the pinnacle of luxury living in central London.", 150),
    PropertyListing("8", "Riverside Flat with Balcony", "Tower Bridge Wharf, SE1",
                    850_000, "Flat", 2, "SE1", PLACEHOLDER_IMAGE,
                    "A stunning riverside apartment in SE1 with a private balcony overlooking the Thames.", 90),
)


class ReferenceData(ReferenceProvider):
    """
    Read-only view over the static tables. Other tables can be injected
    for tests; they are copied into tuples so callers cannot mutate them.
    """
    def __init__(self, outcodes: Sequence[OutcodeRecord] = OUTCODES,
                 properties: Sequence[PropertyListing] = PROPERTIES):
        self._outcodes = tuple(outcodes)
        self._properties = tuple(properties)
        self._outcodes_by_id = {o.id: o for o in self._outcodes}
        self._properties_by_id = {p.id: p for p in self._properties}

    def outcodes(self) -> tuple[OutcodeRecord, ...]:
        return self._outcodes

    def outcode(self, outcode_id: str) -> OutcodeRecord:
        key = normalize_region(outcode_id)
        try:
            return self._outcodes_by_id[key]
        except KeyError:
            raise RegionNotFoundError(key) from None

    def properties(self) -> tuple[PropertyListing, ...]:
        return self._properties

    def property(self, property_id: str) -> PropertyListing:
        try:
            return self._properties_by_id[property_id]
        except KeyError:
            raise PropertyNotFoundError(property_id) from None

    def options(self) -> dict:
        return {
            "tenures": list(TENURE_OPTIONS),
            "property_types": list(PROPERTY_TYPE_OPTIONS),
            "energy_ratings": list(ENERGY_RATING_OPTIONS),
            "bedrooms": list(BEDROOM_OPTIONS),
            "bathrooms": list(BATHROOM_OPTIONS),
            "reception_rooms": list(RECEPTION_OPTIONS),
            "regions": list(REGION_OPTIONS),
        }

reference_data = ReferenceData()
