import math

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

def round_to_thousand(value: float) -> int:
    """Round half up to the nearest 1000 (0.5 goes up, as on the UI side)."""
    return int(math.floor(value / 1000 + 0.5)) * 1000

def parse_month(month_of_sale: str) -> tuple[int, int]:
    """'2025-01' -> (2025, 1). Input is assumed to be validated already."""
    year, month = month_of_sale.split("-")
    return int(year), int(month)

def month_sequence(year: int, month: int, count: int = 12) -> list[tuple[int, int]]:
    """Consecutive (year, month) pairs starting at the given month, rolling over December."""
    out = []
    for i in range(count):
        offset = month - 1 + i
        out.append((year + offset // 12, offset % 12 + 1))
    return out

def month_label(year: int, month: int) -> str:
    return f"{MONTH_ABBR[month - 1]} {year}"

def normalize_region(region: str) -> str:
    """Outcodes are compared upper-cased with whitespace removed: ' sw1 ' -> 'SW1'."""
    return "".join(region.split()).upper()
