from dataclasses import dataclass


@dataclass(frozen=True)
class Violation:
    field: str
    message: str


class HousingServiceError(Exception):
    """Base class for errors raised by the housing services."""


class PredictionValidationError(HousingServiceError):
    """
    Raised when request fields break their constraints. Carries every
    violation found, never just the first one.
    """
    def __init__(self, violations: list[Violation]):
        self.violations = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"Invalid request fields: {fields}")

    def as_dicts(self) -> list[dict]:
        return [{"field": v.field, "message": v.message} for v in self.violations]


class GenerationError(HousingServiceError):
    """A generator backend failed to produce output."""


class TransportError(HousingServiceError):
    """The remote service could not be reached or answered garbage."""


class RegionNotFoundError(HousingServiceError, LookupError):
    def __init__(self, region: str):
        self.region = region
        super().__init__(f"Region {region} not found.")


class PropertyNotFoundError(HousingServiceError, LookupError):
    def __init__(self, property_id: str):
        self.property_id = property_id
        super().__init__(f"Property {property_id} not found.")
