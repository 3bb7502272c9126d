from typing import Protocol, Sequence, TypeVar
from ..schemas import PredictionRequest, PredictionResponse

T = TypeVar("T")

class RandomSource(Protocol):
    """Subset of random.Random the generators draw from."""
    def random(self) -> float: ...
    def choice(self, seq: Sequence[T]) -> T: ...

class PricePredictor(Protocol):
    def predict(self, request: PredictionRequest) -> PredictionResponse:
        """
        Returns a predicted price, trend label, area average and a
        12-point monthly series starting at the month of sale.
        """
        ...

class TextGenerator(Protocol):
    async def generate(self, prompt: str, region: str) -> str:
        """Returns a non-empty advisory text for the region."""
        ...
