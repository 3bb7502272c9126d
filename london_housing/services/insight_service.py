import asyncio
import logging

from ..core.cache import Cache, cache as shared_cache
from ..core.config import settings
from ..core.errors import GenerationError, PredictionValidationError, Violation
from ..core.utils import normalize_region
from ..models.base import TextGenerator
from ..models.openai_model import OpenAITextGenerator
from ..models.template_model import TemplateTextGenerator
from ..schemas import RegionInsightResponse

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "You are an expert real estate analyst specializing in the London property market.\n\n"
    "You will provide a concise summary of the price forecast for the given region, highlighting "
    "potential opportunities and risks for potential buyers and investors.\n\n"
    "Region: {region}\n"
)

def text_generator() -> TextGenerator:
    """
    Factory picks the generative backend based on env flags.
    """
    if settings.INSIGHT_PROVIDER == "openai":
        return OpenAITextGenerator()
    return TemplateTextGenerator()

class RegionInsightService:
    """Region code → advisory summary, cached per normalized code."""

    def __init__(self, generator: TextGenerator | None = None,
                 cache: Cache | None = None,
                 delay_seconds: float = settings.INSIGHT_DELAY_SECONDS):
        self.generator = generator or text_generator()
        self.cache = cache or shared_cache
        self.delay_seconds = delay_seconds

    async def get_insights(self, region: str) -> RegionInsightResponse:
        code = normalize_region(region or "")
        if not code:
            raise PredictionValidationError([Violation("region", "Region is required.")])

        cache_key = f"insight:{code}"
        cached = self.cache.get(cache_key)
        if cached:
            return RegionInsightResponse(region=code, summary=cached)

        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        summary = await self.generator.generate(PROMPT_TEMPLATE.format(region=code), code)
        if not summary or not summary.strip():
            raise GenerationError(f"Empty summary for region {code}")

        self.cache.set(cache_key, summary)
        logger.info("region insight generated region=%s chars=%d", code, len(summary))
        return RegionInsightResponse(region=code, summary=summary)
