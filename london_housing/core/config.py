import os
from pydantic import BaseModel

class Settings(BaseModel):
    # Basic
    ENV: str = os.getenv("ENV", "dev")
    CURRENCY: str = os.getenv("CURRENCY", "GBP")
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "43200"))

    # Simulated latency (seconds)
    PREDICTION_DELAY_SECONDS: float = float(os.getenv("PREDICTION_DELAY_SECONDS", "0.5"))
    INSIGHT_DELAY_SECONDS: float = float(os.getenv("INSIGHT_DELAY_SECONDS", "0.8"))

    # Prediction formula
    TREND_MODE: str = os.getenv("TREND_MODE", "derived")  # derived | legacy
    TREND_STABLE_BAND_PCT: float = float(os.getenv("TREND_STABLE_BAND_PCT", "1.0"))
    PRICE_BASE: int = int(os.getenv("PRICE_BASE", "200000"))
    PRICE_PER_BEDROOM: int = int(os.getenv("PRICE_PER_BEDROOM", "70000"))
    PRICE_PER_BATHROOM: int = int(os.getenv("PRICE_PER_BATHROOM", "40000"))
    PRICE_PER_RECEPTION_ROOM: int = int(os.getenv("PRICE_PER_RECEPTION_ROOM", "30000"))
    PRICE_PER_SQM: int = int(os.getenv("PRICE_PER_SQM", "1500"))

    # Region insights
    INSIGHT_PROVIDER: str = os.getenv("INSIGHT_PROVIDER", "template")  # template | openai
    OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

    # Security
    RATE_LIMIT_RPM: int = int(os.getenv("RATE_LIMIT_RPM", "60"))

    # CORS
    ALLOW_ORIGINS: str = os.getenv("ALLOW_ORIGINS", "*")

    # Metrics
    PROMETHEUS_ENABLED: bool = os.getenv("PROMETHEUS_ENABLED", "true").lower() == "true"

settings = Settings()
