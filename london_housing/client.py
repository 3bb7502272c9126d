from typing import Any
import httpx
from pydantic import ValidationError

from .core.errors import PredictionValidationError, TransportError, Violation
from .schemas import PredictionRequest, PredictionResponse, RegionInsightResponse

class PredictionClient:
    """
    Async client for a running London Housing API. Network problems, server
    failures and malformed bodies all come back as TransportError with a
    generic message; a 400 keeps the server's per-field violations.
    """
    def __init__(self, base_url: str, timeout: float = 15, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def _post(self, path: str, payload: dict) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.post(f"{self.base_url}{path}", json=payload)
        except httpx.HTTPError as exc:
            raise TransportError("No response from prediction server.") from exc

        if r.status_code == 400:
            try:
                body = r.json()
            except ValueError:
                body = {}
            errors = body.get("errors") if isinstance(body, dict) else None
            raise PredictionValidationError(
                [Violation(e.get("field", "body"), e.get("message", "Invalid value")) for e in errors or []]
                or [Violation("body", "Request rejected by server.")]
            )
        if r.status_code >= 300:
            raise TransportError(f"Prediction server answered {r.status_code}.")
        try:
            return r.json()
        except ValueError as exc:
            raise TransportError("Prediction server returned a malformed body.") from exc

    async def predict(self, payload: PredictionRequest | dict) -> PredictionResponse:
        if isinstance(payload, PredictionRequest):
            payload = payload.model_dump(mode="json", by_alias=True, exclude_none=True)
        data = await self._post("/predict", payload)
        try:
            return PredictionResponse.model_validate(data)
        except ValidationError as exc:
            raise TransportError("Prediction server returned a malformed body.") from exc

    async def insights(self, region: str) -> RegionInsightResponse:
        data = await self._post("/insights", {"region": region})
        try:
            return RegionInsightResponse.model_validate(data)
        except ValidationError as exc:
            raise TransportError("Prediction server returned a malformed body.") from exc
