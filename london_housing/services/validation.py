from typing import Any, Iterable, Mapping
from pydantic import ValidationError

from ..core.errors import PredictionValidationError, Violation
from ..schemas import PredictionRequest

def _field_name(loc: Iterable[Any]) -> str:
    # FastAPI prefixes body errors with "body"; a bare ("body",) means the body itself is bad
    parts = [str(p) for p in loc]
    if parts and parts[0] == "body" and len(parts) > 1:
        parts = parts[1:]
    return ".".join(parts) or "body"

def _message(err: Mapping[str, Any]) -> str:
    msg = err.get("msg", "Invalid value")
    if err.get("type") == "value_error":
        msg = msg.removeprefix("Value error, ")
    return msg

def violations_from_errors(errors: Iterable[Mapping[str, Any]]) -> list[Violation]:
    """Flatten pydantic/FastAPI error dicts into field + message pairs."""
    return [Violation(field=_field_name(e.get("loc", ())), message=_message(e)) for e in errors]

def validate_prediction_request(raw: Any) -> PredictionRequest:
    """
    Turn raw form/JSON data into a PredictionRequest, or raise
    PredictionValidationError listing every violated field.
    """
    if isinstance(raw, PredictionRequest):
        return raw
    if not isinstance(raw, Mapping):
        raise PredictionValidationError([Violation("body", "Request body must be a JSON object.")])
    try:
        return PredictionRequest.model_validate(dict(raw))
    except ValidationError as exc:
        raise PredictionValidationError(violations_from_errors(exc.errors())) from None
