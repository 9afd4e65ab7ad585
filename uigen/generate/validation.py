# Validation at both ends of the pipeline:
#   - validate_request / validate_request_json: inbound payload -> GenerationRequest
#   - check_completeness: heuristic check on the model's output
#
# Request validation aggregates: every violation pydantic finds is reported,
# one "<location>: <message>" line each, in document order.

from __future__ import annotations

from typing import Any, List, Union

from pydantic import ValidationError

from .errors import RequestValidationError
from .types import GenerationRequest

DEFAULT_EXPORT_MARKER = "export default"


def _violations(err: ValidationError) -> List[str]:
    lines = []
    for e in err.errors(include_url=False):
        loc = ".".join(str(p) for p in e.get("loc", ())) or "body"
        lines.append(f"{loc}: {e.get('msg', 'invalid value')}")
    return lines


def validate_request(payload: Any) -> GenerationRequest:
    """Validate an already-decoded JSON value."""
    try:
        return GenerationRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(_violations(e)) from e


def validate_request_json(raw: Union[str, bytes]) -> GenerationRequest:
    """Validate a raw JSON body; malformed JSON is reported like any other violation."""
    try:
        return GenerationRequest.model_validate_json(raw)
    except ValidationError as e:
        raise RequestValidationError(_violations(e)) from e


def check_completeness(text: str) -> bool:
    """
    Cheap proxy for "the model finished the component":
    non-empty, has a default export, last non-whitespace char is '}'.
    """
    if not isinstance(text, str) or not text:
        return False
    stripped = text.rstrip()
    if not stripped:
        return False
    return DEFAULT_EXPORT_MARKER in stripped and stripped[-1] == "}"
