"""
Error taxonomy and classification for the generation pipeline.

Every failure that leaves the pipeline is turned into a ClassifiedError:
a stable (status, kind, message) triple plus optional detail and type label.

Failures raised by the pipeline itself (request validation, incomplete
output) carry their kind explicitly. Anything raised by a model client is
run through an ordered list of ClassificationRule objects; the first rule
whose predicate matches decides the kind. The default order is

    timeout -> auth_failure -> rate_limited

and anything unmatched is `internal`. Provider error messages change over
time, so callers can pass their own rule list to `classify`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type

import openai
import requests

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    TIMEOUT = "timeout"
    AUTH_FAILURE = "auth_failure"
    RATE_LIMITED = "rate_limited"
    INCOMPLETE_GENERATION = "incomplete_generation"
    INTERNAL = "internal"


HTTP_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.INVALID_REQUEST: 422,
    ErrorKind.TIMEOUT: 408,
    ErrorKind.AUTH_FAILURE: 401,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.INCOMPLETE_GENERATION: 500,
    ErrorKind.INTERNAL: 500,
}

# Caller-facing headline and default detail per kind.
_PUBLIC_TEXT: Dict[ErrorKind, Tuple[str, str]] = {
    ErrorKind.INVALID_REQUEST: ("Invalid request", "The request body does not match the expected shape"),
    ErrorKind.TIMEOUT: ("Request timeout", "The request took too long to complete"),
    ErrorKind.AUTH_FAILURE: ("Authentication error", "Invalid API key or authentication issue"),
    ErrorKind.RATE_LIMITED: ("Rate limit exceeded", "Too many requests, please try again later"),
    ErrorKind.INCOMPLETE_GENERATION: ("Generated code is incomplete", "The model output was truncated or malformed"),
    ErrorKind.INTERNAL: ("Internal server error", "Unknown error"),
}


# ------------------------------------------------------------
# Pipeline exceptions
# ------------------------------------------------------------
class GenerationError(RuntimeError):
    """Base class for failures raised by the pipeline itself."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class RequestValidationError(GenerationError):
    """Inbound payload does not match the request schema."""

    kind = ErrorKind.INVALID_REQUEST

    def __init__(self, violations: Sequence[str]):
        self.violations = list(violations)
        super().__init__("\n".join(self.violations))


class IncompleteGenerationError(GenerationError):
    """Model responded, but the output failed the completeness check."""

    kind = ErrorKind.INCOMPLETE_GENERATION


# ------------------------------------------------------------
# Classified result
# ------------------------------------------------------------
@dataclass(frozen=True)
class ClassifiedError:
    kind: ErrorKind
    message: str
    detail: Optional[str] = None
    type_label: Optional[str] = None

    @property
    def status(self) -> int:
        return HTTP_STATUS[self.kind]

    @property
    def public_message(self) -> str:
        return _PUBLIC_TEXT[self.kind][0]

    def to_body(self) -> Dict[str, Any]:
        """JSON body returned to the caller (never used for invalid_request)."""
        default_detail = _PUBLIC_TEXT[self.kind][1]
        body: Dict[str, Any] = {"error": self.public_message}
        if self.kind is ErrorKind.INTERNAL:
            body["details"] = self.message or default_detail
            body["type"] = self.type_label or "Unknown"
        elif self.kind is ErrorKind.INCOMPLETE_GENERATION:
            body["details"] = self.detail or default_detail
            body["type"] = self.type_label or "IncompleteGenerationError"
        else:
            body["details"] = default_detail
        return body


# ------------------------------------------------------------
# Classification rules
# ------------------------------------------------------------
Predicate = Callable[[BaseException], bool]


@dataclass(frozen=True)
class ClassificationRule:
    kind: ErrorKind
    predicate: Predicate


def message_contains(*needles: str) -> Predicate:
    """Match when the exception message contains any needle (case-sensitive)."""

    def _match(exc: BaseException) -> bool:
        text = str(exc)
        return any(n in text for n in needles)

    return _match


def instance_of(*types: Type[BaseException]) -> Predicate:
    def _match(exc: BaseException) -> bool:
        return isinstance(exc, types)

    return _match


def any_of(*predicates: Predicate) -> Predicate:
    def _match(exc: BaseException) -> bool:
        return any(p(exc) for p in predicates)

    return _match


DEFAULT_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(
        ErrorKind.TIMEOUT,
        any_of(
            instance_of(TimeoutError, openai.APITimeoutError, requests.Timeout),
            message_contains("timeout", "TIMEOUT", "timed out"),
        ),
    ),
    ClassificationRule(
        ErrorKind.AUTH_FAILURE,
        any_of(
            instance_of(openai.AuthenticationError),
            message_contains("API key", "authentication"),
        ),
    ),
    ClassificationRule(
        ErrorKind.RATE_LIMITED,
        any_of(
            instance_of(openai.RateLimitError),
            message_contains("rate limit", "quota"),
        ),
    ),
)


def classify(
    exc: BaseException,
    rules: Sequence[ClassificationRule] = DEFAULT_RULES,
) -> ClassifiedError:
    """Map any exception to a ClassifiedError and log it."""
    if isinstance(exc, GenerationError):
        result = ClassifiedError(
            kind=exc.kind,
            message=exc.message,
            detail=exc.detail,
            type_label=type(exc).__name__,
        )
    else:
        kind = next((r.kind for r in rules if r.predicate(exc)), ErrorKind.INTERNAL)
        result = ClassifiedError(
            kind=kind,
            message=str(exc),
            type_label=type(exc).__name__,
        )
    log_classified(result)
    return result


def log_classified(err: ClassifiedError) -> None:
    if err.status >= 500:
        logger.error("generation failed kind=%s type=%s: %s", err.kind.value, err.type_label, err.message)
    else:
        logger.warning("generation rejected kind=%s type=%s: %s", err.kind.value, err.type_label, err.message)
