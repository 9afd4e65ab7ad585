# ===============================================
# Error classification: fixed rule order + mapping
# ===============================================

import logging

import openai
import pytest
import requests

from conftest import openai_status_error, openai_timeout
from uigen.generate.errors import (
    DEFAULT_RULES,
    ClassificationRule,
    ErrorKind,
    IncompleteGenerationError,
    RequestValidationError,
    classify,
    message_contains,
)


@pytest.mark.parametrize(
    "message, expected",
    [
        # overlapping signals: earlier rule wins
        ("timeout while rate limit applied", ErrorKind.TIMEOUT),
        ("TIMEOUT: quota exceeded", ErrorKind.TIMEOUT),
        ("authentication step hit a timeout", ErrorKind.TIMEOUT),
        ("invalid API key, rate limit also reached", ErrorKind.AUTH_FAILURE),
        ("authentication failed: quota", ErrorKind.AUTH_FAILURE),
        # single signals
        ("Request timed out.", ErrorKind.TIMEOUT),
        ("Incorrect API key provided", ErrorKind.AUTH_FAILURE),
        ("You exceeded your current quota", ErrorKind.RATE_LIMITED),
        ("rate limit reached for requests", ErrorKind.RATE_LIMITED),
        ("something exploded", ErrorKind.INTERNAL),
    ],
)
def test_message_rules_priority(message, expected):
    assert classify(RuntimeError(message)).kind is expected


def test_default_rule_order_is_timeout_auth_rate():
    assert [r.kind for r in DEFAULT_RULES] == [
        ErrorKind.TIMEOUT,
        ErrorKind.AUTH_FAILURE,
        ErrorKind.RATE_LIMITED,
    ]


def test_typed_sdk_exceptions():
    assert classify(openai_timeout()).kind is ErrorKind.TIMEOUT
    assert classify(TimeoutError("slow")).kind is ErrorKind.TIMEOUT
    assert classify(requests.Timeout("slow")).kind is ErrorKind.TIMEOUT
    auth = openai_status_error(openai.AuthenticationError, 401, "Error code: 401")
    assert classify(auth).kind is ErrorKind.AUTH_FAILURE
    rate = openai_status_error(openai.RateLimitError, 429, "Error code: 429")
    assert classify(rate).kind is ErrorKind.RATE_LIMITED


def test_internal_keeps_message_and_type_label():
    err = classify(ValueError("bad things"))
    assert err.kind is ErrorKind.INTERNAL
    assert err.status == 500
    assert err.message == "bad things"
    assert err.type_label == "ValueError"
    assert err.to_body() == {
        "error": "Internal server error",
        "details": "bad things",
        "type": "ValueError",
    }


def test_custom_rule_order():
    rules = (
        ClassificationRule(ErrorKind.RATE_LIMITED, message_contains("rate limit")),
        ClassificationRule(ErrorKind.TIMEOUT, message_contains("timeout")),
    )
    exc = RuntimeError("timeout and rate limit")
    assert classify(exc, rules).kind is ErrorKind.RATE_LIMITED
    assert classify(exc).kind is ErrorKind.TIMEOUT


def test_pipeline_errors_bypass_rules():
    # message mentions timeout but the explicit kind wins
    err = classify(IncompleteGenerationError("output ended before timeout"))
    assert err.kind is ErrorKind.INCOMPLETE_GENERATION
    assert err.to_body()["error"] == "Generated code is incomplete"
    assert err.to_body()["type"] == "IncompleteGenerationError"

    err = classify(RequestValidationError(["model: Field required"]))
    assert err.kind is ErrorKind.INVALID_REQUEST
    assert err.status == 422
    assert err.message == "model: Field required"


@pytest.mark.parametrize(
    "kind, status, headline",
    [
        (ErrorKind.TIMEOUT, 408, "Request timeout"),
        (ErrorKind.AUTH_FAILURE, 401, "Authentication error"),
        (ErrorKind.RATE_LIMITED, 429, "Rate limit exceeded"),
    ],
)
def test_status_and_body(kind, status, headline):
    messages = {
        ErrorKind.TIMEOUT: "timeout",
        ErrorKind.AUTH_FAILURE: "API key",
        ErrorKind.RATE_LIMITED: "quota",
    }
    err = classify(RuntimeError(messages[kind]))
    assert err.status == status
    body = err.to_body()
    assert err.public_message == headline
    assert body["error"] == headline
    assert isinstance(body["details"], str) and body["details"]
    assert "type" not in body


def test_classified_errors_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="uigen.generate.errors"):
        classify(RuntimeError("quota"))
        classify(KeyError("boom"))
    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert levels[0][0] == logging.WARNING and "rate_limited" in levels[0][1]
    assert levels[1][0] == logging.ERROR and "KeyError" in levels[1][1]
