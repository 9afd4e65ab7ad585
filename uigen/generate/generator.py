# ComponentGenerator runs one request through the pipeline:
#   validate -> assemble prompt -> one model call -> completeness check
# and returns a GenerationResult. Every failure exit goes through classify().

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from uigen.catalog import Catalog
from .clients import ModelClient
from .errors import DEFAULT_RULES, ClassificationRule, IncompleteGenerationError, classify
from .prompts import assemble_prompt
from .types import GenerationRequest, GenerationResult, ModelParams
from .validation import check_completeness, validate_request, validate_request_json

logger = logging.getLogger(__name__)

_TAIL_CHARS = 100


class ComponentGenerator:
    def __init__(
        self,
        model_client: ModelClient,
        catalog: Catalog,
        params: Optional[ModelParams] = None,
        rules: Sequence[ClassificationRule] = DEFAULT_RULES,
    ):
        self.model_client = model_client
        self.catalog = catalog
        self.params = params or ModelParams()
        self.rules = tuple(rules)

    def _validate(self, payload: Any) -> GenerationRequest:
        if isinstance(payload, GenerationRequest):
            return payload
        if isinstance(payload, (bytes, bytearray, str)):
            return validate_request_json(payload)
        return validate_request(payload)

    def generate(self, payload: Any) -> GenerationResult:
        """
        Accepts a raw JSON body, a decoded JSON value or a GenerationRequest.
        Never raises; failures come back as GenerationResult.failure(...).
        """
        try:
            request = self._validate(payload)
            prompt = assemble_prompt(request, self.catalog)

            logger.info("Starting completion with model=%s turns=%d", request.model, len(prompt.turns))
            text, meta = self.model_client.generate(prompt, request.model, self.params)
            logger.info("Completion finished model=%s chars=%d meta=%s", request.model, len(text or ""), meta)

            if not check_completeness(text):
                logger.error("Generated code appears incomplete, tail=%r", (text or "")[-_TAIL_CHARS:])
                raise IncompleteGenerationError("Generated code is incomplete")
            return GenerationResult.success(text)
        except Exception as e:
            return GenerationResult.failure(classify(e, self.rules))
