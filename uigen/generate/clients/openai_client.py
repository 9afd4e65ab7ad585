# Client for OpenAI-compatible Chat Completions APIs.
# One non-streaming call per generate(); SDK retries are disabled so the
# configured timeout is the only bound on a call.

from typing import Any, Dict, Optional, Tuple

from openai import OpenAI

from ..types import AssembledPrompt, ModelParams


class OpenAIClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
    ):
        self.client = client or OpenAI(api_key=api_key, base_url=base_url, max_retries=0)

    def generate(
        self, prompt: AssembledPrompt, model: str, params: ModelParams
    ) -> Tuple[str, Dict[str, Any]]:
        resp = self.client.chat.completions.create(
            model=model,
            messages=prompt.as_messages(),
            temperature=params.temperature,
            max_tokens=params.max_tokens,
            stream=False,
            timeout=params.timeout,
        )
        choice = resp.choices[0] if resp.choices else None
        text = (choice.message.content if choice else None) or ""
        usage = getattr(resp, "usage", None)
        meta = {
            "engine": "openai",
            "model": model,
            "finish_reason": getattr(choice, "finish_reason", None),
            "completion_tokens": getattr(usage, "completion_tokens", None),
        }
        return text, meta
