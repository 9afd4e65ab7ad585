# Client for Ollama's /api/chat endpoint (local inference).

from typing import Any, Dict, Tuple

import requests

from ..types import AssembledPrompt, ModelParams


class OllamaClient:
    def __init__(self, host: str = "http://localhost:11434"):
        self.host = host.rstrip("/")

    def generate(
        self, prompt: AssembledPrompt, model: str, params: ModelParams
    ) -> Tuple[str, Dict[str, Any]]:
        payload = {
            "model": model,
            "messages": prompt.as_messages(),
            "stream": False,
            "options": {
                "temperature": float(params.temperature),
                "num_predict": int(params.max_tokens),
            },
        }
        url = f"{self.host}/api/chat"
        resp = requests.post(url, json=payload, timeout=params.timeout)
        resp.raise_for_status()
        data = resp.json()
        text = (data.get("message") or {}).get("content", "")
        meta = {"engine": "ollama", "model": model, "done_reason": data.get("done_reason")}
        return text, meta
