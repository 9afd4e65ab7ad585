# Model clients. Each exposes generate(prompt, model, params) -> (text, meta)
# and performs at most one outbound call.

from typing import Any, Dict, Protocol, Tuple

from ..types import AssembledPrompt, ModelParams


class ModelClient(Protocol):
    def generate(
        self, prompt: AssembledPrompt, model: str, params: ModelParams
    ) -> Tuple[str, Dict[str, Any]]:
        ...
