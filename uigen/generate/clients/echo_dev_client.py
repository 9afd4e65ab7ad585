# Offline model client for local dev and tests: no network, always returns
# a complete component that quotes the last user request.

from typing import Any, Dict, Tuple

from ..prompts import USER_DIRECTIVE
from ..types import AssembledPrompt, ModelParams

TEMPLATE = """\
import { Card, CardContent, CardHeader, CardTitle } from "@/components/ui/card"

export default function EchoComponent() {
  return (
    <Card className="w-full max-w-md mx-auto">
      <CardHeader>
        <CardTitle>Echo</CardTitle>
      </CardHeader>
      <CardContent>
        <p className="text-sm text-muted-foreground">{%s}</p>
      </CardContent>
    </Card>
  )
}"""


class EchoDevClient:
    def generate(
        self, prompt: AssembledPrompt, model: str, params: ModelParams
    ) -> Tuple[str, Dict[str, Any]]:
        user_inputs = [t.content for t in prompt.turns if t.role == "user"]
        last = user_inputs[-1] if user_inputs else "(no user input)"
        if last.endswith(USER_DIRECTIVE):
            last = last[: -len(USER_DIRECTIVE)]
        text = TEMPLATE % _js_string(last)
        meta = {"engine": "echo", "model": model, "temp": params.temperature, "max_tokens": params.max_tokens}
        return text, meta


def _js_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
