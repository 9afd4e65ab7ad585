# Typed models shared across the generation pipeline.
# Inbound shapes are pydantic models (they double as the request schema);
# everything built after validation is a plain dataclass.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, StrictStr

if TYPE_CHECKING:
    from .errors import ClassifiedError


Role = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    """Single conversation turn from the caller."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: StrictStr


class GenerationRequest(BaseModel):
    """Validated inbound payload: target model + ordered conversation."""
    model_config = ConfigDict(frozen=True)

    model: StrictStr
    messages: List[ChatTurn] = Field(min_length=1)


@dataclass(frozen=True)
class AssembledPrompt:
    """System instruction plus the augmented conversation turns."""
    system_instruction: str
    turns: Tuple[ChatTurn, ...]

    def as_messages(self) -> List[Dict[str, str]]:
        """Outbound chat list: one system turn, then the conversation."""
        return [
            {"role": "system", "content": self.system_instruction},
            *({"role": t.role, "content": t.content} for t in self.turns),
        ]


@dataclass(frozen=True)
class ModelParams:
    """Per-call bounds handed to the completion service."""
    temperature: float = 0.9
    max_tokens: int = 6000
    timeout: float = 120.0


@dataclass(frozen=True)
class GenerationResult:
    """Either the generated source or a classified failure."""
    source_text: Optional[str] = None
    error: Optional["ClassifiedError"] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, source_text: str) -> "GenerationResult":
        return cls(source_text=source_text)

    @classmethod
    def failure(cls, error: "ClassifiedError") -> "GenerationResult":
        return cls(error=error)
