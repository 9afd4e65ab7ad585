# Generation pipeline package.

from .generator import ComponentGenerator
from .errors import ClassifiedError, ClassificationRule, ErrorKind, classify, DEFAULT_RULES
from .types import ChatTurn, GenerationRequest, AssembledPrompt, GenerationResult, ModelParams
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ComponentGenerator",
    "ClassifiedError",
    "ClassificationRule",
    "ErrorKind",
    "classify",
    "DEFAULT_RULES",
    "ChatTurn",
    "GenerationRequest",
    "AssembledPrompt",
    "GenerationResult",
    "ModelParams",
    "EchoDevClient",
]
