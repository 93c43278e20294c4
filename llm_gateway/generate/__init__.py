# Generator package

# Makes generate/ importable and exposes key interfaces.

from .generator import ChatGenerator
from .types import Message, ModelParams, GenerationResult, GenerationSuccess, GenerationFailure
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ChatGenerator",
    "Message",
    "ModelParams",
    "GenerationResult",
    "GenerationSuccess",
    "GenerationFailure",
    "EchoDevClient",
]
