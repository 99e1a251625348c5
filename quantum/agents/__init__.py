"""Content generation for workspace blocks."""

from .errors import GenerationError, QuotaExceededError, CredentialError, UnexpectedGenerationError
from .registry import agent_registry, AgentConfig, AgentRegistry
from .runner import ContentGenerator
from .streaming import stream_into_block, describe_generation_error

__all__ = [
    "GenerationError",
    "QuotaExceededError",
    "CredentialError",
    "UnexpectedGenerationError",
    "agent_registry",
    "AgentConfig",
    "AgentRegistry",
    "ContentGenerator",
    "stream_into_block",
    "describe_generation_error"
]
