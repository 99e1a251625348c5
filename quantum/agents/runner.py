"""
Content generator for Quantum.

This module handles communication with an Ollama-compatible server and
exposes the generated text as an asynchronous stream of chunks, which the
caller writes into a block as it arrives.
"""

import httpx
import json
import logging
from typing import Any, AsyncIterator, Dict, Optional

from ..config import config
from .errors import CredentialError, GenerationError, QuotaExceededError, UnexpectedGenerationError
from .registry import agent_registry

PLACEHOLDER_API_KEY = "YOUR_API_KEY"


class ContentGenerator:
    """
    Streams completions from Ollama's /api/generate endpoint.
    """

    def __init__(self, ollama_host: Optional[str] = None, model: Optional[str] = None,
                 api_key: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        """
        Initialize the content generator.

        Args:
            ollama_host: The Ollama server URL (defaults to config value)
            model: The model name to use for inference (defaults to config value)
            api_key: Bearer token for hosted endpoints (defaults to config value)
            client: HTTP client to use; one is created (and owned) when omitted
        """
        self.ollama_host = (ollama_host or config.ollama_host or "").rstrip("/")
        self.model = model or config.model_name
        self.api_key = api_key if api_key is not None else config.api_key
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=config.ollama_timeout)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    def is_available(self) -> bool:
        """
        Check whether the generator is configured well enough to be used.

        Returns:
            True if a host and model are set and the API key is not the
            placeholder value
        """
        if not self.ollama_host or not self.model:
            return False
        return self.api_key != PLACEHOLDER_API_KEY

    async def stream_completion(self, prompt: str, agent: str = "writer") -> AsyncIterator[str]:
        """
        Stream the model's answer to a prompt.

        Args:
            prompt: The user prompt
            agent: Name of the registered agent whose system prompt to use

        Yields:
            Text fragments in the order the model produces them

        Raises:
            CredentialError: If the generator is not configured or the
                server rejects the credentials
            QuotaExceededError: If the server reports an exhausted quota
            UnexpectedGenerationError: For any other failure
        """
        if not self.is_available():
            raise CredentialError("Content generation is not configured: set ai.ollama_host, ai.model and ai.api_key")

        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": True
        }

        agent_config = agent_registry.get_agent(agent)
        if agent_config:
            payload["system"] = agent_config.system_prompt
        else:
            logging.warning(f"Unknown agent '{agent}', sending prompt without a system prompt")

        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}

        try:
            async with self.client.stream(
                "POST",
                f"{self.ollama_host}/api/generate",
                json=payload,
                headers=headers
            ) as response:
                if response.status_code >= 400:
                    await response.aread()
                    raise _error_for_status(response)

                async for line in response.aiter_lines():
                    if not line.strip():
                        continue

                    try:
                        data = json.loads(line)
                    except json.JSONDecodeError as e:
                        raise UnexpectedGenerationError(f"Malformed response line from Ollama: {line!r}") from e

                    if "error" in data:
                        raise _error_for_message(str(data["error"]))

                    chunk = data.get("response", "")
                    if chunk:
                        yield chunk

                    if data.get("done"):
                        break

        except httpx.RequestError as e:
            raise UnexpectedGenerationError(f"Failed to connect to Ollama: {e}") from e


def _error_for_status(response: httpx.Response) -> GenerationError:
    """Classify an HTTP error response."""
    message = f"Ollama request failed with status {response.status_code}: {response.text}"

    if response.status_code == 429:
        return QuotaExceededError(message)
    if response.status_code in (401, 403):
        return CredentialError(message)
    return _error_for_message(message)


def _error_for_message(message: str) -> GenerationError:
    """Classify an error reported in the response body."""
    lowered = message.lower()

    if "quota" in lowered or "rate limit" in lowered:
        return QuotaExceededError(message)
    if "api key" in lowered or "unauthorized" in lowered:
        return CredentialError(message)
    return UnexpectedGenerationError(message)
