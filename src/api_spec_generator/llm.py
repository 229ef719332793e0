"""LLM client wrapper around litellm.

Provides a single call interface over the supported AI providers.
"""

import logging

from litellm import completion

from api_spec_generator.config import DEFAULT_PROVIDER, default_model
from api_spec_generator.errors import AIRequestError

logger = logging.getLogger(__name__)


class LlmClient:
    """Wrapper for LLM API calls via litellm."""

    def __init__(self, provider: str = DEFAULT_PROVIDER, api_key: str | None = None, model: str | None = None):
        self.provider = provider
        self.model = model or default_model(provider)
        self.api_key = api_key

    def call(self, system: str, user: str) -> str:
        """Send a system+user message to the LLM and return the response text."""
        logger.debug("Calling %s (%d prompt chars)", self.model, len(system) + len(user))
        try:
            response = completion(
                model=self.model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                api_key=self.api_key,
            )
        except Exception as e:
            raise AIRequestError(f"{self.provider} request failed: {e}") from e
        return response.choices[0].message.content or ""
