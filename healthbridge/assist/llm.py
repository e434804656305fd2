"""Gemini client using the OpenAI SDK pointed at Gemini's OpenAI-compatible endpoint."""
import logging

from openai import AsyncOpenAI

from healthbridge.config import settings
from healthbridge.errors import MissingAPIKeyError

logger = logging.getLogger(__name__)

MOCK_DIAGNOSIS = (
    "- Possible conditions: common cold, seasonal allergy\n"
    "- Explanation: mock response, no model was called.\n"
    "- Red flags: high fever, trouble breathing."
)
MOCK_RECOMMENDATIONS = (
    "Self-care: rest and drink fluids.\n"
    "Seek help: if symptoms last more than 3 days.\n"
    "Facilities: nearest clinic.\n"
    "Prevention: wash hands regularly."
)


def mock_response(prompt: str) -> str:
    """Fallback: canned text picked by prompt type (no LLM)."""
    if prompt.startswith("Act as a medical expert"):
        return MOCK_DIAGNOSIS
    return MOCK_RECOMMENDATIONS


class LLMClient:
    """Text generation client with a mock mode."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        mock: bool | None = None,
    ):
        self.api_key = settings.gemini_api_key if api_key is None else api_key
        self.model = model or settings.gemini_model
        self.base_url = base_url or settings.gemini_base_url
        self.mock = settings.mock_llm if mock is None else mock
        self._client: AsyncOpenAI | None = None

    def _get_client(self) -> AsyncOpenAI:
        """Lazy initialize OpenAI client."""
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError()
            self._client = AsyncOpenAI(base_url=self.base_url, api_key=self.api_key)
        return self._client

    async def generate_text(self, prompt: str) -> str | None:
        """Send a single prompt and return the generated text, or None if empty.

        Transport and auth errors propagate to the caller.
        """
        if self.mock:
            logger.warning("MOCK_LLM=true — returning canned response.")
            return mock_response(prompt)

        client = self._get_client()
        response = await client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            return None
        text = response.choices[0].message.content
        logger.debug(f"LLM raw response (first 300 chars): {(text or '')[:300]}")
        return text or None

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
