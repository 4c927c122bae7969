import logging
import asyncio
from typing import Optional, Protocol

from openai import OpenAI

from gencode.config import Settings, get_settings
from gencode.errors import GenerationError, MissingCredentialError

logger = logging.getLogger("llm_service")


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class LLMService:
    """Gemini LLM service wrapper (gemini-2.5-flash via the OpenAI-compatible API)."""

    def __init__(self, settings: Optional[Settings] = None, client=None):
        settings = settings or get_settings()
        if not settings.GEMINI_API_KEY:
            raise MissingCredentialError("GEMINI_API_KEY")
        self.client = client or OpenAI(
            base_url=settings.GEMINI_BASE_URL,
            api_key=settings.GEMINI_API_KEY,
        )
        self.model = settings.GEMINI_MODEL

    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the response text untouched."""
        messages = [{"role": "user", "content": prompt}]

        try:
            response = await asyncio.to_thread(
                self.client.chat.completions.create,
                model=self.model,
                messages=messages,
            )
            return response.choices[0].message.content or ""
        except Exception as e:
            logger.error(f"LLM generation error: {e}")
            raise GenerationError(str(e)) from e


def get_llm_service(settings: Optional[Settings] = None) -> LLMService:
    return LLMService(settings)
