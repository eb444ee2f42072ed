"""Unified LLM client — tries OpenAI first, falls back to Anthropic."""

import base64
import logging

from openai import AsyncOpenAI
import anthropic

from journi.config import settings

logger = logging.getLogger(__name__)


class LLMClient:
    """Unified async LLM client with OpenAI primary + Anthropic fallback."""

    def __init__(self):
        self._openai = None
        self._anthropic = None

        if settings.openai_api_key:
            self._openai = AsyncOpenAI(api_key=settings.openai_api_key)
        if settings.anthropic_api_key:
            self._anthropic = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key)

    async def complete(
        self,
        system: str,
        user: str,
        *,
        image: bytes | None = None,
        image_mime_type: str = "image/jpeg",
        max_tokens: int = 1000,
        temperature: float = 0,
        json_mode: bool = False,
    ) -> str:
        """Get a completion from the best available LLM.

        Args:
            system: System prompt
            user: User message
            image: Optional raw image bytes sent alongside the user message
            image_mime_type: MIME type of the image (image/png, image/jpeg)
            max_tokens: Max output tokens
            temperature: Sampling temperature
            json_mode: If True, force JSON output (OpenAI response_format)

        Returns:
            Raw text response from the LLM.

        Raises:
            RuntimeError if every configured provider fails.
        """
        errors = []
        image_b64 = base64.b64encode(image).decode("ascii") if image else None

        # Try OpenAI first
        if self._openai:
            try:
                if image_b64:
                    user_content = [
                        {"type": "text", "text": user},
                        {
                            "type": "image_url",
                            "image_url": {"url": f"data:{image_mime_type};base64,{image_b64}"},
                        },
                    ]
                else:
                    user_content = user
                kwargs: dict = {
                    "model": settings.llm_model_primary,
                    "max_tokens": max_tokens,
                    "temperature": temperature,
                    "messages": [
                        {"role": "system", "content": system},
                        {"role": "user", "content": user_content},
                    ],
                }
                if json_mode:
                    kwargs["response_format"] = {"type": "json_object"}
                response = await self._openai.chat.completions.create(**kwargs)
                content = response.choices[0].message.content
                if not content:
                    raise ValueError("empty response")
                return content.strip()
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        # Fallback to Anthropic
        if self._anthropic:
            try:
                if image_b64:
                    user_content = [
                        {
                            "type": "image",
                            "source": {"type": "base64", "media_type": image_mime_type, "data": image_b64},
                        },
                        {"type": "text", "text": user},
                    ]
                else:
                    user_content = user
                response = await self._anthropic.messages.create(
                    model=settings.llm_model_fallback,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system,
                    messages=[{"role": "user", "content": user_content}],
                )
                return response.content[0].text.strip()
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        if not errors:
            errors.append("no provider configured")
        raise RuntimeError(f"All LLM providers failed: {'; '.join(errors)}")


# Singleton
llm_client = LLMClient()
