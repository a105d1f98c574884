from typing import List, Optional
from openai import AsyncOpenAI

from ..interface import LLMProvider
from ...config import settings


class OpenAIAdapter(LLMProvider):
    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = settings.TRANSLATION_MODEL,
        base_url: Optional[str] = None,
        max_retries: int = settings.MAX_RETRIES,
    ):
        # An empty key is accepted here; the API rejects it on the first call.
        self.client = AsyncOpenAI(
            api_key=api_key or "",
            base_url=base_url,
            max_retries=max_retries,
        )
        self.model_name = model_name

    async def generate_text(
        self,
        messages: List[dict],
        model_name: Optional[str] = None,
        reasoning_effort: Optional[str] = None,
        plain_text: bool = False,
    ) -> str:
        # This is where the specific OpenAI implementation lives.
        # If OpenAI changes their API tomorrow, we ONLY change this file.
        options = {}
        if reasoning_effort:
            options["reasoning_effort"] = reasoning_effort
        if plain_text:
            options["response_format"] = {"type": "text"}

        completion = await self.client.chat.completions.create(
            model=model_name or self.model_name,
            messages=messages,
            **options,
        )

        # We unwrap the specific OpenAI response structure here
        return completion.choices[0].message.content or ""
