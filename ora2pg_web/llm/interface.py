from abc import ABC, abstractmethod
from typing import List, Optional


class LLMProvider(ABC):
    """
    Abstract Base Class interface that defines the contract for any hosted
    text-generation service (OpenAI, OpenAI-compatible gateways, etc.)
    """

    @abstractmethod
    async def generate_text(
        self,
        messages: List[dict],
        model_name: Optional[str] = None,
        reasoning_effort: Optional[str] = None,
        plain_text: bool = False,
    ) -> str:
        """
        Sends a single-turn conversation and returns the model's text reply.

        Args:
            messages: Chat messages in {"role": ..., "content": ...} form.
            model_name: Overrides the provider's default model.
            reasoning_effort: Thinking budget hint for reasoning models.
            plain_text: Ask for a plain text response format.

        Returns:
            The reply text, or "" if the model returned no content.
        """
        pass
