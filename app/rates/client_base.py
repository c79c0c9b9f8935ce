from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific text-completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> str:
        """Return provider response as plain text.

        Raises:
            AIProcessingError: if the provider call fails.
        """
