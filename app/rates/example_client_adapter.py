"""Offline completion client for local development.

Returns an empty rate list, which the pipeline reports as "no rates found".
"""

from app.rates.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Adapter that returns a fixed JSON array without any network calls."""

    def __init__(self, response: str = "[]") -> None:
        self._response = response

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, max_tokens
        return self._response
