import httpx
import openai

from app.rates.client_base import BaseCompletionClient
from app.rates.exceptions import AIProcessingError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        max_tokens: int,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIProcessingError(f"AI processing failed: network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIProcessingError(f"AI processing failed: API error: {exc}") from exc

        if not response.choices:
            raise AIProcessingError("AI processing failed: no choices returned")
        content = response.choices[0].message.content
        if content is None:
            raise AIProcessingError("AI processing failed: empty response")
        return content
