"""AI-powered rate extraction from document text."""

import json
import re
from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.logging.logger import Log
from app.rates.client_base import BaseCompletionClient
from app.rates.exceptions import AIProcessingError, AIResponseParseError
from app.rates.models import RateType
from app.rates.prompt_loader import load_prompt_template, load_system_prompt

_FENCE_RE = re.compile(r"^```[A-Za-z]*\s*|\s*```$")


class RateExtractor:
    """Turns extracted document text into raw rate candidates with one AI call.

    The output is the parsed JSON array as returned by the model; field-level
    checks belong to the validator.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 3000,
        max_attempts: int = 1,
        retry_wait_seconds: float = 1.0,
        max_input_chars: int = 24000,
        max_rates: int = 20,
        default_currency: str = "USD",
        prompt_template_path: Path | None = None,
        system_prompt_path: Path | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._max_tokens = max_tokens
        self._max_attempts = max(1, max_attempts)
        self._retry_wait_seconds = retry_wait_seconds
        self._max_input_chars = max_input_chars
        self._max_rates = max_rates
        self._default_currency = default_currency
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._today = today

    def extract(self, text: str) -> list[Any]:
        """Return the rate candidates found in text; an empty list means none.

        Raises:
            AIProcessingError: if the completion call fails on every attempt.
            AIResponseParseError: if the response is not a JSON array.
        """
        prompt = self._build_prompt(text)
        Log.debug(f"Rate extraction prompt:\n{prompt}")

        raw_response = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{raw_response}")

        candidates = self._parse_json(raw_response)
        Log.info(f"AI extraction complete: {len(candidates)} rate candidates")
        return candidates

    def _build_prompt(self, text: str) -> str:
        if len(text) > self._max_input_chars:
            Log.warning(
                f"Document text truncated from {len(text)} to "
                f"{self._max_input_chars} chars before extraction"
            )
            text = text[: self._max_input_chars]
        return self._prompt_template.format(
            today=self._today().isoformat(),
            rate_types=", ".join(f"'{t.value}'" for t in RateType),
            default_currency=self._default_currency,
            max_rates=self._max_rates,
            document_text=text,
        )

    def _call_ai(self, prompt: str) -> str:
        retrying = Retrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._retry_wait_seconds, max=30),
            retry=retry_if_exception_type(AIProcessingError),
            before_sleep=_log_retry,
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                return self._client.create_chat_completion(
                    model=self._model,
                    temperature=self._temperature,
                    system_prompt=self._system_prompt,
                    user_prompt=prompt,
                    max_tokens=self._max_tokens,
                )
        raise AIProcessingError("AI processing failed: no attempt was made")

    @staticmethod
    def _parse_json(raw: str) -> list[Any]:
        cleaned = strip_code_fences(raw)
        start = cleaned.find("[")
        end = cleaned.rfind("]")
        if start != -1 and end > start:
            cleaned = cleaned[start : end + 1]

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            Log.error(f"Content that failed to parse: {cleaned[:500]}")
            raise AIResponseParseError(f"Invalid JSON response from AI: {exc}") from exc

        if not isinstance(parsed, list):
            raise AIResponseParseError("AI response is not a JSON array")
        return parsed


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding Markdown code fence (``` or ```json) if present."""
    return _FENCE_RE.sub("", raw.strip()).strip()


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    Log.warning(f"AI call failed (attempt {retry_state.attempt_number}), retrying: {exc}")
