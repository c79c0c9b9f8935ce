from pathlib import Path

from app.rates.exceptions import RateExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the rate extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled rate_extraction_prompt.txt.

    Returns:
        The raw template string with placeholders.

    Raises:
        RateExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "rate_extraction_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RateExtractionError(f"Failed to load prompt template: {exc}") from exc


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system instruction sent with every extraction call.

    Raises:
        RateExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise RateExtractionError(f"Failed to load system prompt: {exc}") from exc
