from pathlib import Path

from app.processor.exceptions import ConfigurationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the report extraction prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled report_prompt.txt.

    Returns:
        The raw template string with ``{language_rule}`` and
        ``{output_schema}`` placeholders.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "report_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to load prompt template: {exc}") from exc


def load_output_schema(path: Path | None = None) -> str:
    """Load the JSON skeleton the model is told to fill in.

    Raises:
        ConfigurationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "report_fields.json"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ConfigurationError(f"Failed to load output schema: {exc}") from exc
