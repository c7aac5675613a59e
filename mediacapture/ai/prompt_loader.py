from pathlib import Path

from mediacapture.ai.exceptions import AIServiceError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_image_analysis_prompt(path: Path | None = None) -> str:
    """Load the image analysis prompt from a file.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled image_analysis_prompt.txt.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        AIServiceError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "image_analysis_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AIServiceError(f"Failed to load prompt: {exc}") from exc
