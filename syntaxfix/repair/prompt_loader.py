from pathlib import Path

from syntaxfix.repair.exceptions import RepairError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the fix prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled fix_prompt.txt.

    Returns:
        The raw template string with ``{format_kind}``, ``{error_list}``
        and ``{content}`` placeholders.

    Raises:
        RepairError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "fix_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RepairError(f"Failed to load prompt template: {exc}") from exc


def load_system_prompt_template(path: Path | None = None) -> str:
    """Load the system prompt template used by chat-style providers.

    Raises:
        RepairError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise RepairError(f"Failed to load system prompt template: {exc}") from exc
