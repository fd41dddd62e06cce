from dataclasses import dataclass, field
from enum import Enum


class FormatKind(str, Enum):
    """Structured-data format a document is written in."""

    JSON = "JSON"
    XML = "XML"


@dataclass(frozen=True)
class ErrorItem:
    """A single syntax error reported by the editor's validator."""

    message: str
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class ErrorReport:
    """Syntax errors found in a document, consumed once per fix request."""

    format_kind: FormatKind
    summary: str
    items: tuple[ErrorItem, ...] | None = None


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling options sent with every generation request.

    ``max_output_tokens=None`` means unbounded output.
    """

    context_window: int = 32768
    max_output_tokens: int | None = None
    temperature: float = 0.1
    top_p: float = 0.9
    repeat_penalty: float = 1.0
    stop_sequences: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationRequest:
    """One non-streaming generation call to the inference provider."""

    model: str
    prompt: str
    options: GenerationOptions = field(default_factory=GenerationOptions)
    system_prompt: str = ""
    stream: bool = False


@dataclass(frozen=True)
class GenerationResponse:
    """Raw text returned by the inference provider."""

    response: str


@dataclass(frozen=True)
class ModelStatus:
    """Availability of the inference provider and its installed models."""

    available: bool
    models: tuple[str, ...] = ()
    error: str | None = None
