from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from syntaxfix.config.settings import Settings
from syntaxfix.io.file_store import FileStore
from syntaxfix.repair.base import BaseFixer
from syntaxfix.repair.factory import FixerFactory
from syntaxfix.repair.ollama_client_adapter import OllamaClientAdapter


@dataclass(frozen=True)
class AppContext:
    """Dependencies and startup state shared by every command.

    ``launch_args`` is the argument list captured once at startup, without the
    executable path. Commands read it from here, never from ``sys.argv``.
    ``fixer_factory`` is only called by commands that need a fixer, so a
    misconfigured provider fails those commands alone.
    """

    settings: Settings
    launch_args: tuple[str, ...]
    fixer_factory: Callable[[], BaseFixer]
    ollama: OllamaClientAdapter
    file_store: FileStore


def build_context(settings: Settings, launch_args: Sequence[str] = ()) -> AppContext:
    """Build the application context with all required adapters."""
    return AppContext(
        settings=settings,
        launch_args=tuple(launch_args),
        fixer_factory=partial(FixerFactory.create, settings),
        ollama=FixerFactory.create_ollama_client(settings),
        file_store=FileStore(),
    )
