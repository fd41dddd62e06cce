from typing import ClassVar

from syntaxfix.config.settings import Settings
from syntaxfix.repair.anthropic_client_adapter import AnthropicClientAdapter
from syntaxfix.repair.base import BaseFixer
from syntaxfix.repair.example_client_adapter import ExampleClientAdapter
from syntaxfix.repair.fixer import Fixer
from syntaxfix.repair.ollama_client_adapter import OllamaClientAdapter
from syntaxfix.repair.openai_client_adapter import OpenAIClientAdapter
from syntaxfix.repair.prompt_loader import load_system_prompt_template


class FixerFactory:
    """Creates the configured fixer."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseFixer:
        """Create a configured fixer from application settings."""
        provider = settings.fix_provider.lower()
        if provider == "example":
            return Fixer(client=ExampleClientAdapter())
        if provider == "ollama":
            return Fixer(
                client=cls.create_ollama_client(settings),
                context_window=settings.ollama_context_window,
            )
        if provider == "claude":
            return Fixer(
                client=AnthropicClientAdapter(
                    api_key=settings.claude_api_key,
                    timeout_seconds=settings.openai_timeout_seconds,
                ),
                system_prompt_template=load_system_prompt_template(),
            )
        client = OpenAIClientAdapter(
            api_key=cls._resolve_api_key(provider, settings),
            timeout_seconds=settings.openai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )
        return Fixer(
            client=client,
            system_prompt_template=load_system_prompt_template(),
        )

    @classmethod
    def create_ollama_client(cls, settings: Settings) -> OllamaClientAdapter:
        return OllamaClientAdapter(
            base_url=settings.ollama_base_url,
            timeout_seconds=settings.ollama_timeout_seconds,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "fix_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "claude",
            "example",
            "ollama",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown fix provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "groq": settings.groq_api_key,
            "together": settings.together_api_key,
            "deepseek": settings.deepseek_api_key,
        }
        return key_map.get(provider, "")
