from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    fix_provider: str = "ollama"
    fix_default_model: str = "deepseek-r1:8b"

    ollama_base_url: str = "http://localhost:11434"
    ollama_timeout_seconds: int = 300
    ollama_context_window: int = 32768

    openai_api_key: str = ""
    openai_timeout_seconds: int = 300
    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    groq_api_key: str = ""
    openrouter_api_key: str = ""
    together_api_key: str = ""
    deepseek_api_key: str = ""
    claude_api_key: str = ""
