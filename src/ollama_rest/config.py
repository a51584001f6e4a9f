"""Client configuration and env handling."""
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "http://127.0.0.1:11434"
DEFAULT_TIMEOUT = 60.0


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


class OllamaSettings(BaseAppSettings):
    # OLLAMA_HOST belongs to the server itself and is often a bare bind address.
    model_config = SettingsConfigDict(env_prefix="OLLAMA_REST_")

    host: str = DEFAULT_HOST
    timeout: float = DEFAULT_TIMEOUT
    log_json: bool = False
    log_level: str = "INFO"
    demo_model: str = "llama3.1:8b"
