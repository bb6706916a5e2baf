from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


PLACEHOLDER_API_KEYS = frozenset(
    {
        "your-deepseek-api-key-here",
        "your-gemini-api-key-here",
        "your-openrouter-api-key-here",
    }
)


def _real_key(value: Optional[str]) -> Optional[str]:
    """Treat blank and placeholder keys from sample .env files as absent."""
    if value is None:
        return None
    value = value.strip()
    if not value or value in PLACEHOLDER_API_KEYS:
        return None
    return value


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="cardgen", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:8081"],
        alias="CORS_ORIGINS",
    )

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class GenerationSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # "deepseek", "google", "openrouter"; empty disables the live backend
    model_provider: str = Field(default="", alias="MODEL_PROVIDER")

    deepseek_api_key: Optional[str] = Field(default=None, alias="DEEPSEEK_API_KEY")
    deepseek_model: str = Field(default="deepseek-chat", alias="DEEPSEEK_MODEL")
    deepseek_base_url: str = Field(
        default="https://api.deepseek.com", alias="DEEPSEEK_BASE_URL"
    )

    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")

    openrouter_api_key: Optional[str] = Field(default=None, alias="OPENROUTER_API_KEY")
    openrouter_model: str = Field(
        default="deepseek/deepseek-chat", alias="OPENROUTER_MODEL"
    )

    timeout_seconds: float = Field(default=30.0, alias="GENERATION_TIMEOUT_SECONDS")
    retries: int = Field(default=1, alias="GENERATION_RETRIES")

    @property
    def provider(self) -> str:
        return (self.model_provider or "").strip().lower()

    def api_key_for(self, provider: str) -> Optional[str]:
        keys = {
            "deepseek": self.deepseek_api_key,
            "google": self.gemini_api_key,
            "openrouter": self.openrouter_api_key,
        }
        return _real_key(keys.get(provider))

    @computed_field
    def backend_configured(self) -> bool:
        return bool(self.provider) and self.api_key_for(self.provider) is not None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    generation: GenerationSettings = Field(
        default_factory=lambda: GenerationSettings()
    )


settings = Settings()
