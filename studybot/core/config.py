from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    name: str = Field(default="pdf-study-bot", alias="APP_NAME")
    version: str = Field(default="v1", alias="API_VERSION")
    api_prefix: str = Field(default="api", alias="API_PREFIX")
    port: int = Field(default=9000, alias="APP_PORT")
    mode: str = Field(default="prod", alias="MODE")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"], alias="CORS_ORIGINS"
    )

    @computed_field
    def is_production(self) -> bool:
        return self.mode != "dev"


class LLMSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    # Only the CLI falls back to this; HTTP callers always send their own key.
    groq_api_key: Optional[str] = Field(default=None, alias="GROQ_API_KEY")
    model: str = Field(default="gemma2-9b-it", alias="GROQ_MODEL")
    timeout_seconds: float = Field(default=60.0, alias="LLM_TIMEOUT_SECONDS")
    excerpt_char_limit: int = Field(default=1500, alias="EXCERPT_CHAR_LIMIT")


class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    url: str = Field(
        default="sqlite+aiosqlite:///./studybot.db", alias="DATABASE_URL"
    )
    echo: bool = Field(default=False, alias="DATABASE_ECHO")


class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    jwt_secret: str = Field(default="dev-secret-change-me", alias="JWT_SECRET")
    token_lifetime_seconds: int = Field(default=3600, alias="JWT_LIFETIME_SECONDS")
    required: bool = Field(default=False, alias="AUTH_REQUIRED")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    app: AppSettings = Field(default_factory=lambda: AppSettings())
    llm: LLMSettings = Field(default_factory=lambda: LLMSettings())
    database: DatabaseSettings = Field(default_factory=lambda: DatabaseSettings())
    auth: AuthSettings = Field(default_factory=lambda: AuthSettings())


settings = Settings()
