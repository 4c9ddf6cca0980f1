"""
Configuration management for the Code Lab backend.
Supports environment variables and .env files.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExecutionConfig(BaseSettings):
    """Remote code-execution service settings."""

    model_config = SettingsConfigDict(
        env_prefix="EXECUTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="https://emkc.org/api/v2/piston/execute",
        description="Piston-compatible execute endpoint"
    )
    source_filename: str = Field(
        default="main",
        description="Name of the single source file sent upstream"
    )


class TutorConfig(BaseSettings):
    """AI tutor (OpenAI-compatible chat API) settings."""

    model_config = SettingsConfigDict(
        env_prefix="GROQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Groq API key")
    base_url: str = Field(
        default="https://api.groq.com/openai/v1",
        description="OpenAI-compatible API base URL"
    )
    model: str = Field(
        default="llama-3.3-70b-versatile",
        description="Chat model used to generate hints"
    )
    temperature: float = Field(default=0.4, ge=0.0, le=2.0)
    max_tokens: int = Field(default=350, description="Maximum tokens per hint")
    response_language: str = Field(
        default="Spanish",
        description="Natural language the tutor answers in"
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_credential(self) -> bool:
        return self.api_key is not None


class ServerConfig(BaseSettings):
    """Server configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, description="Server port")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )
    max_body_bytes: int = Field(
        default=1024 * 1024,
        description="Maximum accepted request body size"
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__"
    )

    app_name: str = "Code Lab"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = Field(default=True, description="Debug mode")

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    tutor: TutorConfig = Field(default_factory=TutorConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    @field_validator("debug", mode="before")
    @classmethod
    def validate_debug(cls, v: str | bool) -> bool:
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "on")
        return False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
