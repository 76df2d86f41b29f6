"""
Centralized configuration management using Pydantic Settings.

All environment variables and configuration in one place.
Every external API key is optional: a missing key degrades the feature
that depends on it to an empty result instead of failing the request.
"""

from typing import Optional, Literal
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    app_name: str = Field(default="Study Quiz Service", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")

    # ==================== LLM Configuration ====================
    gemini_api_key: Optional[str] = Field(default=None, description="Google Gemini API key")
    default_model: str = Field(default="gemini-2.0-flash", description="Default Gemini model")
    llm_temperature: float = Field(default=0.7, ge=0.0, le=1.0, description="Generation temperature")
    llm_max_output_tokens: Optional[int] = Field(default=None, ge=1, description="Max output tokens")

    # ==================== Search Configuration ====================
    youtube_api_key: Optional[str] = Field(default=None, description="YouTube Data API key")
    youtube_max_results: int = Field(default=5, ge=1, le=50, description="Max video results")
    google_cse_api_key: Optional[str] = Field(default=None, description="Google Custom Search API key")
    google_cse_id: Optional[str] = Field(default=None, description="Google Custom Search Engine ID (cx)")
    search_max_results: int = Field(default=6, ge=1, le=10, description="Max web search results")

    # ==================== Document Processing ====================
    upload_dir: str = Field(default="pdfs", description="Temporary upload directory")
    max_upload_size_mb: int = Field(default=20, ge=1, description="Max upload size (MB)")
    static_dir: str = Field(default="static", description="Static assets directory")

    # ==================== API Configuration ====================
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=3000, ge=1, le=65535, description="API port")
    api_reload: bool = Field(default=False, description="Enable auto-reload")
    cors_allowed_origins: str = Field(default="*", description="Comma-separated CORS origins")

    # ==================== Monitoring & Logging ====================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    enable_metrics: bool = Field(default=True, description="Collect in-process request metrics")

    # ==================== Development ====================
    debug: bool = Field(default=False, description="Debug mode")
    testing: bool = Field(default=False, description="Testing mode")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("gemini_api_key", "youtube_api_key", "google_cse_api_key", "google_cse_id")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings in .env files as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.testing

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def allowed_origins(self) -> list[str]:
        """CORS origins as a list, empty entries dropped."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]

    @property
    def integrations(self) -> dict[str, bool]:
        """Which external collaborators are configured."""
        return {
            "gemini": bool(self.gemini_api_key),
            "youtube": bool(self.youtube_api_key),
            "web_search": bool(self.google_cse_api_key and self.google_cse_id),
        }


# Global settings instance
settings = Settings()
