"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Postboard API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Redis (session cache)
    redis_url: str = "redis://localhost:6379/0"

    # Sessions
    session_cookie_name: str = "sessionId"
    session_ttl_seconds: int = Field(default=86400, ge=1)  # 24 hours
    session_cookie_secure: bool = False  # this would be True in production
    session_secret: str = ""
    session_secret_file: str = Field(
        default="",
        description="Path to a file holding the cookie signing secret",
    )

    # Password hashing
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []

    def read_session_secret(self) -> str:
        """Resolve the cookie signing secret.

        SESSION_SECRET wins; otherwise the contents of SESSION_SECRET_FILE.
        Returns an empty string if neither is configured.
        """
        if self.session_secret:
            return self.session_secret
        if self.session_secret_file:
            return Path(self.session_secret_file).read_text(encoding="utf-8").strip()
        return ""


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
