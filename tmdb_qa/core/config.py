from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

from .exceptions import ConfigurationError
from .interfaces import TMDBConfig

# Values shipped in .env.example; treated as unset.
PLACEHOLDER_VALUES = {
    "TMDB_API_KEY": "your_api_key_here",
    "TMDB_READ_ACCESS_TOKEN": "your_read_access_token_here",
    "TMDB_SESSION_ID": "generated_session_id",
}

def is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings"""

    # TMDB
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_API_KEY: Optional[str] = None
    TMDB_READ_ACCESS_TOKEN: Optional[str] = None
    # Only list write operations need a session
    TMDB_SESSION_ID: Optional[str] = None
    TMDB_TIMEOUT: int = 30

    # Scenario thresholds
    MAX_RESPONSE_TIME_MS: int = 5000

    LOG_LEVEL: str = "INFO"

    @field_validator("TMDB_API_KEY", "TMDB_READ_ACCESS_TOKEN", "TMDB_SESSION_ID")
    @classmethod
    def drop_placeholders(cls, v, info):
        if v is None:
            return None
        v = v.strip()
        if not v or v == PLACEHOLDER_VALUES.get(info.field_name):
            return None
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("TMDB_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v):
        if v < 1:
            raise ValueError("TMDB timeout must be positive")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def has_credentials(self) -> bool:
        return bool(self.TMDB_API_KEY or self.TMDB_READ_ACCESS_TOKEN)

    def tmdb_config(self) -> TMDBConfig:
        """Build the immutable client configuration shared by every service"""
        base_url = (self.TMDB_BASE_URL or "").strip()
        if not base_url:
            raise ConfigurationError("TMDB_BASE_URL is not set")
        if not is_http_url(base_url):
            raise ConfigurationError(f"TMDB_BASE_URL is not an http(s) URL: {base_url}")
        return TMDBConfig(
            base_url=base_url,
            api_key=self.TMDB_API_KEY,
            read_access_token=self.TMDB_READ_ACCESS_TOKEN,
            timeout=self.TMDB_TIMEOUT,
        )

def missing_required_env(settings: "Settings") -> List[str]:
    """Names of settings the live suite cannot run without."""
    missing = []
    if not settings.TMDB_BASE_URL:
        missing.append("TMDB_BASE_URL")
    if not settings.has_credentials:
        missing.append("TMDB_API_KEY or TMDB_READ_ACCESS_TOKEN")
    return missing

def load_env(*, override: bool = False) -> Optional[Path]:
    repo_root = Path(__file__).resolve().parents[2]
    candidates = [
        repo_root / ".env",
        Path.cwd() / ".env",
    ]
    for path in candidates:
        if path.is_file():
            load_dotenv(dotenv_path=path, override=override)
            return path
    return None

# Singleton instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings singleton instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
