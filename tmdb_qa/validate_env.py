"""
Check the TMDB settings before running the live suite.

Usage: python -m tmdb_qa.validate_env
"""

import sys
from typing import Optional

from .core.config import Settings, is_http_url, load_env, missing_required_env


def validate_environment(settings: Optional[Settings] = None) -> bool:
    """Print a report of the TMDB settings; True when live tests can run"""
    if settings is None:
        if load_env() is None:
            print("⚠️  .env file not found, reading the process environment only")
            print("   Run: cp .env.example .env")
        settings = Settings()

    print("🔍 Validating Environment Configuration...")
    print("=" * 50)

    problems = missing_required_env(settings)
    if settings.TMDB_BASE_URL and not is_http_url(settings.TMDB_BASE_URL):
        problems.append("TMDB_BASE_URL (not an http(s) URL)")

    for name in ("TMDB_BASE_URL", "TMDB_API_KEY", "TMDB_READ_ACCESS_TOKEN"):
        if getattr(settings, name) and not any(p.startswith(name) for p in problems):
            print(f"✅ {name}: Set")

    if problems:
        print("\n❌ Missing or invalid:")
        for problem in problems:
            print(f"   - {problem}")
        print("\n❌ Environment validation failed!")
        return False

    if settings.TMDB_SESSION_ID:
        print("✅ TMDB_SESSION_ID: Set")
    else:
        print("\n⚠️  TMDB_SESSION_ID not set: list lifecycle tests will be skipped")

    print("=" * 50)
    print("✅ Environment is ready for the live suite")
    return True


def main() -> None:
    sys.exit(0 if validate_environment() else 1)


if __name__ == "__main__":
    main()
