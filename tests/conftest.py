"""
Root pytest configuration for the TMDB contract suite.

Live scenarios (marked ``live``) talk to the real API and are skipped when
no credentials are configured. Unit tests never touch the network.
"""

import logging

import pytest

from tmdb_qa.core.config import Settings, load_env, missing_required_env
from tmdb_qa.core.tmdb_service import TMDBServiceFactory

logger = logging.getLogger(__name__)


def pytest_configure(config):
    """Load .env once and register markers."""
    load_env()
    config.addinivalue_line("markers", "live: scenario against the real TMDB API (needs credentials)")
    config.addinivalue_line("markers", "session: scenario that also needs TMDB_SESSION_ID")


def pytest_collection_modifyitems(config, items):
    live_items = [item for item in items if item.get_closest_marker("live")]
    if not live_items:
        return

    settings = Settings()
    missing = missing_required_env(settings)
    if missing:
        skip_live = pytest.mark.skip(reason=f"TMDB credentials not configured: {', '.join(missing)}")
        logger.warning(f"Skipping {len(live_items)} live tests, missing: {', '.join(missing)}")
        for item in live_items:
            item.add_marker(skip_live)
        return

    if not settings.TMDB_SESSION_ID:
        skip_session = pytest.mark.skip(
            reason="TMDB_SESSION_ID not found in environment; generate a session id and add it to .env"
        )
        for item in live_items:
            if item.get_closest_marker("session"):
                item.add_marker(skip_session)


@pytest.fixture(scope="session")
def settings() -> Settings:
    settings = Settings()
    logging.getLogger("tmdb_qa").setLevel(settings.LOG_LEVEL)
    return settings


@pytest.fixture(scope="session")
def tmdb_config(settings):
    return settings.tmdb_config()


@pytest.fixture
def movies_service(tmdb_config):
    return TMDBServiceFactory.create_movie_service(tmdb_config)


@pytest.fixture
def search_service(tmdb_config):
    return TMDBServiceFactory.create_search_service(tmdb_config)


@pytest.fixture
def genres_service(tmdb_config):
    return TMDBServiceFactory.create_genre_service(tmdb_config)


@pytest.fixture
def account_service(tmdb_config):
    return TMDBServiceFactory.create_account_service(tmdb_config)


@pytest.fixture
def lists_service(tmdb_config, settings):
    return TMDBServiceFactory.create_list_service(tmdb_config, settings.TMDB_SESSION_ID)
