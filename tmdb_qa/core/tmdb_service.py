import logging
from typing import Dict, Optional

from .config import Settings
from .interfaces import TMDBConfig
from .tmdb_client import TMDBClient
from .services import MovieService, SearchService, GenreService, AccountService, ListService

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class TMDBServiceFactory:
    """Factory class for creating TMDB services.

    Each service gets its own client built from the explicit config; nothing
    here reads the environment.
    """

    @staticmethod
    def create_movie_service(config: TMDBConfig) -> MovieService:
        """Create a new movie service instance"""
        return MovieService(TMDBClient(config))

    @staticmethod
    def create_search_service(config: TMDBConfig) -> SearchService:
        """Create a new search service instance"""
        return SearchService(TMDBClient(config))

    @staticmethod
    def create_genre_service(config: TMDBConfig) -> GenreService:
        """Create a new genre service instance"""
        return GenreService(TMDBClient(config))

    @staticmethod
    def create_account_service(config: TMDBConfig) -> AccountService:
        """Create a new account service instance"""
        return AccountService(TMDBClient(config))

    @staticmethod
    def create_list_service(config: TMDBConfig, session_id: Optional[str] = None) -> ListService:
        """Create a new list service instance"""
        return ListService(TMDBClient(config), session_id=session_id)

    @staticmethod
    def create_all_services(settings: Settings) -> Dict[str, object]:
        """Create all service instances from application settings"""
        config = settings.tmdb_config()
        auth_mode = "bearer token" if config.uses_bearer_token else "api key"
        logger.info(f"Creating TMDB services for {config.base_url} ({auth_mode})")
        return {
            'movie_service': TMDBServiceFactory.create_movie_service(config),
            'search_service': TMDBServiceFactory.create_search_service(config),
            'genre_service': TMDBServiceFactory.create_genre_service(config),
            'account_service': TMDBServiceFactory.create_account_service(config),
            'list_service': TMDBServiceFactory.create_list_service(config, settings.TMDB_SESSION_ID),
        }
