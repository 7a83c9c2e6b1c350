from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional
from dataclasses import dataclass, field
from types import MappingProxyType

from requests.structures import CaseInsensitiveDict

@dataclass(frozen=True)
class TMDBConfig:
    """Configuration class for TMDB API"""
    base_url: str = "https://api.themoviedb.org/3"
    api_key: Optional[str] = None
    read_access_token: Optional[str] = None
    timeout: int = 30

    @property
    def uses_bearer_token(self) -> bool:
        return bool(self.read_access_token)

@dataclass(frozen=True)
class TMDBResponse:
    """Response wrapper for TMDB API calls.

    Returned for every HTTP response the API sends back, 4xx/5xx included.
    ``data`` holds the decoded JSON body, or the raw text when the body is
    not JSON. ``duration`` is in milliseconds. ``headers`` is a read-only,
    case-insensitive view; ``data`` is the parsed body as received.
    """
    status: int
    status_text: str
    headers: Mapping[str, str] = field(default_factory=CaseInsensitiveDict)
    data: Any = None
    duration: float = 0.0

    def __post_init__(self):
        headers = CaseInsensitiveDict(self.headers)
        object.__setattr__(self, "headers", MappingProxyType(headers))

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

class TMDBClientInterface(ABC):
    """Abstract interface for TMDB client"""

    @abstractmethod
    def get(self, endpoint: str, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        pass

    @abstractmethod
    def post(self, endpoint: str, body: Any = None, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        pass

    @abstractmethod
    def put(self, endpoint: str, body: Any = None, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        pass

    @abstractmethod
    def delete(self, endpoint: str, query_params: Dict = None, headers: Dict = None, body: Any = None) -> TMDBResponse:
        pass

class MovieServiceInterface(ABC):
    """Abstract interface for movie service"""

    @abstractmethod
    def get_movie_details(self, movie_id: int, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_popular_movies(self, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_top_rated_movies(self, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_movie_credits(self, movie_id: int, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_movie_recommendations(self, movie_id: int, **params) -> TMDBResponse:
        pass

class SearchServiceInterface(ABC):
    """Abstract interface for search service"""

    @abstractmethod
    def search_movies(self, query: str, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def search_tv_shows(self, query: str, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def search_people(self, query: str, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def multi_search(self, query: str, **params) -> TMDBResponse:
        pass

class GenreServiceInterface(ABC):
    """Abstract interface for genre service"""

    @abstractmethod
    def get_movie_genres(self, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_tv_genres(self, **params) -> TMDBResponse:
        pass

class AccountServiceInterface(ABC):
    """Abstract interface for account service"""

    @abstractmethod
    def get_account_details(self, account_id: Optional[int] = None, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def add_to_favorites(self, account_id: int, movie_id: int, favorite: bool = True, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def add_to_watchlist(self, account_id: int, media_id: int, media_type: str = "movie",
                         watchlist: bool = True, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def rate_movie(self, account_id: Optional[int], movie_id: int, rating: float, **params) -> TMDBResponse:
        pass

class ListServiceInterface(ABC):
    """Abstract interface for list service"""

    @abstractmethod
    def create_list(self, name: str, description: str = "", language: str = "en", **params) -> TMDBResponse:
        pass

    @abstractmethod
    def get_list_details(self, list_id: int, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def add_movie_to_list(self, list_id: int, media_id: int, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def remove_movie_from_list(self, list_id: int, media_id: int, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def clear_list(self, list_id: int, confirm: bool = False, **params) -> TMDBResponse:
        pass

    @abstractmethod
    def delete_list(self, list_id: int, **params) -> TMDBResponse:
        pass
