from .movie_service import MovieService
from .search_service import SearchService
from .genre_service import GenreService
from .account_service import AccountService
from .list_service import ListService

__all__ = [
    "MovieService",
    "SearchService",
    "GenreService",
    "AccountService",
    "ListService",
]
