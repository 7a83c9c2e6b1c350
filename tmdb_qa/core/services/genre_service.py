from ..interfaces import GenreServiceInterface, TMDBResponse, TMDBClientInterface

class GenreService(GenreServiceInterface):
    """Service class for genre lists"""

    base_path = "/genre"

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    def get_movie_genres(self, **params) -> TMDBResponse:
        """Get movie genres list from TMDB"""
        return self.client.get(f"{self.base_path}/movie/list", params)

    def get_tv_genres(self, **params) -> TMDBResponse:
        """Get TV genres list from TMDB"""
        return self.client.get(f"{self.base_path}/tv/list", params)
