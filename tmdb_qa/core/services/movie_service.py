from ..interfaces import MovieServiceInterface, TMDBResponse, TMDBClientInterface

class MovieService(MovieServiceInterface):
    """Service class for movie-related operations"""

    base_path = "/movie"

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    def get_movie_details(self, movie_id: int, **params) -> TMDBResponse:
        """Get movie details by ID"""
        return self.client.get(f"{self.base_path}/{movie_id}", params)

    def get_popular_movies(self, **params) -> TMDBResponse:
        """Get popular movies"""
        return self.client.get(f"{self.base_path}/popular", params)

    def get_top_rated_movies(self, **params) -> TMDBResponse:
        """Get top rated movies"""
        return self.client.get(f"{self.base_path}/top_rated", params)

    def get_upcoming_movies(self, **params) -> TMDBResponse:
        """Get upcoming movies"""
        return self.client.get(f"{self.base_path}/upcoming", params)

    def get_now_playing_movies(self, **params) -> TMDBResponse:
        """Get movies now playing in theatres"""
        return self.client.get(f"{self.base_path}/now_playing", params)

    def get_movie_credits(self, movie_id: int, **params) -> TMDBResponse:
        """Get movie credits by ID"""
        return self.client.get(f"{self.base_path}/{movie_id}/credits", params)

    def get_movie_reviews(self, movie_id: int, **params) -> TMDBResponse:
        return self.client.get(f"{self.base_path}/{movie_id}/reviews", params)

    def get_similar_movies(self, movie_id: int, **params) -> TMDBResponse:
        return self.client.get(f"{self.base_path}/{movie_id}/similar", params)

    def get_movie_recommendations(self, movie_id: int, **params) -> TMDBResponse:
        """Get movie recommendations by ID"""
        return self.client.get(f"{self.base_path}/{movie_id}/recommendations", params)

    def get_movie_videos(self, movie_id: int, **params) -> TMDBResponse:
        return self.client.get(f"{self.base_path}/{movie_id}/videos", params)

    def get_movie_images(self, movie_id: int, **params) -> TMDBResponse:
        return self.client.get(f"{self.base_path}/{movie_id}/images", params)

    def get_movie_release_dates(self, movie_id: int) -> TMDBResponse:
        """Get release dates per country; the endpoint takes no query parameters"""
        return self.client.get(f"{self.base_path}/{movie_id}/release_dates")
