from typing import Optional

from ..enums import MediaType
from ..interfaces import AccountServiceInterface, TMDBResponse, TMDBClientInterface

class AccountService(AccountServiceInterface):
    """Service class for account-related operations.

    With a bearer token the API resolves the account from the token. The
    ``account_id`` argument is kept on every method for call-site symmetry;
    account details and rating endpoints never put it in the URL, and the
    favorite/watchlist paths carry it only because the route requires a
    segment there.
    """

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    def get_account_details(self, account_id: Optional[int] = None, **params) -> TMDBResponse:
        """Get details of the account owning the credentials"""
        return self.client.get("/account", params)

    def get_favorite_movies(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/favorite/movies", params)

    def get_favorite_tv_shows(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/favorite/tv", params)

    def get_rated_movies(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/rated/movies", params)

    def get_rated_tv_shows(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/rated/tv", params)

    def get_watchlist_movies(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/watchlist/movies", params)

    def get_watchlist_tv_shows(self, account_id: int, **params) -> TMDBResponse:
        return self.client.get(f"/account/{account_id}/watchlist/tv", params)

    def _mark_favorite(self, account_id: int, media_type: str, media_id: int, favorite: bool,
                       params: dict) -> TMDBResponse:
        body = {
            "media_type": media_type,
            "media_id": media_id,
            "favorite": favorite,
        }
        return self.client.post(f"/account/{account_id}/favorite", body, params)

    def add_to_favorites(self, account_id: int, movie_id: int, favorite: bool = True, **params) -> TMDBResponse:
        """Mark or unmark a movie as favorite; removal is the same call with favorite=False"""
        return self._mark_favorite(account_id, MediaType.MOVIE.value, movie_id, favorite, params)

    def add_tv_to_favorites(self, account_id: int, tv_id: int, favorite: bool = True, **params) -> TMDBResponse:
        return self._mark_favorite(account_id, MediaType.TV.value, tv_id, favorite, params)

    def add_to_watchlist(self, account_id: int, media_id: int, media_type: str = "movie",
                         watchlist: bool = True, **params) -> TMDBResponse:
        """Add or remove an item on the watchlist"""
        body = {
            "media_type": media_type,
            "media_id": media_id,
            "watchlist": watchlist,
        }
        return self.client.post(f"/account/{account_id}/watchlist", body, params)

    def add_movie_to_watchlist(self, account_id: int, movie_id: int, watchlist: bool = True,
                               **params) -> TMDBResponse:
        return self.add_to_watchlist(account_id, movie_id, MediaType.MOVIE.value, watchlist, **params)

    def add_tv_show_to_watchlist(self, account_id: int, tv_id: int, watchlist: bool = True,
                                 **params) -> TMDBResponse:
        return self.add_to_watchlist(account_id, tv_id, MediaType.TV.value, watchlist, **params)

    def rate_movie(self, account_id: Optional[int], movie_id: int, rating: float, **params) -> TMDBResponse:
        """Rate a movie (0.5 to 10 in steps of 0.5)"""
        return self.client.post(f"/movie/{movie_id}/rating", {"value": rating}, params)

    def delete_movie_rating(self, account_id: Optional[int], movie_id: int, **params) -> TMDBResponse:
        return self.client.delete(f"/movie/{movie_id}/rating", params)
