from unittest.mock import MagicMock

import pytest

from tmdb_qa.core.config import Settings
from tmdb_qa.core.constants import TMDBConstants
from tmdb_qa.core.interfaces import TMDBConfig, TMDBClientInterface
from tmdb_qa.core.services import AccountService, GenreService, ListService, MovieService, SearchService
from tmdb_qa.core.tmdb_client import TMDBClient
from tmdb_qa.core.tmdb_service import TMDBServiceFactory


@pytest.fixture
def client():
    return MagicMock(spec=TMDBClientInterface)


class TestMovieService:
    def test_details_passes_params(self, client):
        MovieService(client).get_movie_details(238, language="es-ES")
        client.get.assert_called_once_with("/movie/238", {"language": "es-ES"})

    @pytest.mark.parametrize("method, path", [
        ("get_popular_movies", "/movie/popular"),
        ("get_top_rated_movies", "/movie/top_rated"),
        ("get_upcoming_movies", "/movie/upcoming"),
        ("get_now_playing_movies", "/movie/now_playing"),
    ])
    def test_collection_endpoints(self, client, method, path):
        getattr(MovieService(client), method)(page=2)
        client.get.assert_called_once_with(path, {"page": 2})

    @pytest.mark.parametrize("method, suffix", [
        ("get_movie_credits", "credits"),
        ("get_movie_reviews", "reviews"),
        ("get_similar_movies", "similar"),
        ("get_movie_recommendations", "recommendations"),
        ("get_movie_videos", "videos"),
        ("get_movie_images", "images"),
    ])
    def test_sub_resources(self, client, method, suffix):
        getattr(MovieService(client), method)(603)
        client.get.assert_called_once_with(f"/movie/603/{suffix}", {})

    def test_release_dates_take_no_params(self, client):
        MovieService(client).get_movie_release_dates(155)
        client.get.assert_called_once_with("/movie/155/release_dates")

    def test_returns_client_response(self, client):
        assert MovieService(client).get_popular_movies() is client.get.return_value


class TestSearchService:
    @pytest.mark.parametrize("method, kind", [
        ("search_movies", "movie"),
        ("search_tv_shows", "tv"),
        ("search_people", "person"),
        ("multi_search", "multi"),
        ("search_collections", "collection"),
        ("search_keywords", "keyword"),
        ("search_companies", "company"),
    ])
    def test_query_leads_params(self, client, method, kind):
        getattr(SearchService(client), method)("Star", page=1)
        path, params = client.get.call_args.args
        assert path == f"/search/{kind}"
        assert list(params) == ["query", "page"]
        assert params["query"] == "Star"

    def test_empty_query_is_still_sent(self, client):
        SearchService(client).search_movies("")
        client.get.assert_called_once_with("/search/movie", {"query": ""})


class TestGenreService:
    def test_movie_and_tv_lists(self, client):
        service = GenreService(client)
        service.get_movie_genres()
        service.get_tv_genres(language="fr-FR")
        assert client.get.call_args_list[0].args == ("/genre/movie/list", {})
        assert client.get.call_args_list[1].args == ("/genre/tv/list", {"language": "fr-FR"})


class TestAccountService:
    def test_details_ignore_account_id(self, client):
        service = AccountService(client)
        service.get_account_details(22644815)
        service.get_account_details(999999999)
        service.get_account_details()
        assert all(call.args == ("/account", {}) for call in client.get.call_args_list)

    @pytest.mark.parametrize("method, path", [
        ("get_favorite_movies", "/account/42/favorite/movies"),
        ("get_favorite_tv_shows", "/account/42/favorite/tv"),
        ("get_rated_movies", "/account/42/rated/movies"),
        ("get_rated_tv_shows", "/account/42/rated/tv"),
        ("get_watchlist_movies", "/account/42/watchlist/movies"),
        ("get_watchlist_tv_shows", "/account/42/watchlist/tv"),
    ])
    def test_account_lists(self, client, method, path):
        getattr(AccountService(client), method)(42, sort_by=TMDBConstants.SORT_OPTIONS["CREATED_AT_DESC"])
        client.get.assert_called_once_with(path, {"sort_by": "created_at.desc"})

    def test_add_movie_to_favorites(self, client):
        AccountService(client).add_to_favorites(42, 27205)
        client.post.assert_called_once_with(
            "/account/42/favorite",
            {"media_type": "movie", "media_id": 27205, "favorite": True},
            {},
        )

    def test_unfavorite_uses_same_call(self, client):
        AccountService(client).add_to_favorites(42, 27205, False)
        assert client.post.call_args.args[1]["favorite"] is False

    def test_tv_favorite(self, client):
        AccountService(client).add_tv_to_favorites(42, 1399)
        assert client.post.call_args.args[1] == {"media_type": "tv", "media_id": 1399, "favorite": True}

    def test_watchlist_defaults_to_movie(self, client):
        AccountService(client).add_to_watchlist(42, 11)
        client.post.assert_called_once_with(
            "/account/42/watchlist",
            {"media_type": "movie", "media_id": 11, "watchlist": True},
            {},
        )

    def test_watchlist_wrappers(self, client):
        service = AccountService(client)
        service.add_movie_to_watchlist(42, 603, False)
        service.add_tv_show_to_watchlist(42, 1396)
        assert client.post.call_args_list[0].args[1] == {"media_type": "movie", "media_id": 603, "watchlist": False}
        assert client.post.call_args_list[1].args[1] == {"media_type": "tv", "media_id": 1396, "watchlist": True}

    def test_rating_path_has_no_account_id(self, client):
        service = AccountService(client)
        service.rate_movie(42, 550, 8.5)
        service.delete_movie_rating(42, 550)
        client.post.assert_called_once_with("/movie/550/rating", {"value": 8.5}, {})
        client.delete.assert_called_once_with("/movie/550/rating", {})


class TestListService:
    def test_create_list_injects_session(self, client):
        ListService(client, session_id="sess").create_list("Weekend", "Movies", "en")
        client.post.assert_called_once_with(
            "/list",
            {"name": "Weekend", "description": "Movies", "language": "en"},
            {"session_id": "sess"},
        )

    def test_explicit_session_wins(self, client):
        ListService(client, session_id="sess").add_movie_to_list(5, 278, session_id="other")
        client.post.assert_called_once_with("/list/5/add_item", {"media_id": 278}, {"session_id": "other"})

    def test_without_session(self, client):
        ListService(client).remove_movie_from_list(5, 278)
        client.post.assert_called_once_with("/list/5/remove_item", {"media_id": 278}, {})

    def test_clear_defaults_to_unconfirmed(self, client):
        ListService(client, session_id="sess").clear_list(5)
        client.post.assert_called_once_with("/list/5/clear", {}, {"confirm": "false", "session_id": "sess"})

    def test_clear_confirmed(self, client):
        ListService(client).clear_list(5, confirm=True)
        assert client.post.call_args.args[2] == {"confirm": "true"}

    def test_delete_list(self, client):
        ListService(client, session_id="sess").delete_list(5)
        client.delete.assert_called_once_with("/list/5", {"session_id": "sess"})

    def test_reads_do_not_send_session(self, client):
        service = ListService(client, session_id="sess")
        service.get_list_details(5)
        service.check_movie_in_list(5, 278)
        assert client.get.call_args_list[0].args == ("/list/5", {})
        assert client.get.call_args_list[1].args == ("/list/5/item_status", {"movie_id": 278})


class TestServiceFactory:
    def test_services_get_their_own_client(self):
        config = TMDBConfig(api_key="k")
        movies = TMDBServiceFactory.create_movie_service(config)
        search = TMDBServiceFactory.create_search_service(config)

        assert isinstance(movies.client, TMDBClient)
        assert movies.client is not search.client
        assert movies.client.config is config

    def test_list_service_keeps_session(self):
        service = TMDBServiceFactory.create_list_service(TMDBConfig(api_key="k"), "sess")
        assert service.session_id == "sess"

    def test_create_all_services(self, monkeypatch):
        monkeypatch.delenv("TMDB_API_KEY", raising=False)
        settings = Settings(_env_file=None, TMDB_READ_ACCESS_TOKEN="token", TMDB_SESSION_ID="sess")
        services = TMDBServiceFactory.create_all_services(settings)

        assert set(services) == {"movie_service", "search_service", "genre_service",
                                 "account_service", "list_service"}
        assert isinstance(services["genre_service"], GenreService)
        assert isinstance(services["account_service"], AccountService)
        assert services["list_service"].session_id == "sess"
        assert services["movie_service"].client.config.uses_bearer_token
