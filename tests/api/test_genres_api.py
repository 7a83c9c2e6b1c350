import pytest

from tmdb_qa.core.enums import GenreHelper, MediaType
from tmdb_qa.helpers import assertions
from tmdb_qa.helpers.test_data import TestDataProvider
from tmdb_qa.schemas import TMDBGenreList

pytestmark = pytest.mark.live


def test_tc11_movie_genres(genres_service):
    response = genres_service.get_movie_genres()

    assertions.validate_response_status(response, TestDataProvider.HTTP_STATUS["OK"])
    assert "genres" in response.data
    assertions.validate_non_empty_array(response.data["genres"], "genres")
    assertions.validate_array_items(response.data["genres"], assertions.validate_genre_structure, "genres")

    genre_ids = {genre["id"] for genre in response.data["genres"]}
    assert TestDataProvider.GENRES["ACTION"] in genre_ids
    assert TestDataProvider.GENRES["COMEDY"] in genre_ids
    assert GenreHelper.genre_ids(MediaType.MOVIE) <= genre_ids


def test_tc12_tv_genres(genres_service):
    response = genres_service.get_tv_genres()

    assertions.validate_response_status(response, TestDataProvider.HTTP_STATUS["OK"])
    assert "genres" in response.data
    assertions.validate_non_empty_array(response.data["genres"], "genres")
    assertions.validate_array_items(response.data["genres"], assertions.validate_genre_structure, "genres")
    assertions.validate_schema(response.data, TMDBGenreList)

    genre_ids = {genre["id"] for genre in response.data["genres"]}
    assert GenreHelper.genre_ids(MediaType.TV) <= genre_ids
