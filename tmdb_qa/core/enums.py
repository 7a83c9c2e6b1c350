from enum import Enum, IntEnum
from typing import Dict, Set, Type

class MovieGenre(IntEnum):
    """TMDB Movie Genres - https://developer.themoviedb.org/reference/genre-movie-list"""
    ACTION = 28
    ADVENTURE = 12
    ANIMATION = 16
    COMEDY = 35
    CRIME = 80
    DOCUMENTARY = 99
    DRAMA = 18
    FAMILY = 10751
    FANTASY = 14
    HISTORY = 36
    HORROR = 27
    MUSIC = 10402
    MYSTERY = 9648
    ROMANCE = 10749
    SCIENCE_FICTION = 878
    TV_MOVIE = 10770
    THRILLER = 53
    WAR = 10752
    WESTERN = 37

class TVGenre(IntEnum):
    """TMDB TV Genres - https://developer.themoviedb.org/reference/genre-tv-list"""
    ACTION_ADVENTURE = 10759
    ANIMATION = 16
    COMEDY = 35
    CRIME = 80
    DOCUMENTARY = 99
    DRAMA = 18
    FAMILY = 10751
    KIDS = 10762
    MYSTERY = 9648
    NEWS = 10763
    REALITY = 10764
    SCIENCE_FICTION_FANTASY = 10765
    SOAP = 10766
    TALK = 10767
    WAR_POLITICS = 10768
    WESTERN = 37

class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"

class TMDBStatusCode(IntEnum):
    """TMDB application status codes - https://developer.themoviedb.org/docs/errors"""
    SUCCESS = 1
    INVALID_SERVICE = 2
    AUTHENTICATION_FAILED = 3
    INVALID_FORMAT = 4
    INVALID_PARAMETERS = 5
    INVALID_ID = 6
    INVALID_API_KEY = 7
    DUPLICATE_ENTRY = 8
    SERVICE_OFFLINE = 9
    SUSPENDED_API_KEY = 10
    INTERNAL_ERROR = 11
    ITEM_UPDATED_SUCCESSFULLY = 12
    ITEM_DELETED_SUCCESSFULLY = 13
    AUTHENTICATION_FAILED_ALT = 14
    FAILED = 15
    DEVICE_DENIED = 16
    SESSION_DENIED = 17
    VALIDATION_FAILED = 18
    INVALID_DATE_RANGE = 19
    ENTRY_NOT_FOUND = 20
    INVALID_PAGE = 22
    INVALID_DATE = 23
    REQUEST_TIMEOUT = 24
    REQUEST_COUNT_EXCEEDED = 25
    USERNAME_PASSWORD_REQUIRED = 26
    TOO_MANY_APPEND_REQUESTS = 27
    INVALID_TIMEZONE = 28
    CONFIRMATION_REQUIRED = 29
    INVALID_USERNAME_PASSWORD = 30
    ACCOUNT_DISABLED = 31
    EMAIL_NOT_VERIFIED = 32
    INVALID_REQUEST_TOKEN = 33
    RESOURCE_NOT_FOUND = 34

GENRE_ENUMS = {
    MediaType.MOVIE: MovieGenre,
    MediaType.TV: TVGenre,
}

class GenreHelper:
    """Genre lookups keyed by media type; persons have no genres"""

    @staticmethod
    def _enum_for(media_type) -> Type[IntEnum]:
        return GENRE_ENUMS[MediaType(media_type)]

    @staticmethod
    def label(genre: IntEnum) -> str:
        return genre.name.replace('_', ' ').title()

    @classmethod
    def genre_name(cls, genre_id: int, media_type=MediaType.MOVIE) -> str:
        try:
            return cls.label(cls._enum_for(media_type)(genre_id))
        except ValueError:
            return "Unknown"

    @classmethod
    def genre_ids(cls, media_type=MediaType.MOVIE) -> Set[int]:
        """Every genre id the API lists for the media type"""
        return {genre.value for genre in cls._enum_for(media_type)}

    @classmethod
    def as_table(cls, media_type=MediaType.MOVIE) -> Dict[str, int]:
        """{NAME: id} table, the shape TestDataProvider exposes"""
        return {genre.name: genre.value for genre in cls._enum_for(media_type)}
