from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Union

from ..helpers.assertions import DATE_PATTERN

class TMDBModel(BaseModel):
    """Base for TMDB payload schemas; no type coercion, extra fields allowed"""
    model_config = ConfigDict(strict=True, extra="allow")

# TMDB Response Schemas
class TMDBMovie(TMDBModel):
    """TMDB Movie data structure"""
    id: int
    title: str
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = Field(..., ge=0, le=10)
    vote_count: int = Field(..., ge=0)
    genre_ids: Optional[List[int]] = None
    popularity: float = Field(..., ge=0)

    @field_validator("release_date")
    @classmethod
    def validate_release_date(cls, v):
        # unreleased titles carry an empty string
        if v and not DATE_PATTERN.match(v):
            raise ValueError("release_date must be YYYY-MM-DD")
        return v

class TMDBRatedMovie(TMDBMovie):
    """Movie entry of the account's rated list"""
    rating: float = Field(..., ge=0.5, le=10)

class TMDBGenre(TMDBModel):
    """TMDB Genre data structure"""
    id: int
    name: str = Field(..., min_length=1)

class TMDBGenreList(TMDBModel):
    genres: List[TMDBGenre]

class TMDBPaginated(TMDBModel):
    """Paginated wrapper shared by list endpoints"""
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    total_results: int = Field(..., ge=0)
    results: list

class TMDBMoviePage(TMDBPaginated):
    results: List[TMDBMovie]

class TMDBCastMember(TMDBModel):
    id: int
    name: str
    character: Optional[str] = None
    order: int

class TMDBCredits(TMDBModel):
    id: Optional[int] = None
    cast: List[TMDBCastMember]
    crew: list

class TMDBAccount(TMDBModel):
    """TMDB account details"""
    id: int = Field(..., gt=0)
    name: str
    username: str = Field(..., min_length=1)
    include_adult: bool
    iso_639_1: Optional[str] = Field(None, min_length=2, max_length=2)
    iso_3166_1: Optional[str] = Field(None, min_length=2, max_length=2)
    avatar: Optional[dict] = None

class TMDBErrorResponse(TMDBModel):
    """Error body returned with 4xx/5xx statuses"""
    success: Optional[bool] = None
    status_code: int
    status_message: str

class TMDBStatusResponse(TMDBModel):
    """Acknowledgement returned by write endpoints"""
    success: Optional[bool] = None
    status_code: int
    status_message: str = Field(..., min_length=1)

class TMDBListCreated(TMDBStatusResponse):
    list_id: int

class TMDBListDetails(TMDBModel):
    id: Union[int, str]
    name: str
    description: Optional[str] = None
    item_count: int = Field(..., ge=0)
    items: list = []

class TMDBItemStatus(TMDBModel):
    id: Optional[Union[int, str]] = None
    item_present: bool
