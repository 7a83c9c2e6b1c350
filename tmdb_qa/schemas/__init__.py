from .tmdb import (
    TMDBAccount,
    TMDBCredits,
    TMDBErrorResponse,
    TMDBGenreList,
    TMDBItemStatus,
    TMDBListCreated,
    TMDBListDetails,
    TMDBMovie,
    TMDBMoviePage,
    TMDBPaginated,
    TMDBRatedMovie,
    TMDBStatusResponse,
)
