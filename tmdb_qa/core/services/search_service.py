from ..interfaces import SearchServiceInterface, TMDBResponse, TMDBClientInterface

class SearchService(SearchServiceInterface):
    """Service class for search operations"""

    base_path = "/search"

    def __init__(self, client: TMDBClientInterface):
        self.client = client

    def _search(self, kind: str, query: str, params: dict) -> TMDBResponse:
        # query always leads the query string
        return self.client.get(f"{self.base_path}/{kind}", {"query": query, **params})

    def search_movies(self, query: str, **params) -> TMDBResponse:
        """Search movies by query"""
        return self._search("movie", query, params)

    def search_tv_shows(self, query: str, **params) -> TMDBResponse:
        """Search TV shows by query"""
        return self._search("tv", query, params)

    def search_people(self, query: str, **params) -> TMDBResponse:
        """Search persons by query"""
        return self._search("person", query, params)

    def multi_search(self, query: str, **params) -> TMDBResponse:
        """Search movies, TV shows and people in one request"""
        return self._search("multi", query, params)

    def search_collections(self, query: str, **params) -> TMDBResponse:
        return self._search("collection", query, params)

    def search_keywords(self, query: str, **params) -> TMDBResponse:
        return self._search("keyword", query, params)

    def search_companies(self, query: str, **params) -> TMDBResponse:
        return self._search("company", query, params)
