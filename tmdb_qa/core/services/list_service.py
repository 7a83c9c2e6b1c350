from typing import Optional

from ..interfaces import ListServiceInterface, TMDBResponse, TMDBClientInterface

class ListService(ListServiceInterface):
    """Service class for user list operations.

    Writes (create, add/remove item, clear, delete) need a v3 session. The
    ``session_id`` given at construction is sent with every write unless the
    caller passes its own ``session_id`` keyword.
    """

    base_path = "/list"

    def __init__(self, client: TMDBClientInterface, session_id: Optional[str] = None):
        self.client = client
        self.session_id = session_id

    def _write_params(self, params: dict) -> dict:
        if self.session_id and params.get("session_id") is None:
            return {**params, "session_id": self.session_id}
        return params

    def create_list(self, name: str, description: str = "", language: str = "en", **params) -> TMDBResponse:
        """Create a new list owned by the session's account"""
        body = {"name": name, "description": description, "language": language}
        return self.client.post(self.base_path, body, self._write_params(params))

    def get_list_details(self, list_id: int, **params) -> TMDBResponse:
        return self.client.get(f"{self.base_path}/{list_id}", params)

    def add_movie_to_list(self, list_id: int, media_id: int, **params) -> TMDBResponse:
        return self.client.post(f"{self.base_path}/{list_id}/add_item", {"media_id": media_id},
                                self._write_params(params))

    def remove_movie_from_list(self, list_id: int, media_id: int, **params) -> TMDBResponse:
        return self.client.post(f"{self.base_path}/{list_id}/remove_item", {"media_id": media_id},
                                self._write_params(params))

    def clear_list(self, list_id: int, confirm: bool = False, **params) -> TMDBResponse:
        """Remove every item; the API refuses unless confirm is true"""
        query = {"confirm": "true" if confirm else "false", **params}
        return self.client.post(f"{self.base_path}/{list_id}/clear", {}, self._write_params(query))

    def delete_list(self, list_id: int, **params) -> TMDBResponse:
        return self.client.delete(f"{self.base_path}/{list_id}", self._write_params(params))

    def check_movie_in_list(self, list_id: int, movie_id: int) -> TMDBResponse:
        """Check whether a movie is on the list (item_present)"""
        return self.client.get(f"{self.base_path}/{list_id}/item_status", {"movie_id": movie_id})
