import time
import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

import requests
from requests.models import PreparedRequest

from ..helpers import assertions
from .exceptions import TMDBError
from .interfaces import TMDBClientInterface, TMDBResponse, TMDBConfig

logger = logging.getLogger(__name__)

_NO_BODY = object()

def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)

class TMDBClient(TMDBClientInterface):
    """Concrete implementation of TMDB client.

    Every call opens its own ``requests.Session`` and closes it before
    returning, so no connection state is shared between calls or between
    services holding the same client.
    """

    def __init__(self, config: TMDBConfig, session_factory: Callable[[], requests.Session] = requests.Session):
        self.config = config
        self.session_factory = session_factory
        self.default_headers = self._build_default_headers()

    def _build_default_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if self.config.read_access_token:
            headers["Authorization"] = f"Bearer {self.config.read_access_token}"
        return headers

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Default headers with per-call headers merged on top"""
        merged = dict(self.default_headers)
        if headers:
            merged.update(headers)
        return merged

    def _query_pairs(self, query_params: Optional[Mapping[str, Any]]) -> List[Tuple[str, Any]]:
        pairs: List[Tuple[str, Any]] = []
        # api_key only when there is no bearer token
        if self.config.api_key and not self.config.read_access_token:
            pairs.append(("api_key", self.config.api_key))
        for key, value in (query_params or {}).items():
            if value is None:
                continue
            pairs.append((key, value))
        return pairs

    def build_url(self, endpoint: str, query_params: Optional[Mapping[str, Any]] = None) -> str:
        """Join base URL and endpoint and append the query string"""
        base_url = self.config.base_url.rstrip("/")
        path = endpoint.lstrip("/")
        prepared = PreparedRequest()
        prepared.prepare_url(f"{base_url}/{path}", self._query_pairs(query_params))
        return prepared.url

    def get(self, endpoint: str, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        return self._request("GET", endpoint, query_params, headers)

    def post(self, endpoint: str, body: Any = None, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        return self._request("POST", endpoint, query_params, headers, {} if body is None else body)

    def put(self, endpoint: str, body: Any = None, query_params: Dict = None, headers: Dict = None) -> TMDBResponse:
        return self._request("PUT", endpoint, query_params, headers, {} if body is None else body)

    def delete(self, endpoint: str, query_params: Dict = None, headers: Dict = None, body: Any = None) -> TMDBResponse:
        return self._request("DELETE", endpoint, query_params, headers, _NO_BODY if body is None else body)

    def _request(self, method: str, endpoint: str, query_params: Optional[Mapping[str, Any]],
                 headers: Optional[Mapping[str, str]], body: Any = _NO_BODY) -> TMDBResponse:
        """Perform one HTTP round trip and wrap the result"""
        kwargs: Dict[str, Any] = {
            "headers": self.build_headers(headers),
            "timeout": self.config.timeout,
        }
        if body is not _NO_BODY:
            kwargs["json"] = body

        logger.info(f"Making {method} request to: {endpoint}")
        with self.session_factory() as session:
            start = time.perf_counter()
            try:
                # a malformed base URL fails here, as a transport failure
                url = self.build_url(endpoint, query_params)
                response = session.request(method, url, **kwargs)
            except requests.exceptions.RequestException as e:
                duration = _elapsed_ms(start)
                logger.error(f"{method} {endpoint} failed after {duration:.0f}ms: {str(e)}")
                raise TMDBError(
                    f"{method} {endpoint} failed after {duration:.0f}ms: {str(e)}",
                    method=method,
                    endpoint=endpoint,
                    duration=duration,
                ) from e
            duration = _elapsed_ms(start)
            data = self._parse_response(response)

        if not response.ok:
            logger.info(f"{method} {endpoint} returned {response.status_code} in {duration:.0f}ms")
        return TMDBResponse(
            status=response.status_code,
            status_text=response.reason or "",
            headers=response.headers,
            data=data,
            duration=duration,
        )

    @staticmethod
    def _parse_response(response: requests.Response) -> Any:
        content_type = response.headers.get("content-type") or ""
        if "application/json" in content_type:
            try:
                return response.json()
            except ValueError as e:
                logger.error(f"Failed to parse JSON response: {str(e)}")
                return response.text
        return response.text

    def validate_status(self, response: TMDBResponse, expected_status: int) -> None:
        assertions.validate_response_status(response, expected_status)

    def validate_required_fields(self, data: Mapping[str, Any], required_fields: Iterable[str]) -> None:
        assertions.validate_required_fields(data, required_fields)
