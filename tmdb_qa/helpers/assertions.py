"""
Shape checks for TMDB response bodies.

Every helper is a pure function over data that has already been received.
A failed check raises ContractViolation naming the field and the
expectation that was not met.
"""

import re
from typing import Any, Callable, Collection, Iterable, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..core.exceptions import ContractViolation
from ..core.interfaces import TMDBResponse

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MOVIE_REQUIRED_FIELDS = (
    "id", "title", "overview", "release_date",
    "vote_average", "vote_count", "popularity",
)
CAST_MEMBER_REQUIRED_FIELDS = ("id", "name", "character", "order")
ACCOUNT_REQUIRED_FIELDS = ("id", "name", "username", "include_adult")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _expect_mapping(data: Any, field: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ContractViolation(field, "a JSON object", data)
    return data


def _expect_type(data: Mapping[str, Any], field: str, expected: type, label: str) -> Any:
    value = data[field]
    if expected is bool:
        ok = isinstance(value, bool)
    elif expected in (int, float):
        ok = _is_number(value) and (expected is float or isinstance(value, int))
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise ContractViolation(field, label, value)
    return value


def validate_response_status(response: TMDBResponse, expected_status: int) -> None:
    if response.status != expected_status:
        raise ContractViolation(
            "status",
            f"HTTP {int(expected_status)}",
            f"{response.status} {response.status_text}".strip(),
        )


def validate_status_in(response: TMDBResponse, allowed: Collection[int]) -> None:
    if response.status not in allowed:
        raise ContractViolation("status", f"one of {sorted(int(s) for s in allowed)}", response.status)


def validate_required_fields(data: Any, required_fields: Iterable[str]) -> None:
    data = _expect_mapping(data, "body")
    missing = [field for field in required_fields if field not in data]
    if missing:
        raise ContractViolation(", ".join(missing), "required field(s) present")


def validate_pagination_structure(data: Any) -> None:
    data = _expect_mapping(data, "body")
    validate_required_fields(data, ("page", "total_pages", "total_results"))
    page = _expect_type(data, "page", int, "an integer")
    total_pages = _expect_type(data, "total_pages", int, "an integer")
    total_results = _expect_type(data, "total_results", int, "an integer")
    if page < 1:
        raise ContractViolation("page", ">= 1", page)
    if total_pages < 0:
        raise ContractViolation("total_pages", ">= 0", total_pages)
    if total_results < 0:
        raise ContractViolation("total_results", ">= 0", total_results)


def validate_non_empty_array(array: Any, field_name: str = "results") -> None:
    if array is None:
        raise ContractViolation(field_name, "a non-empty list")
    if not isinstance(array, list):
        raise ContractViolation(field_name, "a list", array)
    if not array:
        raise ContractViolation(field_name, "at least one item", array)


def validate_numeric_range(value: Any, minimum: float, maximum: float, field_name: str = "value") -> None:
    if not _is_number(value):
        raise ContractViolation(field_name, "a number", value)
    if not minimum <= value <= maximum:
        raise ContractViolation(field_name, f"between {minimum} and {maximum}", value)


def validate_movie_structure(movie: Any) -> None:
    validate_required_fields(movie, MOVIE_REQUIRED_FIELDS)
    _expect_type(movie, "id", int, "an integer")
    _expect_type(movie, "title", str, "a string")
    validate_numeric_range(movie["vote_average"], 0, 10, "vote_average")


def validate_genre_structure(genre: Any) -> None:
    validate_required_fields(genre, ("id", "name"))
    _expect_type(genre, "id", int, "an integer")
    name = _expect_type(genre, "name", str, "a string")
    if not name:
        raise ContractViolation("name", "a non-empty string", name)


def validate_credits_structure(credits: Any) -> None:
    validate_required_fields(credits, ("cast", "crew"))
    _expect_type(credits, "cast", list, "a list")
    _expect_type(credits, "crew", list, "a list")


def validate_cast_member_structure(cast_member: Any) -> None:
    validate_required_fields(cast_member, CAST_MEMBER_REQUIRED_FIELDS)
    _expect_type(cast_member, "order", int, "an integer")


def validate_search_results_structure(search_results: Any) -> None:
    validate_pagination_structure(search_results)
    if "results" not in search_results:
        raise ContractViolation("results", "required field(s) present")
    results = _expect_type(search_results, "results", list, "a list")
    if search_results["total_results"] == 0 and results:
        raise ContractViolation("results", "an empty list when total_results is 0", len(results))


def validate_error_response(data: Any) -> None:
    validate_required_fields(data, ("status_message", "status_code"))
    _expect_type(data, "status_message", str, "a string")
    _expect_type(data, "status_code", int, "an integer")


def validate_status_acknowledgement(data: Any, allowed_codes: Optional[Collection[int]] = None,
                                    success: Optional[bool] = True) -> None:
    """Check the {success, status_code, status_message} body of a write call"""
    validate_required_fields(data, ("status_code", "status_message"))
    code = _expect_type(data, "status_code", int, "an integer")
    message = _expect_type(data, "status_message", str, "a string")
    if not message:
        raise ContractViolation("status_message", "a non-empty string", message)
    if allowed_codes is not None and code not in allowed_codes:
        raise ContractViolation("status_code", f"one of {sorted(int(c) for c in allowed_codes)}", code)
    if success is not None:
        if "success" not in data:
            raise ContractViolation("success", "required field(s) present")
        if data["success"] is not success:
            raise ContractViolation("success", repr(success), data["success"])


def validate_response_time(response: TMDBResponse, max_response_time: float = 5000) -> None:
    if response.duration >= max_response_time:
        raise ContractViolation("duration", f"< {max_response_time}ms", response.duration)


def validate_non_empty_string(value: Any, field_name: str) -> None:
    if value is None:
        raise ContractViolation(field_name, "a non-empty string")
    if not isinstance(value, str):
        raise ContractViolation(field_name, "a string", value)
    if not value:
        raise ContractViolation(field_name, "a non-empty string", value)


def validate_date_format(date_string: Any, field_name: str = "date") -> None:
    if not isinstance(date_string, str) or not DATE_PATTERN.match(date_string):
        raise ContractViolation(field_name, "a YYYY-MM-DD date", date_string)


def validate_array_items(array: Any, validation_function: Callable[[Any], None], field_name: str = "results") -> None:
    if not isinstance(array, list):
        raise ContractViolation(field_name, "a list", array)
    for item in array:
        validation_function(item)


def _validate_iso_code(account: Mapping[str, Any], field: str, upper: bool) -> None:
    value = account.get(field)
    if not value:
        return
    if not isinstance(value, str) or len(value) != 2:
        raise ContractViolation(field, "a two-letter code", value)
    if value != (value.upper() if upper else value.lower()):
        raise ContractViolation(field, "upper case" if upper else "lower case", value)


def validate_account_structure(account: Any) -> None:
    validate_required_fields(account, ACCOUNT_REQUIRED_FIELDS)
    _expect_type(account, "id", int, "an integer")
    _expect_type(account, "username", str, "a string")
    _expect_type(account, "include_adult", bool, "a boolean")

    avatar = account.get("avatar")
    if avatar:
        for key in ("gravatar", "tmdb"):
            if key not in avatar:
                raise ContractViolation(f"avatar.{key}", "required field(s) present")

    _validate_iso_code(account, "iso_639_1", upper=False)
    _validate_iso_code(account, "iso_3166_1", upper=True)


def validate_schema(data: Any, model: Type[BaseModel]) -> BaseModel:
    """Validate data against a pydantic model and return the parsed instance"""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "body"
        raise ContractViolation(location, f"{model.__name__}: {first['msg']}", first.get("input")) from e
