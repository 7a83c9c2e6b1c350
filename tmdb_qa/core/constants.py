from http import HTTPStatus

from .enums import MediaType, TMDBStatusCode

class TMDBConstants:
    """Status tables shared by the scenarios"""

    HTTP_STATUS = {
        "OK": HTTPStatus.OK,
        "CREATED": HTTPStatus.CREATED,
        "ACCEPTED": HTTPStatus.ACCEPTED,
        "NO_CONTENT": HTTPStatus.NO_CONTENT,
        "BAD_REQUEST": HTTPStatus.BAD_REQUEST,
        "UNAUTHORIZED": HTTPStatus.UNAUTHORIZED,
        "FORBIDDEN": HTTPStatus.FORBIDDEN,
        "NOT_FOUND": HTTPStatus.NOT_FOUND,
        "METHOD_NOT_ALLOWED": HTTPStatus.METHOD_NOT_ALLOWED,
        "CONFLICT": HTTPStatus.CONFLICT,
        "UNPROCESSABLE_ENTITY": HTTPStatus.UNPROCESSABLE_ENTITY,
        "TOO_MANY_REQUESTS": HTTPStatus.TOO_MANY_REQUESTS,
        "INTERNAL_SERVER_ERROR": HTTPStatus.INTERNAL_SERVER_ERROR,
        "BAD_GATEWAY": HTTPStatus.BAD_GATEWAY,
        "SERVICE_UNAVAILABLE": HTTPStatus.SERVICE_UNAVAILABLE,
        "GATEWAY_TIMEOUT": HTTPStatus.GATEWAY_TIMEOUT,
    }

    STATUS_CODES = TMDBStatusCode

    # Writes answer 200 or 201 depending on whether the item already existed
    WRITE_HTTP_STATUSES = (HTTPStatus.OK, HTTPStatus.CREATED)

    VALID_STATUS_CODES = {
        "ADD_OPERATION": (
            TMDBStatusCode.SUCCESS,
            TMDBStatusCode.ITEM_UPDATED_SUCCESSFULLY,
        ),
        "REMOVE_OPERATION": (
            TMDBStatusCode.SUCCESS,
            TMDBStatusCode.ITEM_DELETED_SUCCESSFULLY,
        ),
        "GENERAL_SUCCESS": (
            TMDBStatusCode.SUCCESS,
        ),
    }

    MEDIA_TYPES = MediaType

    SORT_OPTIONS = {
        "CREATED_AT_ASC": "created_at.asc",
        "CREATED_AT_DESC": "created_at.desc",
    }

    _DESCRIPTIONS = {
        TMDBStatusCode.SUCCESS: "Success",
        TMDBStatusCode.ITEM_UPDATED_SUCCESSFULLY: "Item updated successfully (already exists)",
        TMDBStatusCode.ITEM_DELETED_SUCCESSFULLY: "Item deleted successfully (already removed)",
    }

    @classmethod
    def is_add_operation_success(cls, status_code: int) -> bool:
        return status_code in cls.VALID_STATUS_CODES["ADD_OPERATION"]

    @classmethod
    def is_remove_operation_success(cls, status_code: int) -> bool:
        return status_code in cls.VALID_STATUS_CODES["REMOVE_OPERATION"]

    @classmethod
    def get_status_code_description(cls, status_code: int) -> str:
        return cls._DESCRIPTIONS.get(status_code, f"Unknown status code: {status_code}")
