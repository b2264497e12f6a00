"""
Error types raised by the services and rendered by the API layer.
"""


class ApiError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    status_code = 400


class UnauthorizedError(ApiError):
    status_code = 401


class NotFoundError(ApiError):
    status_code = 404


class ConflictError(ApiError):
    """The target bed or record changed state under the request."""
    status_code = 409


class ServiceError(ApiError):
    status_code = 500


TITLES = {
    400: "Bad Request",
    401: "Unauthorized",
    404: "Not Found",
    409: "Conflict",
}


def title_for(status_code: int) -> str:
    """Return the error title shown for a status code."""
    return TITLES.get(status_code, "Internal Server Error")
