class TextFileError(Exception):
    """Base class for failures that map onto an HTTP status."""

    status_code = 500
    reason = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(TextFileError):
    status_code = 400
    reason = "Bad Request"


class NotFoundError(TextFileError):
    status_code = 404
    reason = "Not Found"


class InternalError(TextFileError):
    status_code = 500
    reason = "Internal Server Error"


class MethodError(TextFileError):
    status_code = 405
    reason = "Method Not Allowed"


class RouteError(TextFileError):
    status_code = 404
    reason = "Not Found"
