class ApiError(Exception):
    """Base for errors that map onto a JSON error response."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"error": self.message}


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class ValidationError(ApiError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, details=None, fields=None, message=None):
        super().__init__(message)
        self.details = list(details or [])
        self.fields = dict(fields or {})

    def to_dict(self):
        payload = super().to_dict()
        payload["details"] = self.details
        if self.fields:
            payload["fields"] = self.fields
        return payload


class Unauthorized(ApiError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class Conflict(ApiError):
    status_code = 409
    default_message = "Conflict"


class StorageError(ApiError):
    status_code = 503
    default_message = "Media storage is unavailable"
