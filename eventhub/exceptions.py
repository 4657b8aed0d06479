class ApiError(Exception):
    """Base class for errors that are reported to the client as {"message": ...}."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"message": self.message}


class ValidationError(ApiError):
    default_message = "Invalid input"


class MissingFieldsError(ValidationError):
    def __init__(self, fields, message=None):
        super().__init__(message or f"Please provide {', '.join(fields)}")
        self.fields = fields

    def to_dict(self):
        return {"message": self.message, "missing_fields": self.fields}


class AuthError(ApiError):
    default_message = "Invalid email or password"


class AuthorizationError(ApiError):
    status_code = 403
    default_message = "Access denied"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    default_message = "Already exists"


class CapacityError(ApiError):
    default_message = "Event is fully booked"


class StateError(ApiError):
    default_message = "Operation not allowed in the current state"


class ServerError(ApiError):
    status_code = 500
    default_message = "Internal server error"
