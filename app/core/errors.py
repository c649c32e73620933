"""Domain errors. Each one knows the HTTP status it maps to."""


class AppError(Exception):
    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class MalformedRequest(AppError):
    status_code = 400
    detail = "Malformed request"


class Unauthorized(AppError):
    status_code = 401
    detail = "Unauthorized"


class InvalidCredentials(Unauthorized):
    detail = "Invalid credentials"


class NotFound(AppError):
    status_code = 404
    detail = "Not found"


class TaskNotFound(NotFound):
    detail = "Task not found"


class UserNotFound(NotFound):
    detail = "User not found"


class DuplicateUsername(AppError):
    status_code = 409
    detail = "Username already exists"


class InternalFailure(AppError):
    pass
