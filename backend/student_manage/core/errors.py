"""Service exceptions.

Raised by the service layer and converted to plain text HTTP responses
by the handlers registered in ``student_manage.main``.
"""


class ServiceError(Exception):
    """Base service exception."""

    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class ValidationError(ServiceError):
    """Bad input or a violated unique key."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(ServiceError):
    """No matching record."""

    status_code = 404
    default_message = "Not found"


class AuthenticationError(ServiceError):
    """Unknown user or wrong password.

    Reported as 400 since no token scheme exists to make 401 meaningful.
    """

    status_code = 400
    default_message = "Invalid credentials"


class InvalidDueDate(ValidationError):
    default_message = "Invalid date format. Please use YYYY-MM-DD."


class DuplicateIdentifier(ValidationError):
    default_message = (
        "Unique number already exists. Please provide a different unique number "
        "or omit it to auto-generate."
    )


class DuplicateEmail(ValidationError):
    default_message = "Email already registered"


class AssignmentNotFound(NotFoundError):
    default_message = "Assignment not found"


class UserNotFound(AuthenticationError):
    default_message = "User not found"


class InvalidCredentials(AuthenticationError):
    default_message = "Invalid credentials"
