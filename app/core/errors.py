# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class AppError(Exception):
    """Base for errors that map onto a client-facing status code."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """A required field is missing or empty."""
    status_code = 400


class NotFoundError(AppError):
    """No row matches the requested id."""
    status_code = 404

    def __init__(self, resource: str):
        super().__init__(f"{resource} not found")
        self.resource = resource
