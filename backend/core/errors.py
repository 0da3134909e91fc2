"""Domain errors raised by the service layer.

Routes never build these into HTTP responses themselves; ``backend.main``
registers a single handler that maps each error to a status code.
"""

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateAccount(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "User already exists"):
        super().__init__(message)


class InvalidCredentials(ServiceError):
    # Same status as a bad request so account existence is never revealed.
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class NotFound(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class Forbidden(ServiceError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)
