class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    """Invalid room data. Reported as a failed write unless a caller picks another status."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class StorageError(CustomBaseError):
    """Room store unavailable or a write failed. Detail stays in the logs."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


class SinkError(CustomBaseError):
    """Activity log append failed. Never surfaced to API callers."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 502)
