"""Custom exception classes for Stagecraft."""


class StagecraftError(Exception):
    """Base exception for Stagecraft."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(StagecraftError):
    """Resource not found."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            "NOT_FOUND",
            f"{resource} '{resource_id}' not found",
            status_code=404,
        )


class InvalidContextError(StagecraftError):
    """Template context does not pair every database with its environment."""

    def __init__(self, message: str, details=None):
        super().__init__("INVALID_CONTEXT", message, details, status_code=400)


class MissingReferenceError(StagecraftError):
    """A record lacks a nested reference the template needs."""

    def __init__(self, resource: str, resource_id: str, reference: str):
        super().__init__(
            "MISSING_REFERENCE",
            f"{resource} '{resource_id}' has no {reference}",
            details={"resource": resource, "resource_id": resource_id, "reference": reference},
            status_code=422,
        )
