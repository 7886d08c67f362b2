from fastapi import HTTPException


# Used for upstream 5xx, network failures and unreadable responses
class APIClientError(HTTPException):
    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=f"External API Error: {detail}")


# The provider explicitly confirmed the resource does not exist
class ResourceNotFoundError(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=404, detail=detail)


class ConfigurationError(RuntimeError):
    """Raised when a required credential or setting is missing. Never retried."""
