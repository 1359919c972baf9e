from typing import Optional


class ApiError(Exception):
    """Request-terminating error rendered as {"error": ..., "details": ...}."""

    def __init__(self, status_code: int, error: str, details: Optional[str] = None) -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
