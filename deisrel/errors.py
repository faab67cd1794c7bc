"""Errors surfaced by the changelog flow."""


class TransportError(RuntimeError):
    """Raised when the remote comparison call cannot complete."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize TransportError.

        Args:
            message: Human readable description of the failure
            status_code: HTTP status code returned by the API, if any
        """
        super().__init__(message)
        self.status_code = status_code
