"""Errors raised while talking to the image API."""


class NetworkError(Exception):
    """Base error for failed image fetches."""


class TransportError(NetworkError):
    """The request never produced a response."""


class BadResponseError(NetworkError):
    """The server answered with a non-success status code."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected status code {status_code}")
        self.status_code = status_code


class DecodeError(NetworkError):
    """The response body is not a list of image records."""
