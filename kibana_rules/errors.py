"""Errors raised by the detection rules client.

Three kinds are distinguished so callers can branch on ``kind`` (or on the
exception class) instead of parsing messages:

- ``TransportError``: no status code was obtained (connection, TLS, timeout).
- ``APIError``: the API answered with a non-success status.
- ``DecodeError``: a success response body did not have the expected shape.
"""


class KibanaError(Exception):
    """Base class for every error raised by the client."""

    kind: str = "unknown"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(KibanaError):
    """The request never produced an HTTP status."""

    kind = "transport"


class APIError(KibanaError):
    """The API returned a status outside the success range."""

    kind = "api"

    def __init__(self, step: str, status_code: int, body: bytes):
        self.step = step
        self.status_code = status_code
        self.body = body
        text = body.decode("utf-8", errors="replace")
        super().__init__(f"{step}; API status code = {status_code}; response body = {text}")


class DecodeError(KibanaError):
    """A successful response body could not be decoded."""

    kind = "decode"
