"""Errors raised by the Ollama client."""

UNKNOWN_ERROR = "unknown error"


class OllamaError(Exception):
    """Base class for everything the client raises."""

    pass


class RequestFailedError(OllamaError):
    """A request did not produce a usable response."""

    pass


class TransportError(RequestFailedError):
    """Connection refused, DNS failure, timeout or unusable URL."""

    pass


class HTTPStatusError(RequestFailedError):
    """Server answered with a status other than 200."""

    def __init__(self, status_code: int, reason: str = "", detail: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        self.detail = detail
        message = f"HTTP request failed: {reason} ({status_code})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ServerError(RequestFailedError):
    """Server answered 200 but the body carries an ``error`` field."""

    def __init__(self, message: str = UNKNOWN_ERROR) -> None:
        self.message = message
        super().__init__(message)


class ParseError(RequestFailedError):
    """Response body is not valid JSON."""

    pass
