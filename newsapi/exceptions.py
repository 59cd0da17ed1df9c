"""Errors raised by the news API client."""


class NewsApiError(Exception):
    """Base class for every failure of a single fetch."""

    message = "News API request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class RequestFailed(NewsApiError):
    """Network level failure: DNS, refused connection, timeout, TLS."""

    message = "Failed fetching articles"


class AsyncRequestFailed(RequestFailed):
    message = "Async request failed"


class FailedResponseToString(NewsApiError):
    """The response body could not be read."""

    message = "Failed converting response to string"


class ArticleParseFailed(NewsApiError):
    """The body is not JSON or does not have the response shape."""

    message = "Article parsing failed"


class UrlParsingFailed(NewsApiError):
    message = "URL parsing failed"


class BadRequest(NewsApiError):
    """The API answered but reported a failure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Request failed: {reason}")
