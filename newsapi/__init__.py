"""Client package for the newsapi.org REST API."""

from .client import NewsAPI, BASE_URL, decode_response, map_response_err
from .exceptions import (
    NewsApiError,
    RequestFailed,
    AsyncRequestFailed,
    FailedResponseToString,
    ArticleParseFailed,
    UrlParsingFailed,
    BadRequest,
)
from .models import Article, Country, Endpoint, NewsAPIResponse

__all__ = [
    "NewsAPI",
    "BASE_URL",
    "decode_response",
    "map_response_err",
    "NewsApiError",
    "RequestFailed",
    "AsyncRequestFailed",
    "FailedResponseToString",
    "ArticleParseFailed",
    "UrlParsingFailed",
    "BadRequest",
    "Article",
    "Country",
    "Endpoint",
    "NewsAPIResponse",
]
