"""Blocking and non-blocking client for the newsapi.org top headlines route."""

from __future__ import annotations

import asyncio
import json
import logging
import ssl
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

import aiohttp
import certifi
import requests

from .exceptions import (
    ArticleParseFailed,
    AsyncRequestFailed,
    BadRequest,
    FailedResponseToString,
    RequestFailed,
    UrlParsingFailed,
)
from .models import Article, Country, Endpoint, NewsAPIResponse

BASE_URL = "https://newsapi.org/v2"
DEFAULT_TIMEOUT = 15.0
# The API rejects anonymous async requests with code "userAgentMissing".
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/105.0.0.0 Safari/537.36"
)

_ERROR_MESSAGES = {
    "apiKeyDisabled": "Your API key has been disabled",
}
_UNKNOWN_ERROR = "Unknown error"

logger = logging.getLogger(__name__)


class NewsAPI:
    """Request configuration plus the two transports.

    Setters return the instance so calls can be chained::

        api = NewsAPI(key).set_endpoint(Endpoint.TOP_HEADLINES).set_country(Country.GB)
        response = api.fetch()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.user_agent = user_agent
        self.endpoint = Endpoint.TOP_HEADLINES
        self.country = Country.US
        self.logger = logging.getLogger(self.__class__.__name__)

    def set_endpoint(self, endpoint: Endpoint) -> "NewsAPI":
        self.endpoint = endpoint
        return self

    def set_country(self, country: Country) -> "NewsAPI":
        self.country = country
        return self

    def prepare_url(self) -> str:
        """Return `<base>/<endpoint>?country=<code>`."""
        try:
            parts = urlsplit(self.base_url)
        except ValueError as exc:
            raise UrlParsingFailed(f"URL parsing failed: {exc}") from exc
        if not parts.scheme or not parts.netloc:
            raise UrlParsingFailed(f"URL parsing failed: {self.base_url!r} is not an absolute URL")

        path = f"{parts.path.rstrip('/')}/{quote(str(self.endpoint))}"
        query = urlencode({"country": str(self.country)})
        return urlunsplit((parts.scheme, parts.netloc, path, query, ""))

    def fetch(self) -> NewsAPIResponse:
        """Fetch headlines, blocking the calling thread."""
        url = self.prepare_url()
        headers = {"Authorization": self.api_key}
        self.logger.info("GET %s", url)
        try:
            resp = requests.get(url, headers=headers, timeout=self.timeout, stream=True)
        except requests.RequestException as exc:
            self.logger.error("Request to %s failed: %s", url, exc)
            raise RequestFailed() from exc

        with resp:
            self.logger.debug("Response status %s from %s", resp.status_code, url)
            try:
                body = resp.text
            except requests.RequestException as exc:
                raise FailedResponseToString() from exc
        return decode_response(body)

    async def fetch_async(self, session: Optional[aiohttp.ClientSession] = None) -> NewsAPIResponse:
        """Fetch headlines without blocking the event loop.

        A short-lived session is opened when `session` is not given.
        """
        url = self.prepare_url()
        headers = {
            "Authorization": self.api_key,
            "User-Agent": self.user_agent,
        }
        if session is not None:
            return await self._get_async(session, url, headers)

        connector = aiohttp.TCPConnector(ssl=ssl.create_default_context(cafile=certifi.where()))
        async with aiohttp.ClientSession(connector=connector) as own_session:
            return await self._get_async(own_session, url, headers)

    async def _get_async(
        self, session: aiohttp.ClientSession, url: str, headers: Dict[str, str]
    ) -> NewsAPIResponse:
        self.logger.info("GET %s", url)
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        try:
            async with session.get(url, headers=headers, timeout=timeout) as resp:
                self.logger.debug("Response status %s from %s", resp.status, url)
                try:
                    body = await resp.text()
                except (aiohttp.ClientError, UnicodeDecodeError) as exc:
                    raise FailedResponseToString() from exc
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            self.logger.error("Request to %s failed: %s", url, exc)
            raise AsyncRequestFailed() from exc
        return decode_response(body)


def decode_response(body: str) -> NewsAPIResponse:
    """
    Decode a raw body into a response envelope.

    The API answers some logical errors with HTTP 200, so `status` is checked
    here independently of the transport outcome.
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ArticleParseFailed() from exc

    if not isinstance(data, dict):
        raise ArticleParseFailed("Article parsing failed: expected a JSON object")
    status = data.get("status")
    if not isinstance(status, str):
        raise ArticleParseFailed("Article parsing failed: missing 'status'")
    code = data.get("code")
    if code is not None and not isinstance(code, str):
        raise ArticleParseFailed("Article parsing failed: 'code' is not a string")

    if status != "ok":
        logger.warning("API reported status=%s code=%s message=%s", status, code, data.get("message"))
        raise map_response_err(code)

    raw_articles = data.get("articles")
    if not isinstance(raw_articles, list):
        raise ArticleParseFailed("Article parsing failed: missing 'articles'")
    articles = tuple(_to_article(a) for a in raw_articles)
    return NewsAPIResponse(status=status, code=code, articles=articles)


def _to_article(raw: Any) -> Article:
    if not isinstance(raw, dict):
        raise ArticleParseFailed("Article parsing failed: article is not an object")
    title = raw.get("title")
    url = raw.get("url")
    description = raw.get("description")
    if not isinstance(title, str) or not isinstance(url, str):
        raise ArticleParseFailed("Article parsing failed: article lacks title/url")
    if description is not None and not isinstance(description, str):
        raise ArticleParseFailed("Article parsing failed: description is not a string")
    return Article(title=title, url=url, description=description)


def map_response_err(code: Optional[str]) -> BadRequest:
    """Translate an API error code into a BadRequest with a readable reason."""
    if code is None:
        return BadRequest(_UNKNOWN_ERROR)
    return BadRequest(_ERROR_MESSAGES.get(code, _UNKNOWN_ERROR))
