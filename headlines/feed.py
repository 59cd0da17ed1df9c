"""Turn API articles into display cards and deliver them to the app."""

from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from newsapi import Article, NewsAPI, NewsApiError

logger = logging.getLogger(__name__)

MISSING_DESCRIPTION = "..."


@dataclass(frozen=True)
class NewsCardData:
    title: str
    desc: str
    url: str

    @classmethod
    def from_article(cls, article: Article) -> "NewsCardData":
        return cls(
            title=article.title,
            desc=article.description if article.description is not None else MISSING_DESCRIPTION,
            url=article.url,
        )


@dataclass(frozen=True)
class ApiKeySet:
    api_key: str


@dataclass(frozen=True)
class RefreshHit:
    requested: bool = True


@dataclass(frozen=True)
class Quit:
    """Sent when the window closes; ends the worker loop."""


ClientFactory = Callable[[str], NewsAPI]


def fetch_news(api_key: str, articles: List[NewsCardData], client_factory: ClientFactory = NewsAPI) -> None:
    """
    Fetch once and append a card per article, in API order.

    Errors are logged and swallowed: the caller just sees no new cards.
    """
    try:
        response = client_factory(api_key).fetch()
    except NewsApiError as exc:
        logger.error("Failed fetching news: %s", exc)
        return
    for a in response.articles:
        articles.append(NewsCardData.from_article(a))
    logger.info("Fetched %d articles", len(response.articles))


class FetchWorker:
    """Background fetcher streaming cards over `news_tx`.

    The credential is captured by value at construction; later changes only
    arrive through `ApiKeySet` messages on `app_rx`.
    """

    def __init__(
        self,
        api_key: str,
        news_tx: "queue.Queue[NewsCardData]",
        app_rx: "queue.Queue[object]",
        client_factory: ClientFactory = NewsAPI,
    ) -> None:
        self.api_key = api_key
        self.news_tx = news_tx
        self.app_rx = app_rx
        self.client_factory = client_factory
        self.logger = logging.getLogger(self.__class__.__name__)

    def start(self) -> threading.Thread:
        thread = threading.Thread(target=self.run, name="headlines-fetch", daemon=True)
        thread.start()
        return thread

    def run(self) -> None:
        if self.api_key:
            self._fetch()
        while True:
            msg = self.app_rx.get()
            if isinstance(msg, Quit):
                self.logger.info("Fetch worker stopping")
                return
            if isinstance(msg, ApiKeySet):
                self.api_key = msg.api_key
                self._fetch()
            elif isinstance(msg, RefreshHit):
                if not self.api_key:
                    self.logger.warning("Refresh requested before an API key was set")
                    continue
                self._fetch()
            else:
                self.logger.warning("Ignoring unknown message %r", msg)

    def _fetch(self) -> None:
        cards: List[NewsCardData] = []
        fetch_news(self.api_key, cards, self.client_factory)
        for card in cards:
            self.news_tx.put(card)


def drain(news_rx: Optional["queue.Queue[NewsCardData]"]) -> List[NewsCardData]:
    """Non-blocking poll of everything currently waiting on the channel."""
    received: List[NewsCardData] = []
    if news_rx is None:
        return received
    while True:
        try:
            received.append(news_rx.get_nowait())
        except queue.Empty:
            if not received:
                logger.debug("No news waiting on the channel")
            return received
