"""State of the headlines window: settings, article list and actions."""

from __future__ import annotations

import logging
import queue
import threading
from typing import List, Optional

from newsapi import NewsAPI

from .config import HeadlinesConfig, load_config, store_config
from .feed import ApiKeySet, ClientFactory, FetchWorker, NewsCardData, Quit, RefreshHit, drain, fetch_news
from .render import render_frame


class Headlines:
    """
    App state owned by the UI thread.

    In deferred mode (default) a single background worker fetches and streams
    cards over `news_rx`; each `update()` drains it without blocking. In
    immediate mode fetches run synchronously on the calling thread.
    """

    def __init__(
        self,
        config_path: str,
        *,
        deferred: bool = True,
        client_factory: ClientFactory = NewsAPI,
    ) -> None:
        self.config_path = config_path
        self.config: HeadlinesConfig = load_config(config_path)
        self.api_key_initialized = bool(self.config.api_key)
        self.articles: List[NewsCardData] = []
        self.deferred = deferred
        self.client_factory = client_factory
        self.news_rx: Optional["queue.Queue[NewsCardData]"] = None
        self.app_tx: Optional["queue.Queue[object]"] = None
        self.worker_thread: Optional[threading.Thread] = None
        self.logger = logging.getLogger(self.__class__.__name__)

    def setup(self) -> None:
        if not self.deferred:
            if self.api_key_initialized:
                fetch_news(self.config.api_key, self.articles, self.client_factory)
            return

        self.news_rx = queue.Queue()
        self.app_tx = queue.Queue()
        worker = FetchWorker(self.config.api_key, self.news_rx, self.app_tx, self.client_factory)
        self.worker_thread = worker.start()

    def preload_articles(self) -> int:
        """Append whatever the worker has sent so far; returns the count."""
        received = drain(self.news_rx)
        self.articles.extend(received)
        return len(received)

    def update(self) -> str:
        """One render pass."""
        self.preload_articles()
        return render_frame(self.articles, dark_mode=self.config.dark_mode)

    def submit_api_key(self, api_key: str) -> bool:
        api_key = api_key.strip()
        if not api_key:
            self.logger.warning("Empty API key ignored")
            return False

        self.config.api_key = api_key
        self._save()
        self.logger.debug("API key set: %s...", api_key[:4])
        self.api_key_initialized = True

        if self.deferred:
            self._send(ApiKeySet(api_key))
        else:
            self.articles = []
            fetch_news(api_key, self.articles, self.client_factory)
        return True

    def refresh(self) -> None:
        if self.deferred:
            self._send(RefreshHit(True))
            return
        self.articles = []
        fetch_news(self.config.api_key, self.articles, self.client_factory)

    def toggle_theme(self) -> bool:
        self.config.dark_mode = not self.config.dark_mode
        return self.config.dark_mode

    def close(self) -> None:
        self._save()
        self._send(Quit())

    def _send(self, msg: object) -> None:
        if self.app_tx is not None:
            self.app_tx.put_nowait(msg)

    def _save(self) -> None:
        try:
            store_config(self.config_path, self.config)
        except OSError as exc:
            self.logger.error("Failed to save app state: %s", exc)
