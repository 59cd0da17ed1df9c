"""Headlines app: settings, article list and the background fetch worker."""

from .app import Headlines
from .config import HeadlinesConfig, load_config, store_config
from .feed import ApiKeySet, FetchWorker, NewsCardData, Quit, RefreshHit, fetch_news

__all__ = [
    "Headlines",
    "HeadlinesConfig",
    "load_config",
    "store_config",
    "ApiKeySet",
    "FetchWorker",
    "NewsCardData",
    "Quit",
    "RefreshHit",
    "fetch_news",
]
