"""Terminal rendering of the article list."""

from __future__ import annotations

from typing import Iterable, List

from newsapi import Article

from .feed import NewsCardData

WIDTH = 60

_RESET = "\033[0m"
_WHITE = "\033[97m"
_BLACK = "\033[30m"
_CYAN = "\033[96m"
_RED = "\033[91m"


def _themed(text: str, color: str) -> str:
    return f"{color}{text}{_RESET}"


def render_header() -> str:
    return "\n".join(["headlines".center(WIDTH), "", "=" * WIDTH])


def render_news_cards(cards: Iterable[NewsCardData], dark_mode: bool = False) -> str:
    title_color = _WHITE if dark_mode else _BLACK
    link_color = _CYAN if dark_mode else _RED
    lines: List[str] = []
    for card in cards:
        lines.append("")
        lines.append(_themed(f"> {card.title}", title_color))
        lines.append("")
        lines.append(card.desc)
        lines.append(_themed(f"read more > {card.url}", link_color).rjust(WIDTH))
        lines.append("-" * WIDTH)
    return "\n".join(lines)


def render_footer() -> str:
    return "\n".join(["", "API source: newsapi.org".center(WIDTH), ""])


def render_frame(cards: Iterable[NewsCardData], dark_mode: bool = False) -> str:
    return "\n".join([render_header(), render_news_cards(cards, dark_mode), render_footer()])


def render_articles(articles: Iterable[Article]) -> str:
    """Markdown listing used by the one-shot CLI."""
    lines = ["# Top headline", ""]
    for a in articles:
        lines.append(f"`{a.title}`")
        lines.append(f"> *{a.url}*")
        lines.append("---")
    return "\n".join(lines)
