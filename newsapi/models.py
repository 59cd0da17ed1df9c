from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class Endpoint(Enum):
    TOP_HEADLINES = "top-headlines"

    def __str__(self) -> str:
        return self.value


class Country(Enum):
    US = "us"
    SG = "sg"
    GB = "gb"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, code: str) -> "Country":
        """Return the country for a two-letter code, case-insensitive."""
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise ValueError(f"Unsupported country code: {code!r}") from None


@dataclass(frozen=True)
class Article:
    title: str
    url: str
    description: Optional[str] = None


@dataclass(frozen=True)
class NewsAPIResponse:
    """
    Decoded top-level payload of the API.

    `articles` keeps the order returned by the API and is never None.
    """
    status: str
    code: Optional[str] = None
    articles: Tuple[Article, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.status == "ok"
