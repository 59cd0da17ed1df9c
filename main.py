import argparse
import asyncio
import logging
import sys

import config
from headlines import Headlines
from headlines.render import render_articles
from headlines.terminal import run_app
from newsapi import Country, Endpoint, NewsAPI, NewsApiError

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)


def build_client(api_key: str) -> NewsAPI:
    client = NewsAPI(api_key, base_url=config.NEWSAPI_BASE_URL, timeout=config.NEWSAPI_TIMEOUT)
    if config.NEWSAPI_USER_AGENT:
        client.user_agent = config.NEWSAPI_USER_AGENT
    return client


def run_top(country: Country, use_sync: bool = False) -> int:
    """Print top headlines once; the API key comes from the environment."""
    api_key = config.API_KEY
    if not api_key:
        logging.error("Missing API_KEY environment variable")
        return 1

    news_api = build_client(api_key).set_endpoint(Endpoint.TOP_HEADLINES).set_country(country)
    try:
        if use_sync:
            response = news_api.fetch()
        else:
            response = asyncio.run(news_api.fetch_async())
    except NewsApiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(render_articles(response.articles))
    return 0


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Top headlines from newsapi.org")
    sub = parser.add_subparsers(dest="command", required=True)

    top = sub.add_parser("top", help="Print top headlines once")
    top.add_argument(
        "--country",
        type=Country.parse,
        default=Country.GB,
        help="Two-letter country code (%s)" % ", ".join(str(c) for c in Country),
    )
    top.add_argument("--sync", action="store_true", help="Use the blocking transport")

    app = sub.add_parser("app", help="Interactive headlines reader")
    app.add_argument(
        "--immediate",
        action="store_true",
        help="Fetch on the UI thread instead of the background worker",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.command == "top":
        return run_top(args.country, use_sync=args.sync)
    if args.command == "app":
        app = Headlines(
            config.HEADLINES_CONFIG_FILE,
            deferred=not args.immediate,
            client_factory=build_client,
        )
        run_app(app)
        return 0
    raise ValueError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
