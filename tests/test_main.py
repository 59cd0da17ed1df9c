import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

import config
import main
from newsapi import Article, BadRequest, Country, NewsAPI, NewsAPIResponse


def test_top_without_api_key_fails(monkeypatch):
    monkeypatch.setattr(config, "API_KEY", None)
    assert main.run_top(Country.GB) == 1


def test_top_sync_prints_articles(monkeypatch, mocker, capsys):
    monkeypatch.setattr(config, "API_KEY", "abc123")
    fetch = mocker.patch.object(
        NewsAPI,
        "fetch",
        return_value=NewsAPIResponse("ok", articles=(Article("Hello", "https://example.com/h"),)),
    )

    assert main.run_top(Country.GB, use_sync=True) == 0

    fetch.assert_called_once()
    out = capsys.readouterr().out
    assert "# Top headline" in out
    assert "`Hello`" in out
    assert "> *https://example.com/h*" in out


def test_top_async_error_is_printed(monkeypatch, mocker, capsys):
    monkeypatch.setattr(config, "API_KEY", "abc123")
    mocker.patch.object(NewsAPI, "fetch_async", mocker.AsyncMock(side_effect=BadRequest("Unknown error")))

    assert main.run_top(Country.US) == 1
    assert "Request failed: Unknown error" in capsys.readouterr().err


def test_parse_args_country():
    args = main.parse_args(["top", "--country", "SG"])
    assert args.country is Country.SG
    assert not args.sync
    assert main.parse_args(["top"]).country is Country.GB


def test_parse_args_rejects_unknown_country():
    with pytest.raises(SystemExit):
        main.parse_args(["top", "--country", "fr"])
