import os
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import asyncio
import json

import aiohttp
import pytest
import requests

from newsapi import (
    AsyncRequestFailed,
    BadRequest,
    Country,
    Endpoint,
    FailedResponseToString,
    NewsAPI,
    RequestFailed,
    UrlParsingFailed,
)

OK_BODY = json.dumps(
    {
        "status": "ok",
        "totalResults": 2,
        "articles": [
            {"title": "First", "url": "https://example.com/1", "description": "one"},
            {"title": "Second", "url": "https://example.com/2", "description": None},
        ],
    }
)


@pytest.mark.parametrize("country", list(Country))
def test_prepare_url_for_every_country(country):
    url = NewsAPI("k").set_country(country).prepare_url()
    assert url == f"https://newsapi.org/v2/top-headlines?country={country.value}"


def test_prepare_url_gb():
    api = NewsAPI("abc123").set_endpoint(Endpoint.TOP_HEADLINES).set_country(Country.GB)
    assert api.prepare_url() == "https://newsapi.org/v2/top-headlines?country=gb"


def test_setters_return_same_instance():
    api = NewsAPI("k")
    assert api.set_country(Country.SG) is api
    assert api.set_endpoint(Endpoint.TOP_HEADLINES) is api


def test_prepare_url_tolerates_trailing_slash_and_drops_base_query():
    api = NewsAPI("k", base_url="http://localhost:8080/v2/?foo=bar")
    assert api.prepare_url() == "http://localhost:8080/v2/top-headlines?country=us"


@pytest.mark.parametrize("base", ["newsapi.org/v2", "", "/v2", "http://[::1"])
def test_prepare_url_rejects_non_absolute_base(base):
    with pytest.raises(UrlParsingFailed):
        NewsAPI("k", base_url=base).prepare_url()


def _mock_response(mocker, body, status_code=200):
    resp = mocker.MagicMock()
    resp.status_code = status_code
    resp.text = body
    return resp


def test_fetch_sends_raw_api_key(mocker):
    get = mocker.patch("newsapi.client.requests.get", return_value=_mock_response(mocker, OK_BODY))

    response = NewsAPI("abc123").set_country(Country.GB).fetch()

    get.assert_called_once_with(
        "https://newsapi.org/v2/top-headlines?country=gb",
        headers={"Authorization": "abc123"},
        timeout=15.0,
        stream=True,
    )
    assert [a.title for a in response.articles] == ["First", "Second"]
    assert response.status == "ok"


def test_fetch_connection_error(mocker):
    mocker.patch(
        "newsapi.client.requests.get",
        side_effect=requests.exceptions.ConnectionError("refused"),
    )
    with pytest.raises(RequestFailed) as excinfo:
        NewsAPI("k").fetch()
    assert isinstance(excinfo.value.__cause__, requests.exceptions.ConnectionError)


def test_fetch_timeout_is_transport_error(mocker):
    mocker.patch("newsapi.client.requests.get", side_effect=requests.exceptions.Timeout())
    with pytest.raises(RequestFailed):
        NewsAPI("k", timeout=0.1).fetch()


def test_fetch_body_read_error(mocker):
    resp = mocker.MagicMock()
    resp.status_code = 200
    type(resp).text = mocker.PropertyMock(side_effect=requests.exceptions.ChunkedEncodingError("cut"))
    mocker.patch("newsapi.client.requests.get", return_value=resp)

    with pytest.raises(FailedResponseToString):
        NewsAPI("k").fetch()


def test_fetch_maps_api_error_sent_with_http_401(mocker):
    body = json.dumps({"status": "error", "code": "apiKeyDisabled", "message": "disabled"})
    mocker.patch("newsapi.client.requests.get", return_value=_mock_response(mocker, body, 401))

    with pytest.raises(BadRequest) as excinfo:
        NewsAPI("k").fetch()
    assert excinfo.value.reason == "Your API key has been disabled"


def _mock_session(mocker, resp):
    session = mocker.MagicMock(spec=aiohttp.ClientSession)
    cm = mocker.MagicMock()
    cm.__aenter__ = mocker.AsyncMock(return_value=resp)
    cm.__aexit__ = mocker.AsyncMock(return_value=None)
    session.get.return_value = cm
    return session


@pytest.mark.asyncio
async def test_fetch_async_sets_user_agent(mocker):
    resp = mocker.MagicMock()
    resp.status = 200
    resp.text = mocker.AsyncMock(return_value=OK_BODY)
    session = _mock_session(mocker, resp)

    api = NewsAPI("abc123").set_country(Country.GB)
    response = await api.fetch_async(session)

    session.get.assert_called_once()
    args, kwargs = session.get.call_args
    assert args[0] == "https://newsapi.org/v2/top-headlines?country=gb"
    assert kwargs["headers"]["Authorization"] == "abc123"
    assert kwargs["headers"]["User-Agent"] == api.user_agent
    assert len(response.articles) == 2


@pytest.mark.asyncio
async def test_fetch_async_user_agent_missing_is_unknown_error(mocker):
    body = json.dumps({"status": "error", "code": "userAgentMissing"})
    resp = mocker.MagicMock()
    resp.status = 200
    resp.text = mocker.AsyncMock(return_value=body)
    session = _mock_session(mocker, resp)

    with pytest.raises(BadRequest) as excinfo:
        await NewsAPI("k").fetch_async(session)
    assert excinfo.value.reason == "Unknown error"


@pytest.mark.asyncio
async def test_fetch_async_connection_error(mocker):
    session = mocker.MagicMock(spec=aiohttp.ClientSession)
    cm = mocker.MagicMock()
    cm.__aenter__ = mocker.AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))
    cm.__aexit__ = mocker.AsyncMock(return_value=None)
    session.get.return_value = cm

    with pytest.raises(AsyncRequestFailed):
        await NewsAPI("k").fetch_async(session)


@pytest.mark.asyncio
async def test_fetch_async_timeout(mocker):
    session = mocker.MagicMock(spec=aiohttp.ClientSession)
    cm = mocker.MagicMock()
    cm.__aenter__ = mocker.AsyncMock(side_effect=asyncio.TimeoutError())
    cm.__aexit__ = mocker.AsyncMock(return_value=None)
    session.get.return_value = cm

    with pytest.raises(RequestFailed):
        await NewsAPI("k").fetch_async(session)


@pytest.mark.asyncio
async def test_fetch_async_body_read_error(mocker):
    resp = mocker.MagicMock()
    resp.status = 200
    resp.text = mocker.AsyncMock(side_effect=aiohttp.ClientPayloadError("truncated"))
    session = _mock_session(mocker, resp)

    with pytest.raises(FailedResponseToString):
        await NewsAPI("k").fetch_async(session)
