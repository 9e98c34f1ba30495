from unittest.mock import MagicMock, patch

import pytest
import requests

from iconify_svg import FetchFailedError, RequestsTransport

URL = "https://api.iconify.design/mdi/home.svg?"


def _response(status: int, body: bytes, content_type: str) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body
    response.headers["Content-Type"] = content_type
    response.encoding = requests.utils.get_encoding_from_headers(response.headers)
    response.url = URL
    return response


def test_fetch_returns_body() -> None:
    response = _response(200, b"<svg/>", "image/svg+xml")
    with patch.object(requests, "get", return_value=response) as get:
        assert RequestsTransport(timeout=5.0).fetch(URL) == "<svg/>"
    get.assert_called_once_with(URL, timeout=5.0)


def test_fetch_decodes_utf8_without_charset() -> None:
    body = '<svg><title>café</title></svg>'
    response = _response(200, body.encode("utf-8"), "text/plain")
    with patch.object(requests, "get", return_value=response):
        assert RequestsTransport().fetch(URL) == body


def test_not_found_body_is_passed_through() -> None:
    # The API answers unknown icons with status 200 and body "404"; the
    # resolver, not the transport, interprets it.
    response = _response(200, b"404", "text/plain")
    with patch.object(requests, "get", return_value=response):
        assert RequestsTransport().fetch(URL) == "404"


def test_error_status() -> None:
    response = _response(503, b"unavailable", "text/plain")
    with patch.object(requests, "get", return_value=response):
        with pytest.raises(FetchFailedError) as excinfo:
            RequestsTransport().fetch(URL)
    assert "503" in excinfo.value.reason
    assert excinfo.value.url == URL
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_connection_error() -> None:
    with patch.object(
        requests, "get", side_effect=requests.exceptions.ConnectionError("refused")
    ):
        with pytest.raises(FetchFailedError) as excinfo:
            RequestsTransport().fetch(URL)
    assert "refused" in str(excinfo.value)


def test_timeout() -> None:
    with patch.object(requests, "get", side_effect=requests.exceptions.ReadTimeout()):
        with pytest.raises(FetchFailedError) as excinfo:
            RequestsTransport(timeout=1.5).fetch(URL)
    assert "timed out after 1.5s" in str(excinfo.value)


def test_session_is_used() -> None:
    session = MagicMock(spec=requests.Session)
    session.get.return_value = _response(200, b"<svg/>", "image/svg+xml")
    with patch.object(requests, "get") as module_get:
        assert RequestsTransport(session=session).fetch(URL) == "<svg/>"
    module_get.assert_not_called()
    session.get.assert_called_once_with(URL, timeout=30.0)
