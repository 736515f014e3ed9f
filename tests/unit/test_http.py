"""Unit tests for the httpx Content-Type helpers."""

import httpx
import pytest

from mediatype import MediaType, MediaTypeParseError, media_types
from mediatype.config.settings import Settings
from mediatype.http import (
    default_content_type,
    get_content_type,
    has_content_type,
    set_content_type,
)


def test_get_content_type_from_response():
    resp = httpx.Response(
        200, headers={"Content-Type": "Application/JSON; charset=UTF-8"}
    )
    mt = get_content_type(resp)
    assert mt == MediaType("application", "json", {"charset": "UTF-8"})
    assert mt.get_parameter("Charset") == "UTF-8"


def test_get_content_type_from_request_headers_and_mapping():
    req = httpx.Request(
        "POST", "https://example.com/upload", headers={"content-type": "text/csv"}
    )
    assert str(get_content_type(req)) == "text/csv"
    assert str(get_content_type(req.headers)) == "text/csv"
    assert str(get_content_type({"CONTENT-TYPE": "image/png"})) == "image/png"


def test_get_content_type_missing_header_returns_default():
    resp = httpx.Response(204)
    assert get_content_type(resp) is None
    assert get_content_type(resp, default="text/plain") == media_types.TXT
    assert get_content_type({"Content-Type": "  "}, default=media_types.PDF) is media_types.PDF


def test_get_content_type_strict_raises():
    with pytest.raises(MediaTypeParseError):
        get_content_type({"Content-Type": "not a media type"}, strict=True)


def test_get_content_type_lenient_falls_back(caplog):
    with caplog.at_level("WARNING", logger="mediatype.http"):
        mt = get_content_type(
            {"Content-Type": "json"}, default=media_types.OCTET_STREAM, strict=False
        )
    assert mt == media_types.OCTET_STREAM
    assert "Ignoring invalid Content-Type" in caplog.text


def test_get_content_type_strictness_follows_settings(monkeypatch):
    monkeypatch.setenv("MEDIATYPE_STRICT_CONTENT_TYPE", "false")
    monkeypatch.setattr("mediatype.http.settings", Settings())
    assert get_content_type({"Content-Type": "json"}) is None


def test_set_content_type():
    req = httpx.Request("POST", "https://example.com/")
    set_content_type(req, media_types.JSON.with_parameter("charset", "utf-8"))
    assert req.headers["content-type"] == "application/json;charset=utf-8"

    headers = httpx.Headers()
    set_content_type(headers, "Text/Plain")
    assert headers["Content-Type"] == "text/plain"


def test_set_content_type_replaces_other_spellings_in_plain_dict():
    headers = {"content-type": "text/plain", "CONTENT-TYPE": "text/csv", "Accept": "*/*"}
    set_content_type(headers, "application/json")
    assert headers == {"Accept": "*/*", "Content-Type": "application/json"}


def test_set_content_type_rejects_invalid_text_without_modifying():
    headers = httpx.Headers({"Content-Type": "text/plain"})
    with pytest.raises(MediaTypeParseError):
        set_content_type(headers, "*/plain")
    assert headers["Content-Type"] == "text/plain"


def test_has_content_type():
    resp = httpx.Response(200, headers={"Content-Type": "image/png"})
    assert has_content_type(resp, "image/*")
    assert has_content_type(resp, media_types.PNG)
    assert not has_content_type(resp, media_types.JSON)
    assert not has_content_type(httpx.Response(200), "*/*")
    assert not has_content_type({"Content-Type": "bogus"}, "*/*")


def test_default_content_type(monkeypatch):
    assert default_content_type() == media_types.OCTET_STREAM
    monkeypatch.setenv("MEDIATYPE_DEFAULT_CONTENT_TYPE", "Text/Plain; charset=utf-8")
    monkeypatch.setattr("mediatype.http.settings", Settings())
    assert default_content_type() == media_types.TXT_UTF8
