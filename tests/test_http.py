import types

import requests

from nameprob.http import (
    ERR_DECODE,
    ERR_HTTP,
    ERR_NETWORK,
    ERR_NONE,
    make_session,
    safe_get,
)

from conftest import FakeResponse


def _patched(fake_get):
    sess = make_session()
    sess.get = types.MethodType(fake_get, sess)
    return sess


def test_make_session_headers():
    s = make_session(user_agent="ua-test-123")
    assert s.headers.get("User-Agent") == "ua-test-123"
    assert s.headers.get("Accept") == "application/json"


def test_safe_get_ok_json():
    seen = {}

    def fake_get(self, url, params=None, timeout=None):
        seen.update(url=url, params=params, timeout=timeout)
        return FakeResponse(
            status=200, text='{"country":[]}', json_obj={"country": []}
        )

    j, status, body, err = safe_get(
        _patched(fake_get), {"name": "Anna"}, url="https://mock.test", timeout=3
    )
    assert (j, status, err) == ({"country": []}, 200, ERR_NONE)
    assert "country" in body
    assert seen == {
        "url": "https://mock.test",
        "params": {"name": "Anna"},
        "timeout": 3,
    }


def test_safe_get_http_error():
    def fake_get(self, url, params=None, timeout=None):
        return FakeResponse(
            status=429, text="Too Many Requests", json_obj={"error": "limit"}
        )

    j, status, body, err = safe_get(_patched(fake_get), {"name": "x"})
    assert j is None
    assert status == 429
    assert err == ERR_HTTP
    assert "Too Many Requests" in body


def test_safe_get_json_decode_error():
    def fake_get(self, url, params=None, timeout=None):
        return FakeResponse(status=200, text="<html>", json_obj=ValueError("boom"))

    j, status, body, err = safe_get(_patched(fake_get), {"name": "x"})
    assert j is None
    assert status == 200
    assert err == ERR_DECODE
    assert "<html>" in body


def test_safe_get_network_error():
    def fake_get(self, url, params=None, timeout=None):
        raise requests.ConnectionError("no route to host")

    j, status, body, err = safe_get(_patched(fake_get), {"name": "x"})
    assert j is None
    assert status == -1
    assert err == ERR_NETWORK
    assert "ConnectionError" in body
    assert "no route to host" in body


def test_safe_get_timeout_is_network_error():
    def fake_get(self, url, params=None, timeout=None):
        raise requests.Timeout("read timed out")

    _, status, _, err = safe_get(_patched(fake_get), {"name": "x"})
    assert status == -1
    assert err == ERR_NETWORK
