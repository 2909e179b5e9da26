"""Tests for HttpRecordAnalyticsEngine."""

import json
import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from beacon.adapters.analytics.http_record import HttpRecordAnalyticsEngine, build_record

BASE_URL = "https://records.example.com"


def _engine(handler, max_pending: int = 100) -> HttpRecordAnalyticsEngine:
    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))
    return HttpRecordAnalyticsEngine(
        BASE_URL, max_pending=max_pending, client=client, executor=ThreadPoolExecutor(1)
    )


def test_build_record():
    assert build_record("messageDeleted", {"index": "3", "read": "true"}) == {
        "record_type": "AnalyticsEvent.messageDeleted",
        "fields": {"index": "3", "read": "true"},
    }


def test_posts_one_record_per_event():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(201)

    engine = _engine(handler)
    engine.send("messageSelected", {"index": "0"})
    engine.send("loginScreenViewed", {})
    engine.close()

    assert [r.url.path for r in requests] == ["/records", "/records"]
    assert [r.method for r in requests] == ["POST", "POST"]
    assert json.loads(requests[0].content) == {
        "record_type": "AnalyticsEvent.messageSelected",
        "fields": {"index": "0"},
    }
    assert json.loads(requests[1].content)["fields"] == {}


def test_send_does_not_wait_for_response():
    release = threading.Event()
    finished = threading.Event()

    def handler(request: httpx.Request) -> httpx.Response:
        release.wait(timeout=5)
        finished.set()
        return httpx.Response(201)

    engine = _engine(handler)
    engine.send("loginAttempted", {})

    assert not finished.is_set()
    release.set()
    engine.close()
    assert finished.is_set()


def _server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503)


def _connect_error(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("refused", request=request)


@pytest.mark.parametrize(
    "handler", [_server_error, _connect_error], ids=["server_error", "connect_error"]
)
def test_failures_are_logged_not_raised(handler, caplog):
    with caplog.at_level(logging.ERROR, logger="beacon.adapters.analytics.http_record"):
        engine = _engine(handler)
        engine.send("loginFailed", {"reason": "wrongPassword"})
        engine.close()

    assert "Failed to save analytics record 'loginFailed'" in caplog.text


def test_send_after_close_is_dropped(caplog):
    engine = _engine(lambda request: httpx.Response(201))
    engine.close()

    with caplog.at_level(logging.ERROR, logger="beacon.adapters.analytics.http_record"):
        engine.send("loginSucceeded", {})

    assert "Dropped analytics event 'loginSucceeded'" in caplog.text


def test_api_key_sent_as_bearer_token():
    engine = HttpRecordAnalyticsEngine(BASE_URL, api_key="secret")
    try:
        assert engine._client.headers["Authorization"] == "Bearer secret"
    finally:
        engine.close()


def test_sends_past_pending_limit_are_dropped(caplog):
    release = threading.Event()
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        release.wait(timeout=5)
        requests.append(json.loads(request.content)["fields"]["index"])
        return httpx.Response(201)

    engine = _engine(handler, max_pending=2)
    with caplog.at_level(logging.ERROR, logger="beacon.adapters.analytics.http_record"):
        for i in range(5):
            engine.send("messageSelected", {"index": str(i)})

    assert caplog.text.count("Dropped analytics event 'messageSelected'") == 3
    release.set()
    engine.close()
    assert requests == ["0", "1"]


def test_pending_slot_freed_after_save():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(201)

    engine = _engine(handler, max_pending=1)
    for _ in range(3):
        engine.send("loginAttempted", {})
        # Wait for the completion callback to hand the slot back.
        assert engine._pending.acquire(timeout=5)
        engine._pending.release()
    engine.close()

    assert len(requests) == 3


def test_factory_passes_pending_limit(make_settings):
    from beacon.core.container import create_analytics_engine

    settings = make_settings(
        ANALYTICS_BACKEND="http",
        ANALYTICS_HTTP_BASE_URL=BASE_URL,
        ANALYTICS_HTTP_MAX_PENDING=1,
    )
    engine = create_analytics_engine(settings)
    try:
        assert engine._pending.acquire(blocking=False)
        assert not engine._pending.acquire(blocking=False)
        engine._pending.release()
    finally:
        engine.close()
