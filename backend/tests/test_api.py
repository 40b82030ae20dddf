import logging
from concurrent.futures import ThreadPoolExecutor

import pytest


def test_echo_simple_json(client):
    body = b'{"message":"test"}'
    r = client.post("/", content=body, headers={"Content-Type": "application/json"})

    assert r.status_code == 200
    assert r.content == body
    assert r.headers["content-type"] == "application/json"


def test_echo_complex_json_is_not_reserialized(client):
    # Key order and whitespace must survive untouched.
    body = b'{ "string":"value", "number":42,"boolean":true,\n "array":[1, 2,3],"nested":{"key":"value"}}'
    r = client.post("/", content=body)

    assert r.status_code == 200
    assert r.content == body


@pytest.mark.parametrize(
    "body",
    [b"", b"not json at all", b"\xff\xfe\x00\x80", bytes(range(256))],
    ids=["empty", "text", "invalid-utf8", "all-bytes"],
)
def test_echo_arbitrary_bytes(client, body):
    r = client.post("/", content=body)

    assert r.status_code == 200
    assert r.content == body


def test_echo_is_idempotent(client):
    body = b'{"repeat":true}'
    responses = [client.post("/", content=body) for _ in range(5)]

    assert {r.status_code for r in responses} == {200}
    assert {r.content for r in responses} == {body}


@pytest.mark.parametrize("method", ["GET", "PUT", "DELETE", "PATCH", "OPTIONS"])
def test_echo_method_not_allowed(client, method):
    r = client.request(method, "/")

    assert r.status_code == 405
    assert r.content == b""


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.content == b'{"status":"ok"}'
    assert r.headers["content-type"] == "application/json"


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "PATCH"])
def test_health_method_not_allowed(client, method):
    r = client.request(method, "/health", content=b"{}")

    assert r.status_code == 405
    assert r.content == b""


def test_unroutable_method_is_empty_405(client):
    r = client.request("PROPFIND", "/")

    assert r.status_code == 405
    assert r.content == b""


@pytest.mark.parametrize("path", ["/missing", "/health/", "/health/extra", "/docs"])
def test_unknown_path_is_empty_404(client, path):
    r = client.get(path)

    assert r.status_code == 404
    assert r.content == b""


def test_concurrent_echo_requests(client):
    def send(i):
        return i, client.post("/", content=f'{{"request":{i}}}'.encode())

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(send, range(10)))

    for i, r in results:
        assert r.status_code == 200
        assert r.content == f'{{"request":{i}}}'.encode()


def test_worker_pool_sized_from_settings(client):
    from echo_app.core.config import settings

    assert client.app.state.worker_limiter.total_tokens == settings.worker_pool_size


def test_requests_are_traced(client, caplog):
    caplog.set_level(logging.INFO)
    client.post("/", content=b"{}")

    assert "Received request: POST /" in caplog.text
    assert "Request processed: 200" in caplog.text
