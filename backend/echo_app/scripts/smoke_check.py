"""Module: smoke_check.

End-to-end checks against a running echo service:

    python -m echo_app.scripts.smoke_check --base-url http://localhost:8083
"""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor

import httpx

DEFAULT_BASE_URL = "http://localhost:8083"
EXPECTED_HEALTH_BODY = b'{"status":"ok"}'


class SmokeCheckError(Exception):
    pass


def check_health(client: httpx.Client) -> None:
    r = client.get("/health")
    if r.status_code != 200 or r.content != EXPECTED_HEALTH_BODY:
        raise SmokeCheckError(f"GET /health returned {r.status_code} {r.content!r}")


def check_echo(client: httpx.Client, payload: bytes) -> None:
    r = client.post("/", content=payload, headers={"Content-Type": "application/json"})
    if r.status_code != 200:
        raise SmokeCheckError(f"POST / returned {r.status_code}")
    if r.content != payload:
        raise SmokeCheckError(f"POST / echoed {r.content!r}, expected {payload!r}")


def check_concurrent_echo(client: httpx.Client, count: int = 10) -> None:
    payloads = [f'{{"request":{i}}}'.encode() for i in range(count)]
    with ThreadPoolExecutor(max_workers=count) as pool:
        # list() re-raises the first failure from any worker.
        list(pool.map(lambda p: check_echo(client, p), payloads))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke-check a running echo service.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--timeout", type=float, default=5.0)
    args = parser.parse_args(argv)

    checks = [
        ("health", check_health),
        ("echo", lambda c: check_echo(c, b'{"msg":"hello","nested":{"key":"value"},"array":[1,2,3]}')),
        ("concurrent echo", check_concurrent_echo),
    ]

    with httpx.Client(base_url=args.base_url, timeout=args.timeout) as client:
        for name, check in checks:
            try:
                check(client)
            except (SmokeCheckError, httpx.HTTPError) as e:
                print(f"FAIL {name}: {e}")
                return 1
            print(f"ok   {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
