"""Module: messages."""

from dataclasses import dataclass, field
from typing import Mapping


# Transient view of one inbound request, built per exchange and never shared.
@dataclass(frozen=True)
class HttpRequest:
    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


# Transient response produced by a handler; routes translate it for the framework.
@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""


def empty_response(status_code: int) -> HttpResponse:
    return HttpResponse(status_code=status_code)
