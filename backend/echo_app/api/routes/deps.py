"""Module: deps."""

from fastapi import Request

from echo_app.core.messages import HttpRequest


# Dependency provider: snapshot of the inbound request with its full body.
# Runs on the event loop so the handler itself never waits on the socket.
async def read_request(request: Request) -> HttpRequest:
    body = await request.body()
    return HttpRequest(
        method=request.method,
        path=request.url.path,
        headers=dict(request.headers),
        body=body,
    )
