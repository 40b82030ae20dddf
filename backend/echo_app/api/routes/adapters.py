"""Module: adapters."""

from fastapi.responses import Response

from echo_app.core.messages import HttpResponse

# Every method the router accepts on the known paths; handlers decide 200 vs 405.
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def to_response(result: HttpResponse) -> Response:
    # No media_type: the handler's own headers are sent as-is.
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=dict(result.headers),
    )
