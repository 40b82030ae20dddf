"""Module: health."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from echo_app.api.routes.adapters import ROUTED_METHODS, to_response
from echo_app.api.routes.deps import read_request
from echo_app.core.messages import HttpRequest
from echo_app.handlers import handle_health

router = APIRouter()


# Endpoint: lightweight health probe for service liveness.
@router.api_route("/health", methods=ROUTED_METHODS)
def health(exchange: HttpRequest = Depends(read_request)) -> Response:
    return to_response(handle_health(exchange))
