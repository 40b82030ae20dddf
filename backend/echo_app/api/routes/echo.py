"""Module: echo."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from echo_app.api.routes.adapters import ROUTED_METHODS, to_response
from echo_app.api.routes.deps import read_request
from echo_app.core.messages import HttpRequest
from echo_app.handlers import handle_echo

router = APIRouter()


# Endpoint: byte-for-byte echo of the POST body. Sync so it runs on the worker pool.
@router.api_route("/", methods=ROUTED_METHODS)
def echo(exchange: HttpRequest = Depends(read_request)) -> Response:
    return to_response(handle_echo(exchange))
