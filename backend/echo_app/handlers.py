"""Module: handlers.

Pure request -> response functions behind the two service endpoints.
Neither handler keeps state between calls, so both are safe to run on any
worker of the pool at the same time.
"""

import logging

from echo_app.core.messages import HttpRequest, HttpResponse, empty_response

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
HEALTH_BODY = b'{"status":"ok"}'


def handle_echo(request: HttpRequest) -> HttpResponse:
    """
    Return the request body unchanged.

    Only POST is accepted. The body is labelled as JSON but never parsed, so
    arbitrary bytes (empty, non-UTF-8, odd whitespace) come back as they were sent.
    """
    if request.method.upper() != "POST":
        logger.info("Echo: Method not allowed - %s", request.method)
        return empty_response(405)

    return HttpResponse(
        status_code=200,
        headers={"Content-Type": JSON_CONTENT_TYPE},
        body=bytes(request.body),
    )


def handle_health(request: HttpRequest) -> HttpResponse:
    """Static liveness probe; GET only."""
    if request.method.upper() != "GET":
        logger.info("Health: Method not allowed - %s", request.method)
        return empty_response(405)

    return HttpResponse(
        status_code=200,
        headers={"Content-Type": JSON_CONTENT_TYPE},
        body=HEALTH_BODY,
    )
