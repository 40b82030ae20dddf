"""Module: api."""

from fastapi import APIRouter

from echo_app.api.routes.echo import router as echo_router
from echo_app.api.routes.health import router as health_router

api_router = APIRouter()

# Exactly two fixed paths: "/" and "/health". Anything else falls through to 404.
api_router.include_router(echo_router, tags=["echo"])
api_router.include_router(health_router, tags=["health"])
