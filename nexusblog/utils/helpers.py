"""Small request helpers shared by the logging middleware and error handlers."""

from datetime import datetime

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match, Route

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def host(request: Request) -> str:
    """Client IP of the request, `unknown` when the server did not record one."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Current local time as shown in `/health`, e.g. `2025-03-05 10:00:00`."""
    return datetime.now().astimezone().strftime(TIMESTAMP_FORMAT)


def get_summary(request: Request) -> str | None:
    """
    Human readable name of the route a request resolves to.

    API routes give their `summary` ("Search posts"), plain Starlette routes
    such as `/docs` give their name. Unmatched paths give None.
    """
    scope = request.scope
    for route in scope["app"].routes:
        if not isinstance(route, Route):
            continue
        match, _ = route.matches(scope)
        if match != Match.FULL:
            continue
        return route.summary if isinstance(route, APIRoute) else route.name
    return None
