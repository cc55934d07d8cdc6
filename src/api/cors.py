"""Cross-origin handling for the storefront app.

Every response allows any origin. Preflight OPTIONS requests are answered
directly with 204 and an empty body, before routing.
"""

from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

ALLOW_ORIGIN = "*"
ALLOW_METHODS = "GET"
ALLOW_HEADERS = "Content-Type"


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Middleware adding permissive CORS headers and answering preflights."""

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        if request.method == "OPTIONS":
            return Response(
                status_code=204,
                headers={
                    "Access-Control-Allow-Origin": ALLOW_ORIGIN,
                    "Access-Control-Allow-Methods": ALLOW_METHODS,
                    "Access-Control-Allow-Headers": ALLOW_HEADERS,
                },
            )

        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = ALLOW_ORIGIN
        return response
