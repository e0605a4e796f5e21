"""
storefront_admin.api.cors

Cross-origin handling for browser clients of the storefront.

Responsibilities:
- Answer every pre-flight (OPTIONS) request before routing or auth runs.
- Stamp the CORS headers on every other response.
"""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.types import ASGIApp


class PreflightMiddleware(BaseHTTPMiddleware):
    """
    Starlette's CORSMiddleware only treats OPTIONS as pre-flight when the browser
    headers are present; storefront clients expect every OPTIONS to be acknowledged.
    """

    def __init__(self, app: ASGIApp, *, allow_origin: str, allow_headers: str) -> None:
        super().__init__(app)
        self._headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Headers": allow_headers,
        }

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", status_code=200, headers=self._headers)

        response = await call_next(request)
        response.headers.update(self._headers)
        return response
