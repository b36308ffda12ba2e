from __future__ import annotations

import http
from typing import Awaitable, Callable, Tuple

import structlog
from aiohttp import web
from http_api.client.base_view import TOKEN_SERVICE, BaseView

from app.auth.errors import AuthenticationError

logger = structlog.getLogger(__name__)

PROTECTED_PREFIXES: Tuple[str, ...] = ("/api/",)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def bearer_token_middleware(
    request: web.Request, handler: Handler
) -> web.StreamResponse:
    """Reject requests to protected routes without the shared bearer token."""
    if not request.path.startswith(PROTECTED_PREFIXES):
        return await handler(request)

    tokens = request.app[TOKEN_SERVICE]
    if not tokens.is_authorized(request.headers.get("Authorization")):
        logger.warning("Rejected unauthorized request", path=request.path)
        return web.json_response(
            {"message": "Unauthorized"},
            status=http.HTTPStatus.UNAUTHORIZED,
        )
    return await handler(request)


def init_auth(app: web.Application):
    app.router.add_view("/auth/token", TokenView)


class TokenView(BaseView):
    async def post(self):
        try:
            data = await self.request.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        try:
            token = self.tokens.issue_token(
                username=data.get("username"),
                password=data.get("password"),
            )
        except AuthenticationError as e:
            logger.warning("Rejected token request", reason=str(e))
            return web.json_response(
                {"message": "Invalid credentials"},
                status=http.HTTPStatus.UNAUTHORIZED,
            )

        return web.json_response(data={"token": token}, status=http.HTTPStatus.OK)
