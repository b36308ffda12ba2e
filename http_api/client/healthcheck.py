from __future__ import annotations

import http

import structlog
from aiohttp import web
from http_api.client.base_view import CONNECTOR

logger = structlog.getLogger(__name__)


def init_healthchecks(app: web.Application):
    """Bootstrap your server with standard healthchecks."""
    app.router.add_view("/livez", LivenessView)
    app.router.add_view("/readyz", ReadinessView)
    app.router.add_view("/startupz", StartupView)


class LivenessView(web.View):
    """A view which indicates this service is able to accept traffic.

    See Also:
         https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/#define-a-liveness-http-request
    """

    async def get(self) -> web.Response:
        return web.json_response(data={"ready": True, "status": http.HTTPStatus.OK})


class ReadinessView(web.View):
    """A view which indicates this service is able to process requests.

    Being able to process requests means being able to reach the database.

    See Also:
        https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/#define-readiness-probes
    """

    async def get(self) -> web.Response:
        try:
            ready = await self.request.app[CONNECTOR].ping()
        except Exception as e:
            logger.warning("Database ping failed", error_message=str(e))
            ready = False

        status = http.HTTPStatus.OK if ready else http.HTTPStatus.SERVICE_UNAVAILABLE
        return web.json_response(
            data={"ready": ready, "status": status},
            status=status,
        )


class StartupView(ReadinessView):
    """A view which indicates a (re)starting service is ready to process requests.

    See Also:
        https://kubernetes.io/docs/tasks/configure-pod-container/configure-liveness-readiness-startup-probes/#define-startup-probes
    """
