from __future__ import annotations

import logging

from aiohttp import web
from http_api.client.auth import bearer_token_middleware, init_auth
from http_api.client.base_view import CONNECTOR, MEMBER_SERVICE, TOKEN_SERVICE
from http_api.client.healthcheck import init_healthchecks
from http_api.client.views import init_views

from app.auth.service import TokenService
from app.members.service import MemberQueryService
from config import settings
from db import mongo_connector
from db.clients import member_client

logger = logging.getLogger("member_search.client.http")


def create_app(
    config: settings.Config,
    *,
    connector: mongo_connector.MongoConnector = None,
    service: MemberQueryService = None,
) -> web.Application:
    """Build the HTTP application.

    `connector` and `service` default to ones built from `config`; pass them
    in to run against something other than a live database.
    """
    connector = connector or mongo_connector.from_config(config)
    service = service or MemberQueryService(
        member_client.Members(
            connector=connector, collection_name=config.collection_name
        )
    )

    app = web.Application(logger=logger, middlewares=[bearer_token_middleware])
    app[CONNECTOR] = connector
    app[MEMBER_SERVICE] = service
    app[TOKEN_SERVICE] = TokenService.from_config(config)

    app.on_startup.append(_initialize_connector)
    app.on_cleanup.append(_close_connector)

    init_healthchecks(app)
    init_auth(app)
    init_views(app)

    return app


async def _initialize_connector(app: web.Application):
    await app[CONNECTOR].initialize()


async def _close_connector(app: web.Application):
    await app[CONNECTOR].close()
