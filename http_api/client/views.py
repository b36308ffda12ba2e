from __future__ import annotations

import http
import traceback

import structlog
from aiohttp import web
from http_api.client.base_view import BaseView
from http_api.client.utils import create_member_page_response, query_to_mapping

from db.model import MemberPage

logger = structlog.getLogger(__name__)


def init_views(app: web.Application):
    app.router.add_view("/api/members", GetMembersView)
    app.router.add_view("/api/members/", GetMembersView)


class GetMembersView(BaseView):
    async def get(self):
        raw_query = query_to_mapping(self.request.query)

        try:
            page: MemberPage = await self.service.get_members(raw_query)
        except Exception as e:
            stack_trace = traceback.format_exc()
            logger.error(
                f"Error in calling get_members: {stack_trace}",
                error_message=str(e),
                error_type=type(e).__name__,
            )
            return web.json_response(
                data={"message": "Internal Server Error"},
                status=http.HTTPStatus.INTERNAL_SERVER_ERROR,
            )

        logger.info(
            "Found member record(s) for the query",
            filters=sorted(raw_query.keys()),
            count=page.count,
            returned=len(page.data),
        )
        return web.json_response(
            data=create_member_page_response(page),
            status=http.HTTPStatus.OK,
        )
