from aiohttp import web

from app.auth.service import TokenService
from app.members.service import MemberQueryService
from db.mongo_connector import MongoConnector

CONNECTOR = web.AppKey("connector", MongoConnector)
MEMBER_SERVICE = web.AppKey("member_service", MemberQueryService)
TOKEN_SERVICE = web.AppKey("token_service", TokenService)


class BaseView(web.View):
    @property
    def service(self) -> MemberQueryService:
        return self.request.app[MEMBER_SERVICE]

    @property
    def tokens(self) -> TokenService:
        return self.request.app[TOKEN_SERVICE]
