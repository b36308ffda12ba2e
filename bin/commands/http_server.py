from cleo.helpers import option
from http_api.bin.http import run

from bin.commands.base import BaseAppCommand
from config import settings

SUBTITLE = "HTTP API"


class HTTPAPICommand(BaseAppCommand):
    """Run the REST API server.

    http-api
    """

    name = "http-api"
    description = "Run the REST API server."
    subtitle = SUBTITLE
    options = [
        option("mongo-uri", description="MongoDB connection string.", flag=False),
        option("db-name", description="Database holding the members.", flag=False),
        option(
            "collection-name",
            description="Collection holding the members.",
            flag=False,
        ),
        option("token-secret", description="Shared bearer token.", flag=False),
        option("host", description="Interface to bind.", flag=False),
        option("port", "p", description="Port to listen on.", flag=False),
    ]

    def handle(self) -> int:
        try:
            config = self.resolve_config()
        except ValueError as e:
            self.line_error(str(e), style="error")
            return 1
        self.line(
            f"Serving on <comment>{config.host}:{config.port}</comment>",
            style="info",
        )
        run(config)
        return 0

    def resolve_config(self) -> settings.Config:
        return settings.Config.resolve(
            mongo_uri=self.option("mongo-uri"),
            db_name=self.option("db-name"),
            collection_name=self.option("collection-name"),
            token_secret=self.option("token-secret"),
            host=self.option("host"),
            port=self.option("port"),
        )
