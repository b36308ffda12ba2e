import uvloop
from aiohttp import web
from http_api.client import factory

from config import settings


def run(config: settings.Config):
    app: web.Application = factory.create_app(config)
    web.run_app(
        app=app,
        host=config.host,
        port=config.port,
        loop=uvloop.new_event_loop(),
    )
