from .http_server import HTTPAPICommand

COMMANDS = (HTTPAPICommand,)
