from textwrap import indent

from cleo.commands.command import Command
from cleo.io.io import IO

BANNER = r"""
 __  __                _                 ____                      _     
|  \/  | ___ _ __ ___ | |__   ___ _ __  / ___|  ___  __ _ _ __ ___| |__  
| |\/| |/ _ \ '_ ` _ \| '_ \ / _ \ '__| \___ \ / _ \/ _` | '__/ __| '_ \ 
| |  | |  __/ | | | | | |_) |  __/ |     ___) |  __/ (_| | | | (__| | | |
|_|  |_|\___|_| |_| |_|_.__/ \___|_|    |____/ \___|\__,_|_|  \___|_| |_|
"""


class BaseAppCommand(Command):

    banner = BANNER
    subtitle: str = None

    def hello(self):
        banner = self.banner.rstrip() if self.subtitle else self.banner
        self.line(banner, style="info")
        if self.subtitle:
            bannerlen = len(self.banner.lstrip().splitlines()[0])
            subtitlelen = len(self.subtitle.lstrip().splitlines()[0])
            prefix = " " * (bannerlen - subtitlelen)
            self.line(indent(self.subtitle.lstrip(), prefix=prefix), style="comment")

    def execute(self, io: IO) -> int:
        import constants
        from app.common import log
        from config import settings

        self._io = io

        # load .env if it exists
        settings.load_env()

        # Say hello!
        self.hello()

        constants.APP_FACET = self.name
        app_settings = settings.App()
        log_settings = settings.Log()
        # Configure the top-level application runtime.
        log.configure(
            service=constants.APP_NAME,
            version=app_settings.version,
            json=log_settings.json_format,
            level=log_settings.level,
        )

        return super().execute(io)
