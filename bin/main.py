import warnings

from cleo.application import Application

import constants
from bin.commands import COMMANDS
from config import settings

warnings.filterwarnings("ignore", category=DeprecationWarning)


class Main(Application):
    def __init__(self):
        app_settings = settings.App()
        super().__init__(constants.APP_NAME, app_settings.version)


app = Main()
for command in COMMANDS:
    app.add(command())

run = app.run
