import pathlib

APP_NAME = "member-search"
APP_FACET = ""
PROJECT_DIR = pathlib.Path(__file__).resolve().parent
