import logging

from app.utils.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging() -> None:
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    # basicConfig is a no-op once handlers exist (e.g. under uvicorn), so set the level explicitly.
    logging.getLogger("app").setLevel(level)
