import os
import logging


logger = logging.getLogger(__name__)


def get_setting(name: str, default: str | None = None) -> str | None:
    return os.environ.get(name, default)


class Settings:
    @property
    def log_level(self) -> str:
        return (get_setting("LOG_LEVEL", "INFO") or "INFO").upper()


def configure_logging(settings: Settings | None = None) -> None:
    """
    Set up root logging from LOG_LEVEL.

    The package never calls this itself; the application entry point that
    embeds the scorer should call it once at startup.
    """
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level)
    logger.debug("Logging configured at %s", settings.log_level)
