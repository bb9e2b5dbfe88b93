import logging
import os
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_LEVEL = "WARNING"
TRUTHY = {"1", "true", "yes", "on"}


def _as_bool(value, default):
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUTHY


def load_settings(dotenv_path=None):
    """Read settings from the environment, after loading a .env file if present."""
    load_dotenv(dotenv_path)

    log_level = os.getenv("FSMENU_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL

    return {
        "log_level": log_level,
        "log_file": os.getenv("FSMENU_LOG_FILE") or None,
        "clear_screen": _as_bool(os.getenv("FSMENU_CLEAR_SCREEN"), True),
    }


def setup_logging(settings):
    logger = logging.getLogger("fsmenu")
    logger.setLevel(settings["log_level"])
    logger.handlers.clear()

    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False, markup=False))
    if settings["log_file"]:
        file_handler = logging.FileHandler(settings["log_file"], encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    # Keep records out of the root logger's handlers
    logger.propagate = False
    return logger
