"""Centralized logging configuration."""
import logging
import os

from dotenv import find_dotenv, load_dotenv

from advcalc import config


def configure_logging(level: str | None = None) -> None:
    """Configure logging for applications embedding the calculator.

    Without an explicit level, ADVCALC_LOG_LEVEL is read from the environment
    or a .env file in the working directory, falling back to config.LOG_LEVEL.
    """
    load_dotenv(find_dotenv(usecwd=True))
    level = level or os.getenv("ADVCALC_LOG_LEVEL", config.LOG_LEVEL)
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    logging.getLogger("advcalc").setLevel(log_level)
