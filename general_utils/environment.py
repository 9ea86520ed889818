from __future__ import annotations

import logging
import os
from pathlib import Path
from types import SimpleNamespace
from typing import Mapping

from dotenv import dotenv_values, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_FILENAME = ".env"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Global configuration object. Populated by applications after startup.
Environment = SimpleNamespace()

_initialized = False


def _resolve(dotenv_path: str | os.PathLike[str] | None) -> Path:
    if dotenv_path is None:
        return Path.cwd() / DOTENV_FILENAME
    return Path(dotenv_path)


def load_environment(
    dotenv_path: str | os.PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """
    Merge the .env file with ``environ`` (os.environ by default) and return
    the result without touching the process environment.
    Values already present in ``environ`` win over the file.
    """
    base = dict(os.environ if environ is None else environ)
    try:
        values = dotenv_values(_resolve(dotenv_path))
    except (OSError, UnicodeDecodeError) as err:
        logger.warning("Failed to read %s: %s", dotenv_path or DOTENV_FILENAME, err)
        return base

    merged = {key: value for key, value in values.items() if value is not None}
    merged.update(base)
    return merged


def init_environment(dotenv_path: str | os.PathLike[str] | None = None, *, force: bool = False) -> bool:
    """
    Load variables from the .env file into os.environ, keeping existing ones.
    Runs once per process unless ``force`` is set. Never raises on a missing
    or unreadable file.
    """
    global _initialized
    if _initialized and not force:
        return False
    _initialized = True

    try:
        path = _resolve(dotenv_path)
        if not path.is_file():
            logger.debug("No %s found, using process environment only", path)
            return False
        applied = load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as err:
        logger.warning("Failed to load %s: %s", dotenv_path or DOTENV_FILENAME, err)
        return False
    logger.debug("Environment loaded from %s", path)
    return applied


def configure_logging(level: str | int | None = None) -> None:
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.strip().upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


init_environment()
