import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
CURRENT_DIR = Path(os.path.dirname(os.path.abspath(__file__)))
load_dotenv((CURRENT_DIR / '.env').as_posix())

logger = logging.getLogger(__name__)

DEFAULT_DB_URL = 'sqlite://'  # In-memory, lives as long as the process
DEFAULT_STUDENTS_FILE = 'students.txt'
DEFAULT_NUM_WORKERS = 2
LOG_FORMAT = '%(levelname)s: %(message)s'


@dataclass(frozen=True)
class Settings:
    db_url: str
    db_echo: bool
    students_file: str
    num_workers: int
    log_level: str


def _getenv(name: str, default: str) -> str:
    value = os.getenv(name, default).strip()
    return value if value else default


def _getenv_int(name: str, default: int) -> int:
    raw = _getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value < 1:
        logger.warning(f"{name} must be at least 1, using {default}")
        return default
    return value


def get_settings() -> Settings:
    """Build the settings from the environment (the only place env vars are read)."""
    return Settings(
        db_url=_getenv('STUDENTS_DB_URL', DEFAULT_DB_URL),
        db_echo=os.getenv('DB_ECHO', 'False') == 'True',
        students_file=_getenv('STUDENTS_FILE', DEFAULT_STUDENTS_FILE),
        num_workers=_getenv_int('NUM_WORKERS', DEFAULT_NUM_WORKERS),
        log_level=_getenv('LOG_LEVEL', 'INFO').upper(),
    )


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


def configure_logging(level: str = 'INFO'):
    """
    Send informational records to stdout and failures to stderr.

    Safe to call more than once; previously installed handlers are replaced.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    info_handler = logging.StreamHandler(sys.stdout)
    info_handler.setFormatter(formatter)
    info_handler.addFilter(_BelowWarning())

    error_handler = logging.StreamHandler(sys.stderr)
    error_handler.setFormatter(formatter)
    error_handler.setLevel(logging.WARNING)

    root.addHandler(info_handler)
    root.addHandler(error_handler)
    root.setLevel(getattr(logging, level, logging.INFO))
