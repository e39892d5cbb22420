# movecalc/logs.py
import logging
from typing import Optional

from movecalc.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach one stream handler to the package logger. Safe to call on every Streamlit rerun."""
    global _configured
    level = (level or get_settings().LOG_LEVEL).upper()
    pkg_logger = logging.getLogger("movecalc")
    pkg_logger.setLevel(getattr(logging, level, logging.INFO))
    if _configured:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    _configured = True
