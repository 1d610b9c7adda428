"""config.py
Defaults for the content service, overridable through environment variables
(or a local .env file).
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class ContentDefaults:
    # ---- Content loader ----
    CONTENT_DIR: str = field(
        default_factory=lambda: os.getenv("PORTFOLIO_CONTENT_DIR", "content"),
        metadata={"description": "Directory holding about.md, experience.md, portfolio.md and contact.md"},
    )

    # ---- Upload route ----
    MAX_UPLOAD_BYTES: int = field(
        default_factory=lambda: int(os.getenv("PORTFOLIO_MAX_UPLOAD_BYTES", "262144")),
        metadata={"description": "Largest document accepted by POST /parse/{kind}"},
    )

    # ---- Logging ----
    LOG_LEVEL: str = field(
        default_factory=lambda: os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper(),
        metadata={"description": "Level for the portfolio_content logger"},
    )


# Import this where needed
CONTENT_DEFAULTS = ContentDefaults()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = CONTENT_DEFAULTS.LOG_LEVEL) -> logging.Logger:
    """Attach a console handler to the package logger once and apply the level."""
    logger = logging.getLogger("portfolio_content")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
