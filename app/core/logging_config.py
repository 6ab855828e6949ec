# /app/core/logging_config.py

import logging
from sqlalchemy.engine import make_url

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Installs a single stream handler on the root logger."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def mask_database_url(url: str) -> str:
    """Returns the URL with any password replaced by asterisks, for log output."""
    return make_url(url).render_as_string(hide_password=True)
