from __future__ import annotations
import logging
import sys

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_HANDLER_NAME = 'backoffice-stdout'


def configure_logging(app) -> None:
    """Attach one stdout handler to the package logger and align app.logger level.

    Safe to call once per app instance; repeated calls (tests build several apps)
    do not stack handlers.
    """
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')), logging.INFO)
    pkg_logger = logging.getLogger('backoffice')
    if not any(h.get_name() == _HANDLER_NAME for h in pkg_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    app.logger.setLevel(level)

__all__ = ['configure_logging']
