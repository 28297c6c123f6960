import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger("directivedocs")

_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity: int = 0):
    """Configure basic logging for the package.

    verbosity 0 keeps warnings and errors only, 1 adds progress (INFO),
    2 or more adds per-declaration details (DEBUG).
    """
    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    logger.setLevel(level)


def rfc3339(moment: Optional[datetime] = None) -> str:
    """Format a timestamp as RFC 3339 with second precision.

    Naive datetimes are taken as local time. UTC is written as ``Z``.
    """
    if moment is None:
        moment = datetime.now()
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = moment.isoformat(timespec='seconds')
    if stamp.endswith('+00:00'):
        stamp = stamp[:-6] + 'Z'
    return stamp
