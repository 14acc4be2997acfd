import logging
import sys
from collections import defaultdict

LOGGER_NAME = "wrt2pdf"

_handler = None


class RepeatedMessageFilter(logging.Filter):
    """
    Logging filter that lets identical warnings through only once.
    - Font resolution runs for the report and for the test page, so the same
      substitution note would otherwise show up twice.
    - DEBUG/INFO records are never throttled.
    """
    def __init__(self, limit=1):
        super().__init__()
        self.limit = int(limit)
        self.counts = defaultdict(int)

    def filter(self, record):
        if record.levelno < logging.WARNING:
            return True
        key = (record.levelno, record.getMessage())
        self.counts[key] += 1
        return self.counts[key] <= self.limit


def setup_logging(debug=False, stream=None):
    """
    Attach one stderr handler to the wrt2pdf logger (replacing a previous one).
    Messages are user-facing diagnostics, hence the bare format.
    """
    global _handler
    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    _handler.addFilter(RepeatedMessageFilter())
    logger.addHandler(_handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = False
    return _handler
