import logging
import threading
from signal import SIGINT, SIGTERM, signal

from .logs import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


class Shutdown:
    """
    Shutdown flag raised by SIGINT/SIGTERM. The broker client checks it between two
    polls of the response queue.
    """

    def __init__(self):
        self.event = threading.Event()

    def install(self) -> "Shutdown":
        signal(SIGINT, self._handler)
        signal(SIGTERM, self._handler)
        return self

    def _handler(self, signum, frame):
        logger.warning("Shutdown requested", {"signal": signum})
        self.stop()

    def stop(self):
        self.event.set()

    @property
    def requested(self) -> bool:
        return self.event.is_set()
