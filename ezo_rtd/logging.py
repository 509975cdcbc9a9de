import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from ezo_rtd.config import get_settings


class RingBufferHandler(logging.Handler):
    """Keeps the most recent parse events, tagged with the parser that emitted them."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "parser": getattr(record, "parser", None),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: int | str = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(settings.logger_name, settings.log_ring_size, settings.log_level)


def _ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def recent_events() -> List[Dict]:
    handler = _ring_buffer(get_logger())
    return handler.get_events() if handler else []


def clear_events() -> None:
    handler = _ring_buffer(get_logger())
    if handler:
        handler.clear()
