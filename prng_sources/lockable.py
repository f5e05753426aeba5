"""Mutex decorator that makes any :class:`Source64` safe to share across threads."""

import logging
import threading

from .sources import Source64

logger = logging.getLogger(__name__)


class LockableSource(Source64):
    """Serialize every call on one wrapped engine behind a single lock.

    The wrapper owns the engine: keep no other reference to it, or the
    mutual exclusion no longer holds. Draw order across threads follows
    lock acquisition and is not FIFO-fair.
    """

    __slots__ = ("_lock", "_src")

    def __init__(self, src: Source64):
        if not isinstance(src, Source64):
            raise TypeError(f"expected a Source64, got {type(src).__name__}")
        self._lock = threading.Lock()
        self._src = src
        logger.debug("wrapped %s in a lock", type(src).__name__)

    def seed(self, seed: int) -> None:
        with self._lock:
            self._src.seed(seed)

    def int63(self) -> int:
        with self._lock:
            return self._src.int63()

    def uint64(self) -> int:
        with self._lock:
            return self._src.uint64()

    def jump(self):
        """Jump the wrapped engine; the returned source is unwrapped."""
        with self._lock:
            return self._src.jump()

    def long_jump(self):
        """Long-jump the wrapped engine; the returned source is unwrapped."""
        with self._lock:
            return self._src.long_jump()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._src!r})"
