"""
Base Service
=============

Foundation for all service classes. Provides a standardised
logger and a monotonic timer.
"""

import logging
import time


class BaseService:
    """
    All service classes inherit from this.

    Subclass example::

        class SearchService(BaseService):
            def search(self, query):
                self.logger.info("Searching for %r", query)
                ...

    Features:
        - ``cls.logger``: pre-configured logger using the subclass module name
        - ``cls.elapsed_ms(start)``: milliseconds since a ``time.perf_counter()`` mark
    """

    logger: logging.Logger = logging.getLogger(__name__)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        # Each subclass gets its own logger named after its module
        cls.logger = logging.getLogger(cls.__module__)

    @staticmethod
    def elapsed_ms(start: float) -> int:
        """Milliseconds elapsed since ``start`` (a ``time.perf_counter()`` value)."""
        return int((time.perf_counter() - start) * 1000)
