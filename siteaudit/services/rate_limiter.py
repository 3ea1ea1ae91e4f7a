import logging
import time
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class RateLimiter(Protocol):
    """Called immediately before every outbound request."""

    def wait(self) -> None: ...


class FixedDelayRateLimiter:
    def __init__(self, delay_ms: int, sleep: Callable[[float], None] = time.sleep):
        self.delay_ms = max(0, int(delay_ms))
        self._sleep = sleep

    def wait(self) -> None:
        if self.delay_ms > 0:
            self._sleep(self.delay_ms / 1000.0)


class NoDelayRateLimiter:
    def wait(self) -> None:
        return None


def fixed_delay(delay_ms: int) -> RateLimiter:
    """Default `rate_limiter_factory`."""
    return FixedDelayRateLimiter(delay_ms)


def no_delay(delay_ms: int = 0) -> RateLimiter:
    return NoDelayRateLimiter()
