from unittest.mock import Mock

from siteaudit.services.rate_limiter import FixedDelayRateLimiter, NoDelayRateLimiter, fixed_delay, no_delay


def test_fixed_delay_sleeps_configured_seconds():
    sleep = Mock()
    limiter = FixedDelayRateLimiter(250, sleep=sleep)
    limiter.wait()
    limiter.wait()
    assert sleep.call_count == 2
    sleep.assert_called_with(0.25)


def test_zero_delay_never_sleeps():
    sleep = Mock()
    FixedDelayRateLimiter(0, sleep=sleep).wait()
    sleep.assert_not_called()


def test_factories():
    assert isinstance(fixed_delay(100), FixedDelayRateLimiter)
    assert fixed_delay(100).delay_ms == 100
    assert isinstance(no_delay(1000), NoDelayRateLimiter)
    assert no_delay().wait() is None
