import itertools
import time

import pytest

from advcache.rate import Limiter


def test_limit_is_reported():
    assert Limiter(250).limit() == 250


@pytest.mark.parametrize("bad", [0, -3])
def test_non_positive_limit_rejected(bad):
    with pytest.raises(ValueError):
        Limiter(bad)


def test_ticks_are_spaced_by_the_limit():
    limiter = Limiter(50)
    start = time.monotonic()
    values = list(itertools.islice(limiter.ticks(), 6))
    elapsed = time.monotonic() - start
    limiter.close()
    assert values == [1, 2, 3, 4, 5, 6]
    # five intervals of 20 ms must pass between six events
    assert elapsed >= 0.09


def test_ticks_stop_after_close():
    limiter = Limiter(1000)
    ticks = limiter.ticks()
    first = list(itertools.islice(ticks, 3))
    assert first == [1, 2, 3]
    limiter.close()
    assert list(ticks) == []