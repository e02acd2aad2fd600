import time
from unittest.mock import patch

from avantutil.clock import Clock


def test_fresh_clock_reads_epoch():
    clock = Clock()
    assert clock.seconds() == 0
    assert clock.milliseconds() == 0


def test_update_uses_current_time():
    before = int(time.time())
    clock = Clock()
    clock.update()
    after = int(time.time())
    assert before <= clock.seconds() <= after


def test_seconds_and_milliseconds_agree():
    clock = Clock()
    clock.update()
    assert clock.seconds() == clock.milliseconds() // 1000


def test_values_fixed_between_updates():
    clock = Clock()
    clock.update()
    first = clock.milliseconds()
    time.sleep(0.01)
    assert clock.milliseconds() == first


def test_truncates_to_units():
    with patch("time.time_ns", return_value=1_700_000_123_456_789_000):
        clock = Clock()
        clock.update()
    assert clock.seconds() == 1_700_000_123
    assert clock.milliseconds() == 1_700_000_123_456


def test_update_moves_forward():
    clock = Clock()
    with patch("time.time_ns", return_value=5_000_000_000):
        clock.update()
    earlier = clock.milliseconds()
    with patch("time.time_ns", return_value=7_000_000_000):
        clock.update()
    assert clock.milliseconds() - earlier == 2000