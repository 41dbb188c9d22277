from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

from lecture_attendance.common.datetime_utils import day_window, parse_iso_datetime, resolve_day
from lecture_attendance.common.locks import KeyedLock


def test_day_window_bounds():
    start, end = day_window(datetime(2025, 3, 10, 14, 5, 6, 789))

    assert start == datetime(2025, 3, 10, 0, 0, 0, 0)
    assert end == datetime(2025, 3, 10, 23, 59, 59, 999000)


def test_day_window_at_midnight_edges():
    assert day_window(datetime(2025, 3, 10))[0] == datetime(2025, 3, 10)
    assert day_window(datetime(2025, 3, 10, 23, 59, 59, 999999))[0] == datetime(2025, 3, 10)


def test_resolve_day_defaults_to_now():
    now = datetime(2025, 1, 2, 3, 4, 5)
    assert resolve_day(None, now=now) == now
    assert resolve_day("", now=now) == now
    assert resolve_day("   ", now=now) == now


def test_resolve_day_parses_dates_and_datetimes():
    assert resolve_day("2025-03-10") == datetime(2025, 3, 10)
    assert resolve_day("2025-03-10T08:15:00") == datetime(2025, 3, 10, 8, 15)


def test_resolve_day_garbage_falls_back_to_now():
    now = datetime(2025, 1, 2, 3, 4, 5)
    assert resolve_day("yesterday-ish", now=now) == now


def test_aware_timestamps_become_local_naive():
    parsed = parse_iso_datetime("2025-03-10T12:00:00Z")
    expected = datetime(2025, 3, 10, 12, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)

    assert parsed.tzinfo is None
    assert parsed == expected


def test_keyed_lock_releases_idle_keys():
    locks = KeyedLock()
    with locks.hold(("L1", "2025-03-10")):
        assert len(locks) == 1
    assert len(locks) == 0


def test_keyed_lock_other_keys_do_not_block():
    locks = KeyedLock()
    entered = threading.Event()

    def other():
        with locks.hold("B"):
            entered.set()

    with locks.hold("A"):
        t = threading.Thread(target=other)
        t.start()
        assert entered.wait(timedelta(seconds=2).total_seconds())
        t.join()
