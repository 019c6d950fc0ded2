from datetime import datetime, timedelta, timezone

import pytest

from sweeper.classifier import is_old, retention_cutoff
from youtrack_api_util.models import Attachment

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
CUTOFF = datetime(2023, 10, 18, 12, 0, tzinfo=timezone.utc)


def test_retention_cutoff():
    assert retention_cutoff(NOW, 3) == CUTOFF


def test_retention_cutoff_leap_day():
    now = datetime(2024, 2, 29, 8, 30, tzinfo=timezone.utc)
    assert retention_cutoff(now, 3) == datetime(2021, 3, 1, 8, 30, tzinfo=timezone.utc)
    assert retention_cutoff(now, 4) == datetime(2020, 2, 29, 8, 30, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    'created, updated, expected',
    [
        (CUTOFF - timedelta(seconds=1), NOW, True),
        (NOW, CUTOFF - timedelta(days=1), True),
        (CUTOFF - timedelta(days=400), CUTOFF - timedelta(days=10), True),
        (CUTOFF, CUTOFF, False),
        (CUTOFF + timedelta(seconds=1), NOW, False),
        (CUTOFF - timedelta(days=1), None, True),
        (CUTOFF + timedelta(days=1), None, False),
    ],
)
def test_is_old(created, updated, expected):
    attachment = Attachment('1-1', 100, created, updated)
    assert is_old(attachment, 3, now=NOW) is expected


def test_is_old_uses_current_time_by_default():
    now = datetime.now(timezone.utc)
    assert is_old(Attachment('1-1', 1, now - timedelta(days=4 * 365)), 3)
    assert not is_old(Attachment('1-2', 1, now - timedelta(days=2 * 365)), 3)
