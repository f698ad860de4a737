import datetime
import pytest
import pytz

from taxbroker import constants, date_utils


def sample_times(start: datetime.datetime) -> list:
    """Every 37 minutes for two weeks, so we land on every weekday and hour."""
    step = datetime.timedelta(minutes=37)
    return [start + step * i for i in range(int(datetime.timedelta(weeks=2) / step))]


class TestNextReset:
    def test_always_future_saturday_within_a_week(self, base_now: datetime.datetime):
        for now in sample_times(base_now):
            reset = date_utils.next_reset(now)

            assert reset > now
            assert reset - now <= datetime.timedelta(weeks=1)
            assert reset.weekday() == constants.RESET_WEEKDAY
            assert reset.hour == constants.RESET_HOUR
            assert (reset.minute, reset.second) == (0, 0)
            assert reset.tzinfo is not None

    def test_from_midweek(
        self, base_now: datetime.datetime, base_reset: datetime.datetime
    ):
        assert date_utils.next_reset(base_now) == base_reset

    def test_exactly_on_reset_rolls_a_week(self, base_reset: datetime.datetime):
        assert date_utils.next_reset(base_reset) == base_reset + date_utils.ONE_WEEK

    def test_saturday_before_reset(self, base_reset: datetime.datetime):
        just_before = base_reset - datetime.timedelta(seconds=1)
        assert date_utils.next_reset(just_before) == base_reset

    def test_reapplied_after_reset_advances_one_week(self, base_now: datetime.datetime):
        for now in sample_times(base_now):
            reset = date_utils.next_reset(now)
            later = date_utils.next_reset(reset + datetime.timedelta(seconds=1))
            assert later - reset == date_utils.ONE_WEEK

    def test_naive_treated_as_utc(
        self, base_now: datetime.datetime, base_reset: datetime.datetime
    ):
        naive = base_now.replace(tzinfo=None)
        assert date_utils.next_reset(naive) == base_reset

    def test_other_timezone(self, base_reset: datetime.datetime):
        # 02:30 saturday in new york is 06:30 UTC, half an hour before the reset.
        eastern = pytz.timezone("America/New_York")
        now = eastern.localize(datetime.datetime(2024, 5, 18, 2, 30))
        assert date_utils.next_reset(now) == base_reset


class TestPublishTime:
    def test_offset_from_reset(
        self, base_now: datetime.datetime, base_reset: datetime.datetime
    ):
        publish = date_utils.publish_time(base_now)
        assert publish == base_reset + constants.PUBLISH_DELAY

    def test_after_publish_lands_next_week(self, base_reset: datetime.datetime):
        # Once a cycle finishes, the next publish time is a full week away.
        finished = base_reset + constants.PUBLISH_DELAY + datetime.timedelta(seconds=5)
        publish = date_utils.publish_time(finished)
        assert publish == base_reset + date_utils.ONE_WEEK + constants.PUBLISH_DELAY


@pytest.mark.parametrize(
    "value,expected",
    [
        (pytz.utc.localize(datetime.datetime(1970, 1, 1, 0, 0, 0)), 0),
        (pytz.utc.localize(datetime.datetime(2024, 5, 18, 7, 0, 0)), 1716015600),
        (datetime.datetime(2024, 5, 18, 7, 0, 0), 1716015600),
    ],
)
def test_unix_timestamp(value: datetime.datetime, expected: int):
    assert date_utils.unix_timestamp(value) == expected
