import datetime
import pytz

from taxbroker import constants


ONE_WEEK: datetime.timedelta = datetime.timedelta(weeks=1)


def utc_now() -> datetime.datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.datetime.now(tz=pytz.utc)


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    """Naive datetimes are assumed to already be in UTC."""
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value.astimezone(pytz.utc)


def next_reset(now: datetime.datetime) -> datetime.datetime:
    """
    Finds the next weekly tax rate reset.

    :param now: the time to search forward from.

    If ``now`` falls exactly on a reset, the reset a week later is returned, so the
    result is always strictly in the future.

    :returns: the next reset as an aware UTC datetime.
    """
    now = _as_utc(now)

    days_ahead = (constants.RESET_WEEKDAY - now.weekday()) % 7
    reset_date = now.date() + datetime.timedelta(days=days_ahead)
    candidate = pytz.utc.localize(
        datetime.datetime.combine(reset_date, datetime.time(hour=constants.RESET_HOUR))
    )

    # We're on reset day, but the reset has already happened (or is happening right
    # now).
    if candidate <= now:
        candidate += ONE_WEEK

    return candidate


def publish_time(now: datetime.datetime) -> datetime.datetime:
    """
    The time after the next reset at which we should publish new reports. Gives
    universalis a few minutes to pick up the new rates.
    """
    return next_reset(now) + constants.PUBLISH_DELAY


def unix_timestamp(value: datetime.datetime) -> int:
    """Whole seconds since the epoch, for discord's ``<t:...>`` timestamp markup."""
    return int(_as_utc(value).timestamp())
