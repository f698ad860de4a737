from .functions import (
    utc_now,
    next_reset,
    publish_time,
    unix_timestamp,
    ONE_WEEK,
)

(
    utc_now,
    next_reset,
    publish_time,
    unix_timestamp,
    ONE_WEEK,
)
