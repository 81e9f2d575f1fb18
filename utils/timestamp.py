"""Wall-clock and calendar conversion utilities."""

import time
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_unix():
    """Current time in whole seconds since Unix epoch."""
    return int(time.time())


def to_datetime(unixtime):
    """UTC datetime for an epoch second count.

    Raises OverflowError when the result falls outside years 1..9999.
    """
    return _EPOCH + timedelta(seconds=unixtime)


def format_timestamp(epoch_s=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_s is None:
        epoch_s = time.time()

    dt = datetime.fromtimestamp(epoch_s, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
