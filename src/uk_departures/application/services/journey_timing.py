"""Translate preferred journey times into board time offsets."""

from datetime import datetime, time

# The boards API accepts offsets from -120 to 119 minutes
MIN_TIME_OFFSET = -120
MAX_TIME_OFFSET = 119


def time_offset_for(preferred: time | None, now: datetime) -> int:
    """Minutes from ``now`` to a preferred time of day today, clamped to the API range.

    Returns 0 when there is no preferred time.
    """
    if preferred is None:
        return 0
    target = datetime.combine(now.date(), preferred, tzinfo=now.tzinfo)
    minutes = int((target - now).total_seconds() // 60)
    return max(MIN_TIME_OFFSET, min(MAX_TIME_OFFSET, minutes))
