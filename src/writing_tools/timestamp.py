"""Wall-clock timestamps."""

from datetime import datetime
from typing import Optional

TIMESTAMP_FORMAT = "%Y%m%d%H%M"


def current_timestamp(now: Optional[datetime] = None) -> str:
    """Return local time as YYYYMMDDHHMM."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
