"""
Clock sources for "what month is it now".

Month options are computed from an injected clock so the selection list
can be pinned to a fixed date.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)


class SystemClock:
    """Wall-clock date in a configured timezone"""

    def __init__(self, tz_name: Optional[str] = None):
        self.tz_name = tz_name or "UTC"
        try:
            self.tz = ZoneInfo(self.tz_name)
        except Exception as e:
            logger.warning(f"Unknown timezone {self.tz_name}: {e}. Falling back to UTC")
            self.tz_name = "UTC"
            self.tz = timezone.utc

    def today(self) -> date:
        return datetime.now(self.tz).date()


class FixedClock:
    """Always returns the same date"""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed
