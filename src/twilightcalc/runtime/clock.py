"""Clock source for twilight queries.

Supplies the query instant as UTC epoch milliseconds. A clock can be
pinned to a fixed instant for reproducible runs.
"""
from datetime import datetime, timezone
from threading import RLock
from typing import Optional

from ..core.timebase import to_epoch_millis


class Clock:
    """Wall clock, optionally pinned to a fixed instant."""

    def __init__(self, fixed_time: Optional[datetime] = None):
        """Initialize clock.

        Args:
            fixed_time: Instant to report instead of the current UTC time
        """
        self._lock = RLock()
        self._fixed_time = self._as_utc(fixed_time) if fixed_time else None

    @staticmethod
    def _as_utc(dt: datetime) -> datetime:
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    def now(self) -> datetime:
        """Get the current instant as an aware UTC datetime."""
        with self._lock:
            if self._fixed_time is not None:
                return self._fixed_time
        return datetime.now(timezone.utc)

    def now_millis(self) -> int:
        """Get the current instant in epoch milliseconds."""
        return to_epoch_millis(self.now())

    def set_time(self, new_time: Optional[datetime]) -> None:
        """Pin the clock to an instant, or unpin it with None.

        Args:
            new_time: The instant to report from now on
        """
        with self._lock:
            self._fixed_time = self._as_utc(new_time) if new_time else None

    def is_fixed(self) -> bool:
        """Check if the clock is pinned."""
        with self._lock:
            return self._fixed_time is not None

    def __repr__(self) -> str:
        """String representation."""
        status = "fixed" if self.is_fixed() else "wall"
        return f"Clock({self.now().isoformat()}, {status})"
