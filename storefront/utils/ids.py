"""Record identity generation for the local mock store."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Tuple

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat(moment: datetime) -> str:
    """ISO-8601 with millisecond precision and a Z suffix, like a JS Date."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IdGenerator:
    """
    Generates "{prefix}_{millis}" identities.

    Ids stay timestamp-shaped but never repeat within a process: a second id
    requested in the same millisecond (or after the clock steps backwards)
    takes the previous value + 1.
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._last_millis = 0

    def next(self, prefix: str) -> Tuple[str, datetime]:
        """Return (id, timestamp) taken from the same clock reading."""
        moment = self._clock()
        millis = int(moment.timestamp() * 1000)
        if millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return f"{prefix}_{millis}", moment
