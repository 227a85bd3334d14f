"""
Best-effort secondary effects.

A primary write (order, subscription, contact message) is committed first;
its notification email is dispatched afterwards. A failed or timed-out
notification is logged and recorded in `outcomes`, never raised, and never
rolls back the primary write. Each send is bounded by `timeout_seconds` so a
hanging email endpoint cannot hold the caller past that bound.
"""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Awaitable, Callable, Deque, List, Optional

from storefront.utils.ids import utc_now

logger = logging.getLogger(__name__)


@dataclass
class NotificationOutcome:
    name: str
    delivered: bool
    error: Optional[str] = None
    timestamp: datetime = field(default_factory=utc_now)


class NotificationDispatcher:
    def __init__(self, max_outcomes: int = 200, timeout_seconds: Optional[float] = 10.0) -> None:
        self.outcomes: Deque[NotificationOutcome] = deque(maxlen=max_outcomes)
        self.timeout_seconds = timeout_seconds

    async def dispatch(self, name: str, send: Callable[[], Awaitable[Any]]) -> NotificationOutcome:
        try:
            await asyncio.wait_for(send(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            logger.error("Notification %s timed out after %ss (primary write kept)", name, self.timeout_seconds)
            outcome = NotificationOutcome(name=name, delivered=False, error="timed out")
        except Exception as e:
            logger.error("Notification %s failed (primary write kept): %s", name, e)
            outcome = NotificationOutcome(name=name, delivered=False, error=str(e) or type(e).__name__)
        else:
            logger.info("Notification %s delivered", name)
            outcome = NotificationOutcome(name=name, delivered=True)
        self.outcomes.append(outcome)
        return outcome

    @property
    def failures(self) -> List[NotificationOutcome]:
        return [o for o in self.outcomes if not o.delivered]
