"""Routing policy: availability probe, remote/local fallback, best-effort notifications."""

from .availability import AvailabilityProber
from .fallback import FallbackRouter
from .notifications import NotificationDispatcher, NotificationOutcome

__all__ = ["AvailabilityProber", "FallbackRouter", "NotificationDispatcher", "NotificationOutcome"]
