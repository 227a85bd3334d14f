"""
Backend availability probe.

Wraps one health-check call in a client-side timeout and collapses every
outcome to a bool. Callers only need the routing decision, so the failure
reason is logged (outside production) and dropped.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_SECONDS = 5.0


class AvailabilityProber:
    def __init__(self, api_client, timeout_seconds: float = DEFAULT_PROBE_TIMEOUT_SECONDS, production: bool = False):
        # api_client only needs an async health_check() method
        self.api_client = api_client
        self.timeout_seconds = timeout_seconds
        self.production = production

    async def is_available(self) -> bool:
        """
        True only when the health check completes cleanly within the timeout.
        Network errors, non-2xx responses, timeouts and errors raised while
        building the call all count as unavailable.
        """
        try:
            await asyncio.wait_for(self.api_client.health_check(), timeout=self.timeout_seconds)
        except Exception as e:
            if not self.production:
                logger.warning("Backend availability probe failed: %r", e)
            return False
        return True
