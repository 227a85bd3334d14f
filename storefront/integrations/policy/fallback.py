"""Remote-or-local routing shared by every domain service.

Per call:
    backend disabled         -> LOCAL
    probe says unavailable   -> LOCAL
    remote call raises       -> LOCAL
    remote call succeeds     -> after_remote(result), then return the remote result

run_remote_only() has no LOCAL arm: each of the first three cases raises instead.

The two sources are never merged: one call is served entirely by one of them.
"""
from typing import Any, Awaitable, Callable, Optional, Type, TypeVar

import logging

from .availability import AvailabilityProber

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackRouter:
    """Decides, per call, whether the remote backend or the local store serves it."""

    def __init__(self, prober: AvailabilityProber, backend_enabled: bool = True, production: bool = False):
        self.prober = prober
        self.backend_enabled = backend_enabled
        self.production = production

    async def backend_available(self) -> bool:
        if not self.backend_enabled:
            return False
        return await self.prober.is_available()

    async def run(
        self,
        operation: str,
        remote: Callable[[], Awaitable[T]],
        local: Callable[[], T],
        after_remote: Optional[Callable[[T], Awaitable[Any]]] = None,
    ) -> T:
        if await self.backend_available():
            try:
                result = await remote()
            except Exception as e:
                if not self.production:
                    logger.warning("Remote %s failed, using local store: %s", operation, e)
            else:
                logger.debug("%s served by remote backend", operation)
                if after_remote is not None:
                    await after_remote(result)
                return result

        logger.debug("%s served by local store", operation)
        return local()

    async def run_remote_only(
        self,
        operation: str,
        remote: Callable[[], Awaitable[T]],
        error_type: Type[Exception],
    ) -> T:
        """Like run() for operations with no local counterpart: every failure raises error_type."""
        if not self.backend_enabled:
            raise error_type(f"{operation} requires the backend, which is disabled.")
        if not await self.prober.is_available():
            raise error_type(f"{operation} failed: backend is unavailable.")
        try:
            return await remote()
        except error_type:
            raise
        except Exception as e:
            logger.error("Remote %s failed: %s", operation, e)
            raise error_type(f"{operation} failed: {e}") from e
