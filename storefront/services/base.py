from __future__ import annotations

from typing import Any, Dict, List
from urllib.parse import quote

from storefront.integrations.clients.mocks.local_store import LocalStore
from storefront.integrations.clients.real_http.api_client import ApiClient
from storefront.integrations.policy.fallback import FallbackRouter


class FallbackService:
    """Shared wiring for the domain services that may be served by either source."""

    def __init__(self, api_client: ApiClient, store: LocalStore, router: FallbackRouter) -> None:
        self.api_client = api_client
        self.store = store
        self.router = router


def path_segment(value: str) -> str:
    return quote(str(value), safe="")


def records_of(result: Any, *keys: str) -> List[Dict[str, Any]]:
    """
    Pull a record list out of a list/envelope response.
    Remote bodies may be a bare list or an envelope like {"products": [...]}
    or {"data": [...]}; the local store always returns a list.
    """
    if isinstance(result, list):
        return result
    if isinstance(result, dict):
        for key in (*keys, "data", "items"):
            value = result.get(key)
            if isinstance(value, list):
                return value
    return []
