"""
Mock (local) integration clients.

The local store returns realistic seeded data without calling any external
API. Domain services use it when:
- the backend feature flag is off
- the availability probe reports the backend as down
- a remote call fails

Important:
- The local store follows the same call shapes as the remote endpoints.
- Payments have no local counterpart on purpose.
"""

from .local_store import LocalStore
from .storage import FileKeyValueStorage, MemoryKeyValueStorage

__all__ = ["FileKeyValueStorage", "LocalStore", "MemoryKeyValueStorage"]
