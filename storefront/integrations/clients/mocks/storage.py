"""
Key/value storage backends for the persisted cart.

MemoryKeyValueStorage is the default (process lifetime only, like a fresh
browser profile). FileKeyValueStorage keeps one JSON document per key under a
directory so the cart survives restarts of a local demo.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional

from storefront.integrations.contracts.interfaces import KeyValueStorage

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"[^A-Za-z0-9_.-]")


class MemoryKeyValueStorage(KeyValueStorage):
    def __init__(self) -> None:
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileKeyValueStorage(KeyValueStorage):
    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.root / f"{_SAFE_KEY.sub('_', key)}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        tmp_path.write_text(value, encoding="utf-8")
        tmp_path.replace(path)

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        if path.exists():
            path.unlink()
            logger.debug("Removed stored key %s (%s)", key, path)
