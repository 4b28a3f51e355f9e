"""Key-value cache for computed route and weather results."""

import json
import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Serialized blob and the time it was written."""
    data: str
    created_at: datetime


class TTLCache:
    """
    Thread-safe key-value cache whose entries go stale after a fixed age.

    Blobs are stored as JSON text, so callers always get back a fresh
    copy of what they put in. When full, the oldest write is evicted.

    Usage:
        cache = TTLCache(ttl_seconds=3600, name="route_cache")
        cache.put("route:a:b", {"distance": 100})
        cache.get("route:a:b")
    """

    def __init__(self, ttl_seconds: int, max_size: int = 1000, name: str = "default"):
        self.ttl = timedelta(seconds=ttl_seconds)
        self.max_size = max_size
        self.name = name

        self._entries: "OrderedDict[str, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str, now: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
        """
        Get a fresh blob from the cache.

        Args:
            key: Cache key
            now: Reference time for the freshness check (defaults to current UTC time)

        Returns:
            The decoded blob, or None if missing or older than the TTL
        """
        now = now or datetime.now(timezone.utc)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug(f"Cache '{self.name}' miss: {key}")
                return None

            if now - entry.created_at >= self.ttl:
                del self._entries[key]
                logger.debug(f"Cache '{self.name}' expired: {key}")
                return None

        logger.debug(f"Cache '{self.name}' hit: {key}")
        return json.loads(entry.data)

    def put(self, key: str, blob: Dict[str, Any], timestamp: Optional[datetime] = None) -> None:
        """
        Store a blob, replacing any previous entry for the key.

        Args:
            key: Cache key
            blob: JSON-serializable value
            timestamp: Write time (defaults to current UTC time)
        """
        entry = CacheEntry(json.dumps(blob), timestamp or datetime.now(timezone.utc))
        with self._lock:
            self._entries.pop(key, None)
            while len(self._entries) >= self.max_size:
                oldest_key, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache '{self.name}' evicted: {oldest_key}")
            self._entries[key] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
