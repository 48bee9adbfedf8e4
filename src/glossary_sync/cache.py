"""
Simple in-memory cache shared by the glossary services.
"""
from typing import Any, Dict, Optional, Protocol


class CachePort(Protocol):
    """Minimal cache frontend used by the services."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class SimpleCache:
    """A simple singleton-like class for in-memory caching."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SimpleCache, cls).__new__(cls)
            cls._instance.entries: Dict[str, Any] = {}
        return cls._instance

    def get(self, key: str) -> Optional[Any]:
        return self.entries.get(key)

    def set(self, key: str, value: Any):
        self.entries[key] = value

    def remove(self, key: str) -> bool:
        """Drops a single key, returns whether it was present."""
        return self.entries.pop(key, None) is not None

    def clear(self) -> int:
        """Clears the cache and returns the count of cleared items."""
        count = len(self.entries)
        self.entries.clear()
        return count

# Global instance
cache = SimpleCache()

def get_cache() -> SimpleCache:
    """Get the global cache instance."""
    return cache
