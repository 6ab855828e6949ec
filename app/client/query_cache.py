# /app/client/query_cache.py

from typing import Any, Callable, Dict, Hashable, Tuple

Key = Tuple[Hashable, ...]


class QueryCache:
    """
    Memoizes read results by tuple key. Invalidation is by prefix: the key
    ("students",) drops ("students",) itself and any longer key starting with it.
    """

    def __init__(self):
        self._entries: Dict[Key, Any] = {}

    def fetch(self, key: Key, loader: Callable[[], Any]) -> Any:
        if key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]

    def invalidate(self, prefix: Key) -> int:
        stale = [key for key in self._entries if key[:len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: Key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
