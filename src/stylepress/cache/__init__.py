from stylepress.cache.store import CacheEntry, StylesheetCache

__all__ = ["CacheEntry", "StylesheetCache"]
