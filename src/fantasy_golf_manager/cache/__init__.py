from fantasy_golf_manager.cache.memo import CacheInfo, memoize_by_identity

__all__ = ["CacheInfo", "memoize_by_identity"]
