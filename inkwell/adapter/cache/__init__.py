"""Post cache adapters."""

from .redis import MockPostCache, NullPostCache, RedisPostCache

__all__ = ["MockPostCache", "NullPostCache", "RedisPostCache"]
