"""
Result caching for the intent router.
"""
from .result_cache import ResultCache, TTLCache

__all__ = ["ResultCache", "TTLCache"]
