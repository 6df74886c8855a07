"""Common utilities and exception classes."""


class SumocliError(Exception):
    """Base exception for sumocli."""


class FetchError(SumocliError):
    """HTTP fetch failure (connection error or non-200 response)."""


class CacheWriteError(SumocliError):
    """Failed to persist a fetched page to the cache."""
