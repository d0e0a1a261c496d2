"""Lazily evaluated predicates, assertion helpers and a failure-recording test spy."""

__version__ = "0.1.0"
__all__ = ["predicates", "testspy"]