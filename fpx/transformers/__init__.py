"""
Monad transformers.

- StreamT - stream nested in an outer effect (Option, list, Future, ...)
"""

from .stream_t import StreamT

__all__ = ("StreamT",)
