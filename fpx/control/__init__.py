"""Control combinators: retry for LazyCoroResult and for blocking calls."""

from .retry import BackoffStrategy, RetryPolicy, retry, retry_call

__all__ = (
    "BackoffStrategy",
    "RetryPolicy",
    "retry",
    "retry_call",
)
