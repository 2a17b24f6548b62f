"""
Lift helpers with semantic namespaces.

    from fpx import lift as L

    L.up.optional(row)                       # Option
    L.up.from_option(opt, error=NotFound)    # LazyCoroResult
    L.down.or_else(opt, default)
    await L.down.to_result(lcr)

- L.up.*    - подъем значений в Option / LazyCoroResult
- L.down.*  - опускание обратно в значение
"""

from __future__ import annotations

from . import down, up
from .down import or_else, to_optional, to_result, unsafe
from .up import fail, from_option, from_result, optional, pure

__all__ = (
    # Namespaces
    "down",
    "up",
    # Up
    "fail",
    "from_option",
    "from_result",
    "optional",
    "pure",
    # Down
    "or_else",
    "to_optional",
    "to_result",
    "unsafe",
)
