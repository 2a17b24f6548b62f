"""
Persistent collections.

Fluent immutable wrappers over pyrsistent:
- PVectorX     - indexed vector (pvector)
- PStackX      - stack, top first (plist)
- POrderedSetX - insertion-ordered set (pvector + pset)
- PSetX        - hash set (pset)
- PBagX        - multiset (pbag)
"""

from .bag import PBagX
from .base import PersistentCollectionX
from .hash_set import PSetX
from .ordered_set import POrderedSetX
from .stack import PStackX
from .vector import PVectorX

__all__ = (
    "PBagX",
    "POrderedSetX",
    "PSetX",
    "PStackX",
    "PVectorX",
    "PersistentCollectionX",
)
