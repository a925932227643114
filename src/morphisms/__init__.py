"""
Morphisms Package

Identity and composition of plain Python callables, treated as
morphisms of a category, plus tools to check the category laws.

ARCHITECTURAL GUARANTEE:
------------------------
Everything in this package is:
    - Stateless
    - Synchronous
    - Free of I/O (demo scripts do the printing)

Morphisms are never compared, only their outputs on common inputs.
"""

from .identity import identity
from .composition import Composed, CompositionTypeError, compose, compose_all

__version__ = "0.1.0"

__all__ = ["identity", "compose", "compose_all", "Composed", "CompositionTypeError"]
