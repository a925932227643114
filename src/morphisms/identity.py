"""
The identity morphism.

For every type A, id_A : A -> A maps each value to itself.
It is the two-sided unit of composition:
    - compose(f, identity) behaves like f
    - compose(identity, f) behaves like f
"""

from typing import TypeVar

T = TypeVar("T")


def identity(x: T) -> T:
    """
    Return the input unchanged.

    The very same object comes back (``identity(x) is x``). Nothing is
    copied, so this works for values that cannot be copied or compared.
    """
    return x
