#!/usr/bin/env python3
"""
Demo: The identity function and the identity laws.

Applies identity to a few kinds of values, then shows that composing
with identity on either side changes nothing.
"""

from morphisms import identity, compose
from morphisms.examples import add_one, double


def main():
    # Identity on integers
    x = 42
    assert identity(x) == x
    print(f"id({x}) = {identity(x)}")

    # Identity on strings
    s = "hello"
    s_result = identity(s)
    assert s_result is s
    print(f'id("{s}") = "{s_result}"')

    # Identity on lists (same object back, nothing copied)
    v = [1, 2, 3]
    v_result = identity(v)
    assert v_result is v
    print(f"id({v}) = {v_result}")

    print("\nDemonstrating category theory identity laws:")

    test_val = 5

    # Left identity: compose(f, id) = f
    left_identity = compose(add_one, identity)
    assert left_identity(test_val) == add_one(test_val)
    print(f"Left identity: (id ∘ add_one)({test_val}) = add_one({test_val}) = {left_identity(test_val)}")

    # Right identity: compose(id, f) = f
    right_identity = compose(identity, double)
    assert right_identity(test_val) == double(test_val)
    print(f"Right identity: (double ∘ id)({test_val}) = double({test_val}) = {right_identity(test_val)}")

    print("\nIdentity function implementation successful!")


if __name__ == "__main__":
    main()
