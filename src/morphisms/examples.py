"""
Example morphisms used by the demos and tests.

Small annotated functions on int and str, plus a few prebuilt pipelines
that exercise composition with and without identity.
"""
from typing import Dict

from morphisms.identity import identity
from morphisms.composition import Morphism, compose, compose_all


def add_one(x: int) -> int:
    return x + 1


def double(x: int) -> int:
    return x * 2


def triple(x: int) -> int:
    return x * 3


def subtract_three(x: int) -> int:
    return x - 3


def add_ten(x: int) -> int:
    return x + 10


def to_uppercase(s: str) -> str:
    return s.upper()


def add_exclamation(s: str) -> str:
    return s + "!"


def length(s: str) -> int:
    return len(s)


def build_example_pipelines() -> Dict[str, Morphism]:
    """
    Build the named example compositions.

    add_one_then_double(5) == 12
    shout("hello") == "HELLO!"
    shout_length("hello") == 6
    """
    return {
        "add_one_then_double": compose(add_one, double),
        "shout": compose(to_uppercase, add_exclamation),
        "shout_length": compose_all(to_uppercase, add_exclamation, length),
        "add_ten_left_identity": compose(add_ten, identity),
        "add_ten_right_identity": compose(identity, add_ten),
        "arithmetic_chain": compose(compose(add_one, double), subtract_three),
    }
