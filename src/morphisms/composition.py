"""
Function composition.

Given f: A -> B and g: B -> C, compose(f, g) is the morphism A -> C
defined by x |-> g(f(x)).

Composition is associative:
    compose(compose(f, g), h)  behaves like  compose(f, compose(g, h))

IMPORTANT:
    Composing evaluates nothing. f and g only run when the composed
    morphism is called, and whatever they raise reaches the caller
    untouched.

Type checking:
    Domains and codomains are read from annotations. Only plain classes
    are checked. TypeVars, Any and generic aliases (List[int], ...) are
    treated as unknown and always accepted.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, List, Optional, Tuple

from .identity import identity

Morphism = Callable[[Any], Any]

# int is accepted where float is expected, int and float where complex is
_NUMERIC_PROMOTIONS = {
    float: (int,),
    complex: (int, float),
}


class CompositionTypeError(TypeError):
    """Raised when two morphisms cannot be composed."""
    pass


@dataclass(frozen=True)
class Composed:
    """
    The morphism x |-> second(first(x)).

    Built by compose(). It is itself a morphism, so it can be composed
    again, which is what makes nested pipelines and the associativity
    law expressible.

    Properties:
        first: Applied to the input (f)
        second: Applied to the result of first (g)
        domain: Input type, if known
        codomain: Output type, if known
        name: Readable name in the usual "g ∘ f" notation
    """

    first: Morphism
    second: Morphism

    def __call__(self, x: Any) -> Any:
        return self.second(self.first(x))

    @property
    def domain(self) -> Optional[type]:
        domain = signature_of(self.first)[0]
        if domain is None and _only_identity(self.first):
            return signature_of(self.second)[0]
        return domain

    @property
    def codomain(self) -> Optional[type]:
        codomain = signature_of(self.second)[1]
        if codomain is None and _only_identity(self.second):
            return signature_of(self.first)[1]
        return codomain

    @property
    def name(self) -> str:
        return f"{morphism_name(self.second)} ∘ {morphism_name(self.first)}"

    def then(self, other: Morphism) -> Composed:
        """Fluent form of compose(self, other)."""
        return compose(self, other)


def _only_identity(morphism: Morphism) -> bool:
    """True if the morphism is identity or a composition of identities."""
    return all(leaf is identity for leaf in flatten(morphism))


def morphism_name(fn: Morphism) -> str:
    if isinstance(fn, Composed):
        return fn.name
    name = getattr(fn, "__name__", None)
    if name is None:
        return repr(fn)
    return name


def _concrete(annotation: Any) -> Optional[type]:
    """Return the annotation if it is a plain class we can check against."""
    if annotation is Any or annotation is inspect.Parameter.empty:
        return None
    if typing.get_origin(annotation) is not None:
        return None
    if isinstance(annotation, type):
        return annotation
    return None


def signature_of(fn: Morphism) -> Tuple[Optional[type], Optional[type]]:
    """
    Return (domain, codomain) of a morphism as far as annotations tell.

    Unknown sides are None. A class used as a function (int, str, ...)
    has itself as codomain. Composed morphisms report the domain of their
    first component and the codomain of their second.
    """
    if isinstance(fn, Composed):
        return fn.domain, fn.codomain
    if isinstance(fn, type):
        return None, fn
    # callable instances: the annotations live on __call__, not the class
    annotated = fn if inspect.isroutine(fn) else type(fn).__call__
    try:
        params = list(inspect.signature(fn).parameters.values())
        hints = typing.get_type_hints(annotated)
    except (TypeError, ValueError, NameError):
        # builtins, partials and unresolvable forward references
        return None, None

    domain = None
    if params:
        domain = _concrete(hints.get(params[0].name, inspect.Parameter.empty))
    codomain = _concrete(hints.get("return", inspect.Parameter.empty))
    return domain, codomain


def _accepts(expected: type, actual: type) -> bool:
    try:
        if issubclass(actual, expected):
            return True
    except TypeError:
        # protocols without @runtime_checkable cannot be checked
        return True
    return issubclass(actual, _NUMERIC_PROMOTIONS.get(expected, ()))


def _check_composable(f: Morphism, g: Morphism) -> None:
    for fn in (f, g):
        if not callable(fn):
            raise CompositionTypeError(
                f"Cannot compose non-callable {fn!r} of type {type(fn).__name__}"
            )

    _, codomain = signature_of(f)
    domain, _ = signature_of(g)
    if codomain is None or domain is None:
        return
    if not _accepts(domain, codomain):
        raise CompositionTypeError(
            f"Cannot compose {morphism_name(f)} returning {codomain.__name__} "
            f"with {morphism_name(g)} expecting {domain.__name__}"
        )


def compose(f: Morphism, g: Morphism) -> Composed:
    """
    Compose two unary functions: apply f, then g.

    Args:
        f: Morphism A -> B, applied first
        g: Morphism B -> C, applied to f's result

    Returns:
        Composed morphism A -> C

    Raises:
        CompositionTypeError: If either argument is not callable, or if
            the annotations show that f's output cannot feed g.

    Example:
        >>> compose(lambda x: x + 1, lambda x: x * 2)(5)
        12
    """
    _check_composable(f, g)
    return Composed(first=f, second=g)


def compose_all(*morphisms: Morphism) -> Morphism:
    """
    Compose left to right: compose_all(f, g, h) is compose(compose(f, g), h).

    With no arguments this is the identity.
    """
    if not morphisms:
        return identity
    return reduce(compose, morphisms)


def flatten(morphism: Morphism) -> List[Morphism]:
    """List the leaf morphisms of a (nested) composition in call order."""
    if isinstance(morphism, Composed):
        return flatten(morphism.first) + flatten(morphism.second)
    return [morphism]
