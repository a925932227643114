"""
Law Checker: sample-based verification of the category laws.

Morphisms cannot be compared directly, only observed. This module runs
morphisms over a sample domain and reports whether:
    - identity preserves values
    - identity is a left and right unit of composition
    - composition is associative
    - identity composed with itself is identity

IMPORTANT: This is the analysis layer. It never catches what the
morphisms under test raise; those errors reach the caller unchanged.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from morphisms.identity import identity
from morphisms.composition import Morphism, compose, morphism_name

# The sample domain used when none is given: integers -10..9
DEFAULT_DOMAIN = range(-10, 10)

LEFT_IDENTITY = "left_identity"
RIGHT_IDENTITY = "right_identity"
ASSOCIATIVITY = "associativity"
IDENTITY_PRESERVES = "identity_preserves"
IDENTITY_SELF_COMPOSITION = "identity_self_composition"


@dataclass
class LawResult:
    """Outcome of checking one law over a sample domain."""
    law: str
    holds: bool = True
    samples_checked: int = 0
    subject: Optional[str] = None
    counterexample: Any = None
    expected: Any = None
    actual: Any = None


@dataclass
class LawReport:
    """Collection of law results for one set of morphisms."""

    results: List[LawResult] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def all_hold(self) -> bool:
        return all(r.holds for r in self.results)

    @property
    def failed(self) -> List[LawResult]:
        return [r for r in self.results if not r.holds]

    def get_result(self, law: str) -> Optional[LawResult]:
        for result in self.results:
            if result.law == law:
                return result
        return None


def _observably_equal(actual: Any, expected: Any) -> bool:
    if actual is expected:
        return True
    # a fresh NaN never equals another NaN
    if isinstance(actual, float) and isinstance(expected, float):
        if math.isnan(actual) and math.isnan(expected):
            return True
    return actual == expected


def _empty_domain_warning(law: str) -> str:
    return f"Empty sample domain for {law}: law holds vacuously"


def check_equivalent(left: Morphism, right: Morphism, domain: Iterable[Any] = DEFAULT_DOMAIN,
                     law: str = "equivalence", subject: Optional[str] = None) -> LawResult:
    """
    Check that two morphisms agree on every sample.

    Stops at the first input where the outputs differ and records it as
    the counterexample. The domain is consumed once, so generators work.
    """
    result = LawResult(law=law, subject=subject)

    for x in domain:
        expected = right(x)
        actual = left(x)
        result.samples_checked += 1
        if not _observably_equal(actual, expected):
            result.holds = False
            result.counterexample = x
            result.expected = expected
            result.actual = actual
            break

    if result.samples_checked == 0:
        warnings.warn(_empty_domain_warning(law), UserWarning)

    return result


def check_identity_preserves(values: Iterable[Any]) -> LawResult:
    """identity(x) == x and identity(x) is x for every value."""
    result = LawResult(law=IDENTITY_PRESERVES, subject="identity")
    for x in values:
        result.samples_checked += 1
        y = identity(x)
        if y is not x:
            result.holds = False
            result.counterexample = x
            result.expected = x
            result.actual = y
            break
    if result.samples_checked == 0:
        warnings.warn(_empty_domain_warning(IDENTITY_PRESERVES), UserWarning)
    return result


def check_left_identity(f: Morphism, domain: Iterable[Any] = DEFAULT_DOMAIN) -> LawResult:
    """compose(f, identity) behaves like f."""
    return check_equivalent(compose(f, identity), f, domain,
                            law=LEFT_IDENTITY, subject=morphism_name(f))


def check_right_identity(f: Morphism, domain: Iterable[Any] = DEFAULT_DOMAIN) -> LawResult:
    """compose(identity, f) behaves like f."""
    return check_equivalent(compose(identity, f), f, domain,
                            law=RIGHT_IDENTITY, subject=morphism_name(f))


def check_associativity(f: Morphism, g: Morphism, h: Morphism,
                        domain: Iterable[Any] = DEFAULT_DOMAIN) -> LawResult:
    """compose(compose(f, g), h) behaves like compose(f, compose(g, h))."""
    grouped_left = compose(compose(f, g), h)
    grouped_right = compose(f, compose(g, h))
    return check_equivalent(grouped_left, grouped_right, domain,
                            law=ASSOCIATIVITY, subject=grouped_left.name)


def check_identity_self_composition(domain: Iterable[Any] = DEFAULT_DOMAIN) -> LawResult:
    """compose(identity, identity) behaves like identity."""
    return check_equivalent(compose(identity, identity), identity, domain,
                            law=IDENTITY_SELF_COMPOSITION, subject="identity ∘ identity")


def verify_category_laws(f: Morphism, g: Morphism, h: Morphism,
                         domain: Iterable[Any] = DEFAULT_DOMAIN) -> LawReport:
    """
    Check every law against three composable morphisms.

    The domain is materialized once and reused by each check, so it
    must be finite.

    Returns a LawReport with one result per law and per morphism.
    """
    samples = list(domain)
    report = LawReport()

    if not samples:
        report.add_warning("Empty sample domain: every law holds vacuously")

    with warnings.catch_warnings():
        # already recorded on the report above
        warnings.simplefilter("ignore", UserWarning)

        report.results.append(check_identity_preserves(samples))
        for fn in (f, g, h):
            report.results.append(check_left_identity(fn, samples))
            report.results.append(check_right_identity(fn, samples))
        report.results.append(check_associativity(f, g, h, samples))
        report.results.append(check_identity_self_composition(samples))

    for result in report.failed:
        report.add_warning(
            f"{result.law} fails for {result.subject} at {result.counterexample!r}: "
            f"expected {result.expected!r}, got {result.actual!r}"
        )

    return report
