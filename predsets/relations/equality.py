"""
Leibniz equality of relations and the extensionality postulate.

rel_equal(R1, R2) says every predicate P over relations agrees on R1 and
R2: P(R1) ⇔ P(R2). The quantifier over P ranges over probes: one
membership probe R ↦ R(x, y) per pair, plus any probes the caller
supplies. The membership probes are what make

    rel_equal(R1, R2) ⇒ releq(R1, R2)

constructive. The converse,

    releq(R1, R2) ⇒ rel_equal(R1, R2)

does not follow from the predicate encoding. It is taken as the axiom
EXTENSIONALITY_AXIOM, and every proposition that relies on it carries
the axiom's name in Proposition.axioms. require_constructive() turns
such reliance into an ExtensionalityGap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..logic import (
    Proposition,
    Verdict,
    conj,
    forall,
    iff,
    implies,
    postulate,
    theorem,
    verdict_of,
)
from ..universe import Universe
from .core import Relation, check_same_type
from .ordering import psubrel, releq, subrel


_logger = logging.getLogger(__name__)


EXTENSIONALITY_AXIOM = "releq-implies-rel-equal"


# =============================================================================
# PROBES
# =============================================================================

@dataclass(frozen=True, eq=False)
class Probe:
    """A predicate over relations, used to instantiate the Leibniz quantifier."""
    name: str
    test: Callable[[Relation], Any]

    def __call__(self, R: Relation) -> bool:
        return bool(self.test(R))

    def on(self, R: Relation) -> Proposition:
        """The proposition P(R)."""
        return Proposition(f"{self.name}({R.name})", lambda: verdict_of(self(R)))


def membership_probe(x: Any, y: Any) -> Probe:
    """R ↦ R(x, y)"""
    return Probe(f"∋({x!r},{y!r})", lambda R: R(x, y))


def membership_probes(R: Relation) -> tuple:
    """
    One membership probe per pair of R's universes.

    Raises:
        UnprovableProposition: If either universe is unbounded
        EnumerationLimitExceeded: If there are too many pairs
    """
    return tuple(membership_probe(x, y) for x, y in R.source.product(R.target))


# =============================================================================
# LEIBNIZ EQUALITY
# =============================================================================

def rel_equal(R1: Relation, R2: Relation, probes: Iterable[Probe] = ()) -> Proposition:
    """
    ∀P. P(R1) ⇔ P(R2), with P ranging over the membership probes and `probes`.

    Raises:
        UniverseMismatch: If R1 and R2 relate different universes
    """
    check_same_type(R1, R2)
    extra = tuple(probes)
    statement = f"{R1.name} = {R2.name}"

    def judge() -> Verdict:
        domain = Universe(
            name="probes",
            elements=membership_probes(R1) + extra,
        )
        return forall(domain, lambda P: P(R1) == P(R2), statement).check()

    return Proposition(statement, judge)


def rel_equal_prop(R1: Relation, R2: Relation, P: Probe) -> Proposition:
    """rel_equal(R1, R2) ⇒ P(R1) ⇒ P(R2)"""
    return theorem(
        implies(rel_equal(R1, R2, (P,)), implies(P.on(R1), P.on(R2))),
        "rel-equal-prop",
    )


def rel_equal_refl(R: Relation, probes: Iterable[Probe] = ()) -> Proposition:
    return theorem(rel_equal(R, R, probes), "rel-equal-refl")


def rel_equal_sym(R1: Relation, R2: Relation, probes: Iterable[Probe] = ()) -> Proposition:
    probes = tuple(probes)
    return theorem(
        implies(rel_equal(R1, R2, probes), rel_equal(R2, R1, probes)),
        "rel-equal-sym",
    )


def rel_equal_trans(
    R1: Relation,
    R2: Relation,
    R3: Relation,
    probes: Iterable[Probe] = (),
) -> Proposition:
    probes = tuple(probes)
    return theorem(
        implies(
            conj(rel_equal(R1, R2, probes), rel_equal(R2, R3, probes)),
            rel_equal(R1, R3, probes),
        ),
        "rel-equal-trans",
    )


def rel_equal_implies_subrel(R1: Relation, R2: Relation) -> Proposition:
    """Instantiate P with the membership probe at each (x, y)."""
    return theorem(implies(rel_equal(R1, R2), subrel(R1, R2)), "rel-equal-implies-subrel")


def rel_equal_implies_releq(R1: Relation, R2: Relation) -> Proposition:
    return theorem(implies(rel_equal(R1, R2), releq(R1, R2)), "rel-equal-implies-releq")


# =============================================================================
# THE EXTENSIONALITY POSTULATE
# =============================================================================

def releq_implies_rel_equal(
    R1: Relation,
    R2: Relation,
    probes: Iterable[Probe] = (),
) -> Proposition:
    """
    releq(R1, R2) ⇒ rel_equal(R1, R2), by axiom.

    The verdict is HOLDS on the axiom's authority; check() still tests the
    statement against `probes`.
    """
    _logger.info("postulating %s for %s and %s", EXTENSIONALITY_AXIOM, R1.name, R2.name)
    return postulate(
        implies(releq(R1, R2), rel_equal(R1, R2, probes)),
        EXTENSIONALITY_AXIOM,
    )


def rel_equal_releq(R1: Relation, R2: Relation, probes: Iterable[Probe] = ()) -> Proposition:
    """Leibniz and subset-based equality coincide, given the postulate."""
    return theorem(
        iff(rel_equal(R1, R2, probes), releq(R1, R2)),
        "rel-equal-releq",
        axioms=(EXTENSIONALITY_AXIOM,),
    )


def psubrel_trans(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    """
    Proper subrelation is transitive.

    The proof transports psubrel(R1, R2) along releq(R1, R3), which needs
    the postulate.
    """
    return theorem(
        implies(conj(psubrel(R1, R2), psubrel(R2, R3)), psubrel(R1, R3)),
        "psubrel-trans",
        axioms=(EXTENSIONALITY_AXIOM,),
    )


def relies_on_extensionality(prop: Proposition) -> bool:
    return EXTENSIONALITY_AXIOM in prop.axioms
