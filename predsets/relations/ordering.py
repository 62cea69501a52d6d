"""
The subrelation preorder and the orderings derived from it.

    subrel(R1, R2)   — ∀x, y. R1(x, y) ⇒ R2(x, y)
    releq(R1, R2)    — subrel both ways (subset-based equality)
    psubrel(R1, R2)  — subrel(R1, R2) ∧ ¬releq(R1, R2)

emptyrel is the least element and fullrel the greatest. Transitivity of
psubrel needs the extensionality postulate and lives in
predsets.relations.equality with the other results that rely on it.
"""

from __future__ import annotations

from ..logic import Proposition, conj, forall, iff, implies, neg, theorem
from .core import Relation, check_same_type, emptyrel, fullrel


# =============================================================================
# SUBRELATION
# =============================================================================

def subrel(R1: Relation, R2: Relation) -> Proposition:
    """
    R1 ⊆ R2 as relations.

    Raises:
        UniverseMismatch: If R1 and R2 relate different universes
    """
    check_same_type(R1, R2)
    return forall(
        R1.source,
        lambda x: forall(R1.target, lambda y: (not R1(x, y)) or R2(x, y)),
        f"{R1.name} ⊆ {R2.name}",
    )


def subrel_refl(R: Relation) -> Proposition:
    return theorem(subrel(R, R), "subrel-refl")


def subrel_trans(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    return theorem(
        implies(conj(subrel(R1, R2), subrel(R2, R3)), subrel(R1, R3)),
        "subrel-trans",
    )


def subrel_prop(R1: Relation, R2: Relation, P: Relation) -> Proposition:
    """A property holding on all of R2 holds on any subrelation R1."""
    return theorem(
        implies(conj(subrel(R2, P), subrel(R1, R2)), subrel(R1, P)),
        "subrel-prop",
    )


def subrel_emptyrel_lower_bound(R: Relation) -> Proposition:
    return theorem(subrel(emptyrel(R.source, R.target), R), "subrel-emptyrel-lower-bound")


def subrel_fullrel_upper_bound(R: Relation) -> Proposition:
    return theorem(subrel(R, fullrel(R.source, R.target)), "subrel-fullrel-upper-bound")


# =============================================================================
# SUBSET-BASED EQUALITY
# =============================================================================

def releq(R1: Relation, R2: Relation) -> Proposition:
    """Subset-based equality of relations."""
    return conj(subrel(R1, R2), subrel(R2, R1), statement=f"{R1.name} ≡ {R2.name}")


def releq_refl(R: Relation) -> Proposition:
    return theorem(releq(R, R), "releq-refl")


def releq_sym(R1: Relation, R2: Relation) -> Proposition:
    return theorem(implies(releq(R1, R2), releq(R2, R1)), "releq-sym")


def releq_trans(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    return theorem(
        implies(conj(releq(R1, R2), releq(R2, R3)), releq(R1, R3)),
        "releq-trans",
    )


# =============================================================================
# PROPER SUBRELATION
# =============================================================================

def psubrel(R1: Relation, R2: Relation) -> Proposition:
    return conj(
        subrel(R1, R2),
        neg(releq(R1, R2)),
        statement=f"{R1.name} ⊂ {R2.name}",
    )


def psubrel_antirefl(R: Relation) -> Proposition:
    return theorem(neg(psubrel(R, R)), "psubrel-antirefl")


def psubrel_antisym(R1: Relation, R2: Relation) -> Proposition:
    """No two relations are mutually proper subrelations."""
    return theorem(
        neg(conj(psubrel(R1, R2), psubrel(R2, R1))),
        "psubrel-antisym",
    )


def psubrel_emptyrel(R: Relation) -> Proposition:
    empty = emptyrel(R.source, R.target)
    return theorem(
        implies(psubrel(empty, R), neg(releq(R, empty))),
        "psubrel-emptyrel",
    )


def psubrel_emptyrel_conv(R: Relation) -> Proposition:
    empty = emptyrel(R.source, R.target)
    return theorem(
        implies(neg(releq(R, empty)), psubrel(empty, R)),
        "psubrel-emptyrel-conv",
    )


def psubrel_emptyrel_equiv(R: Relation) -> Proposition:
    """∅ ⊂ R exactly when R is not (subset-)equal to ∅."""
    empty = emptyrel(R.source, R.target)
    return theorem(
        iff(psubrel(empty, R), neg(releq(R, empty))),
        "psubrel-emptyrel-equiv",
    )
