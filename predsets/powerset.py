"""
Powersets: sets of sets.

A Powerset is a predicate over Predicates of a base universe. Membership
is literal application, X(x). Quantifying over "every set of T" needs a
candidate domain; it is either the explicit family the powerset was
built from, or every subset of a bounded base universe.

The existential is native: a Witness (set plus the evidence that it is a
member) introduces it, and eliminating it hands the set to a
continuation. The choice descriptor the_set() takes explicit
UniquenessEvidence and refuses to run without it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import PreconditionViolation, UnprovableProposition
from .logic import (
    Proposition,
    Verdict,
    Witness,
    conj,
    exists,
    find_witness,
    forall,
    theorem,
)
from .sets import Predicate, set_of, seteq, subset
from .universe import MAX_POWERSET_BASE, Universe, same_universe


_logger = logging.getLogger(__name__)


# =============================================================================
# POWERSET
# =============================================================================

@dataclass(frozen=True, eq=False)
class Powerset:
    """
    A predicate over sets of `base`.

    Fields:
        base:   The universe the member sets range over
        test:   Membership test, applied to a Predicate
        name:   Name used in statements
        family: Candidate members (up to seteq), or None to enumerate
                every subset of a bounded base
    """
    base: Universe
    test: Callable[[Predicate], Any]
    name: str = "X"
    family: Optional[tuple] = None

    @classmethod
    def of(cls, base: Universe, *members: Predicate, name: Optional[str] = None) -> Powerset:
        """
        The family {members}; membership is up to seteq.

        A set that is one of the members is a member even when seteq
        cannot be decided over the base.
        """
        for member in members:
            if not same_universe(member.universe, base):
                raise PreconditionViolation(
                    f"{member.name} ranges over {member.universe.name}, not {base.name}"
                )
        if name is None:
            name = "{" + ", ".join(m.name for m in members) + "}"
        return cls(
            base=base,
            test=lambda x: (
                any(x is m for m in members) or any(seteq(x, m) for m in members)
            ),
            name=name,
            family=tuple(members),
        )

    def __call__(self, x: Predicate) -> bool:
        return bool(self.test(x))

    def __repr__(self) -> str:
        return f"Powerset({self.name} ⊆ ℘({self.base.name}))"

    def candidates(self, limit: int = MAX_POWERSET_BASE) -> Universe:
        """
        The sets quantifiers over this powerset range over.

        Raises:
            UnprovableProposition: If the base is unbounded and no family was given
            EnumerationLimitExceeded: If the base is too large to enumerate
        """
        if self.family is not None:
            pool = self.family
        else:
            pool = tuple(set_of(self.base, *members) for members in self.base.subsets(limit))
        return Universe(name=f"℘({self.base.name})", elements=tuple(pool))

    def members(self) -> tuple:
        """The candidate sets that belong to this powerset."""
        return tuple(x for x in self.candidates() if self(x))


def _over_candidates(X: Powerset, quantifier, body, statement: str) -> Proposition:
    # candidates() may raise, so it is only built while judging
    def judge() -> Verdict:
        return quantifier(X.candidates(), body, statement).check()
    return Proposition(statement, judge)


# =============================================================================
# MEMBERSHIP AND EXISTENCE
# =============================================================================

def set_elem(x: Predicate, X: Powerset) -> bool:
    """The set x is an element of the powerset X."""
    return X(x)


def set_ex(X: Powerset) -> Proposition:
    """X has at least one member."""
    return _over_candidates(
        X, exists, lambda x: set_elem(x, X), f"∃x. x ∈ {X.name}",
    )


def set_ex_intro(X: Powerset, x: Predicate) -> Witness:
    """
    Introduce the existential from a member.

    Raises:
        PreconditionViolation: If x is not a member of X
    """
    return Witness.intro(X, x, statement=f"∃x. x ∈ {X.name}")


def set_ex_elim(existence: Witness, continuation: Callable[[Predicate], Any]) -> Any:
    """Eliminate the existential into any result type."""
    return existence.elim(continuation)


def find_set_witness(X: Powerset) -> Optional[Witness]:
    """
    Search the candidates of X for a member.

    Raises:
        UnprovableProposition: If the candidates cannot be enumerated
    """
    return find_witness(X.candidates(), X, statement=f"∃x. x ∈ {X.name}")


# =============================================================================
# UNIQUENESS AND CHOICE
# =============================================================================

def set_single(X: Powerset) -> Proposition:
    """Any two members of X are seteq."""
    def body(x: Predicate):
        if not set_elem(x, X):
            return True
        return _over_candidates(
            X,
            forall,
            lambda y: (not set_elem(y, X)) or seteq(x, y),
            f"∀y ∈ {X.name}. {x.name} = y",
        )

    return _over_candidates(X, forall, body, f"single({X.name})")


def set_unique(X: Powerset) -> Proposition:
    return conj(set_ex(X), set_single(X), statement=f"unique({X.name})")


@dataclass(frozen=True, eq=False)
class UniquenessEvidence:
    """
    Evidence that a powerset has exactly one member, up to seteq.

    Fields:
        family:    The powerset the evidence is about
        existence: A witness for set_ex(family)
        proof:     Name of the caller's proof of set_single(family), or
                   None to decide it by evaluation

    Invariants enforced at construction:
    1. existence witnesses membership in family
    2. set_single(family) holds (by evaluation or by the named proof)
    """
    family: Powerset
    existence: Witness
    proof: Optional[str] = None

    def __post_init__(self):
        if not set_elem(self.existence.element, self.family):
            raise PreconditionViolation(
                f"{self.existence.element!r} is not a member of {self.family.name}"
            )
        verdict = self.single.verdict()
        if verdict is not Verdict.HOLDS:
            raise PreconditionViolation(
                f"single({self.family.name}) is {verdict.value}, uniqueness not shown"
            )

    @property
    def single(self) -> Proposition:
        """set_single(family), carrying the proof when one was named."""
        single = set_single(self.family)
        if self.proof is None:
            return single
        return theorem(single, self.proof)

    @property
    def witness(self) -> Predicate:
        return self.existence.element

    @classmethod
    def assume(cls, X: Powerset, witness: Predicate, reason: str) -> UniquenessEvidence:
        """
        Evidence supplied by the caller for non-enumerable powersets.

        The witness is still checked for membership; singleness is taken
        on the caller's `reason`.
        """
        return cls(family=X, existence=set_ex_intro(X, witness), proof=reason)


def find_unique_set(X: Powerset) -> Optional[UniquenessEvidence]:
    """
    Bounded "find unique match" search.

    Returns:
        UniquenessEvidence if X has exactly one member up to seteq,
        None if it has none or several

    Raises:
        UnprovableProposition: If the search cannot be decided
    """
    existence = find_set_witness(X)
    if existence is None:
        _logger.debug("%s has no member", X.name)
        return None
    verdict = set_single(X).verdict()
    if verdict is Verdict.NOT_ESTABLISHED:
        raise UnprovableProposition(f"single({X.name}) is not established")
    if verdict is Verdict.FAILS:
        _logger.debug("%s has more than one member", X.name)
        return None
    return UniquenessEvidence(family=X, existence=existence)


def the_set(X: Powerset, evidence: UniquenessEvidence) -> Predicate:
    """
    The unique member of X.

    Raises:
        PreconditionViolation: If evidence is not uniqueness evidence for X
    """
    if not isinstance(evidence, UniquenessEvidence):
        raise PreconditionViolation(
            f"the_set({X.name}) requires UniquenessEvidence, got {type(evidence).__name__}"
        )
    if evidence.family is not X:
        raise PreconditionViolation(
            f"evidence is about {evidence.family.name}, not {X.name}"
        )
    return evidence.witness


def the_set_prop(X: Powerset, evidence: UniquenessEvidence) -> Proposition:
    """the_set(X) ∈ X"""
    chosen = the_set(X, evidence)
    return theorem(
        Proposition(
            f"the_set({X.name}) ∈ {X.name}",
            lambda: Verdict.HOLDS if set_elem(chosen, X) else Verdict.FAILS,
        ),
        "the-set-prop",
    )


def the_set_lemma(X: Powerset, evidence: UniquenessEvidence) -> Proposition:
    """Every member of X is seteq to the_set(X)."""
    chosen = the_set(X, evidence)
    return theorem(
        _over_candidates(
            X,
            forall,
            lambda y: (not set_elem(y, X)) or seteq(y, chosen),
            f"∀y ∈ {X.name}. y = the_set({X.name})",
        ),
        "the-set-lemma",
    )


# =============================================================================
# GENERALIZED UNION AND INTERSECTION
# =============================================================================

def unions(X: Powerset) -> Predicate:
    """{y | ∃x ∈ X. y ∈ x}"""
    return Predicate(
        X.base,
        lambda y: _over_candidates(
            X, exists, lambda x: set_elem(x, X) and x(y), f"{y!r} ∈ ⋃{X.name}",
        ),
        f"⋃{X.name}",
    )


def intersections(X: Powerset) -> Predicate:
    """{y | ∀x ∈ X. y ∈ x}"""
    return Predicate(
        X.base,
        lambda y: _over_candidates(
            X, forall, lambda x: (not set_elem(x, X)) or x(y), f"{y!r} ∈ ⋂{X.name}",
        ),
        f"⋂{X.name}",
    )


def unions_upper_bound(X: Powerset) -> Proposition:
    """Every member of X is a subset of ⋃X."""
    union = unions(X)
    return theorem(
        _over_candidates(
            X,
            forall,
            lambda x: (not set_elem(x, X)) or subset(x, union),
            f"∀x ∈ {X.name}. x ⊆ ⋃{X.name}",
        ),
        "unions-upper-bound",
    )


def intersections_lower_bound(X: Powerset) -> Proposition:
    """⋂X is a subset of every member of X."""
    meet = intersections(X)
    return theorem(
        _over_candidates(
            X,
            forall,
            lambda x: (not set_elem(x, X)) or subset(meet, x),
            f"∀x ∈ {X.name}. ⋂{X.name} ⊆ x",
        ),
        "intersections-lower-bound",
    )
