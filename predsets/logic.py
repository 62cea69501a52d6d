"""
Propositions, bounded quantifiers and witnesses.

A Proposition is a statement whose truth may or may not be decidable.
Its verdict is three-valued:

    HOLDS            — established, by evaluation over a bounded domain or by proof
    FAILS            — refuted by a counterexample
    NOT_ESTABLISHED  — the domain is unbounded or too large to decide

NOT_ESTABLISHED is never reported as FAILS. Propositions established by a
named proof or an axiom record that provenance, so callers can audit which
results rest on postulates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Iterable, Optional

from .errors import ExtensionalityGap, PreconditionViolation, UnprovableProposition
from .universe import Universe


_logger = logging.getLogger(__name__)


class Verdict(Enum):
    """Three-valued outcome of judging a proposition."""
    HOLDS = "holds"
    FAILS = "fails"
    NOT_ESTABLISHED = "not_established"


def verdict_of(value: bool) -> Verdict:
    return Verdict.HOLDS if value else Verdict.FAILS


# =============================================================================
# PROPOSITION
# =============================================================================

@dataclass(frozen=True, eq=False)
class Proposition:
    """
    A statement together with the means to judge it.

    Fields:
        statement: Human-readable statement, e.g. "reflexive(R)"
        judge:     Computes the verdict; may raise UnprovableProposition
        axioms:    Names of the axioms this proposition relies on
        proof:     Name of the proof establishing it, if any
    """
    statement: str
    judge: Callable[[], Verdict]
    axioms: frozenset = field(default_factory=frozenset)
    proof: Optional[str] = None

    def verdict(self) -> Verdict:
        """The verdict, taking any proof into account."""
        if self.proof is not None:
            return Verdict.HOLDS
        return self.check()

    def check(self) -> Verdict:
        """
        Judge the statement itself, ignoring any proof.

        This is how theorem statements are tested against finite fixtures.
        """
        try:
            return self.judge()
        except UnprovableProposition as e:
            _logger.debug("%s not established: %s", self.statement, e.reason)
            return Verdict.NOT_ESTABLISHED

    def holds(self) -> bool:
        """
        Collapse the verdict to a bool.

        Raises:
            UnprovableProposition: If the proposition is not established
        """
        verdict = self.verdict()
        if verdict is Verdict.NOT_ESTABLISHED:
            raise UnprovableProposition(f"{self.statement} is not established")
        return verdict is Verdict.HOLDS

    def __bool__(self) -> bool:
        return self.holds()

    def __and__(self, other: Proposition) -> Proposition:
        return conj(self, other)

    def __or__(self, other: Proposition) -> Proposition:
        return disj(self, other)

    def __invert__(self) -> Proposition:
        return neg(self)

    def __repr__(self) -> str:
        return f"Proposition({self.statement!r})"


def constant(statement: str, value: bool) -> Proposition:
    """A proposition with a fixed truth value."""
    verdict = verdict_of(value)
    return Proposition(statement, lambda: verdict)


def theorem(prop: Proposition, name: str, axioms: Iterable[str] = ()) -> Proposition:
    """Mark a proposition as established by the named proof."""
    return replace(prop, proof=name, axioms=prop.axioms | frozenset(axioms))


def postulate(prop: Proposition, axiom: str) -> Proposition:
    """Mark a proposition as established by an axiom rather than a proof."""
    return replace(prop, proof=f"axiom {axiom}", axioms=prop.axioms | {axiom})


def require_constructive(prop: Proposition) -> Proposition:
    """
    Reject propositions that rely on any axiom.

    Raises:
        ExtensionalityGap: If prop.axioms is not empty
    """
    if prop.axioms:
        raise ExtensionalityGap(
            f"{prop.statement} relies on {', '.join(sorted(prop.axioms))}"
        )
    return prop


def _axioms_of(parts: Iterable[Proposition]) -> frozenset:
    axioms: frozenset = frozenset()
    for part in parts:
        axioms |= part.axioms
    return axioms


# =============================================================================
# CONNECTIVES (Kleene three-valued logic)
# =============================================================================

def conj(*parts: Proposition, statement: Optional[str] = None) -> Proposition:
    """Conjunction: FAILS if any part fails, HOLDS if all hold."""
    def judge() -> Verdict:
        pending = False
        for part in parts:
            verdict = part.verdict()
            if verdict is Verdict.FAILS:
                return Verdict.FAILS
            if verdict is Verdict.NOT_ESTABLISHED:
                pending = True
        return Verdict.NOT_ESTABLISHED if pending else Verdict.HOLDS

    if statement is None:
        statement = " ∧ ".join(f"({part.statement})" for part in parts)
    return Proposition(statement, judge, _axioms_of(parts))


def disj(*parts: Proposition, statement: Optional[str] = None) -> Proposition:
    """Disjunction: HOLDS if any part holds, FAILS if all fail."""
    def judge() -> Verdict:
        pending = False
        for part in parts:
            verdict = part.verdict()
            if verdict is Verdict.HOLDS:
                return Verdict.HOLDS
            if verdict is Verdict.NOT_ESTABLISHED:
                pending = True
        return Verdict.NOT_ESTABLISHED if pending else Verdict.FAILS

    if statement is None:
        statement = " ∨ ".join(f"({part.statement})" for part in parts)
    return Proposition(statement, judge, _axioms_of(parts))


def neg(prop: Proposition, statement: Optional[str] = None) -> Proposition:
    def judge() -> Verdict:
        verdict = prop.verdict()
        if verdict is Verdict.HOLDS:
            return Verdict.FAILS
        if verdict is Verdict.FAILS:
            return Verdict.HOLDS
        return Verdict.NOT_ESTABLISHED

    return Proposition(statement or f"¬({prop.statement})", judge, prop.axioms)


def implies(
    premise: Proposition,
    conclusion: Proposition,
    statement: Optional[str] = None,
) -> Proposition:
    """Material implication; a refuted premise makes it hold."""
    if statement is None:
        statement = f"({premise.statement}) ⇒ ({conclusion.statement})"
    return disj(neg(premise), conclusion, statement=statement)


def iff(left: Proposition, right: Proposition, statement: Optional[str] = None) -> Proposition:
    if statement is None:
        statement = f"({left.statement}) ⇔ ({right.statement})"
    return conj(implies(left, right), implies(right, left), statement=statement)


# =============================================================================
# BOUNDED QUANTIFIERS
# =============================================================================

def forall(
    domain: Universe,
    body: Callable[[Any], Any],
    statement: Optional[str] = None,
) -> Proposition:
    """
    ∀x ∈ domain. body(x)

    The body may return a bool or a Proposition. An unbounded domain is
    never enumerated; its verdict is NOT_ESTABLISHED.
    """
    def judge() -> Verdict:
        if not domain.bounded:
            raise UnprovableProposition(
                f"cannot quantify over unbounded universe {domain.name}"
            )
        pending = False
        for x in domain:
            try:
                if not body(x):
                    return Verdict.FAILS
            except UnprovableProposition:
                pending = True
        return Verdict.NOT_ESTABLISHED if pending else Verdict.HOLDS

    return Proposition(statement or f"∀x∈{domain.name}. …", judge)


def exists(
    domain: Universe,
    body: Callable[[Any], Any],
    statement: Optional[str] = None,
) -> Proposition:
    """∃x ∈ domain. body(x)"""
    def judge() -> Verdict:
        if not domain.bounded:
            raise UnprovableProposition(
                f"cannot search unbounded universe {domain.name}"
            )
        pending = False
        for x in domain:
            try:
                if body(x):
                    return Verdict.HOLDS
            except UnprovableProposition:
                pending = True
        return Verdict.NOT_ESTABLISHED if pending else Verdict.FAILS

    return Proposition(statement or f"∃x∈{domain.name}. …", judge)


# =============================================================================
# WITNESSES (native existential)
# =============================================================================

@dataclass(frozen=True, eq=False)
class Witness:
    """
    Evidence for an existential: an element plus the predicate it satisfies.

    Introduction checks the predicate at construction time, so a Witness
    that exists is a witness that holds. Elimination hands the element to
    any continuation, whatever its result type.
    """
    predicate: Callable[[Any], Any]
    element: Any
    statement: str = "∃x. P(x)"

    def __post_init__(self):
        if not self.predicate(self.element):
            raise PreconditionViolation(
                f"{self.element!r} does not witness {self.statement}"
            )

    @classmethod
    def intro(cls, predicate: Callable[[Any], Any], element: Any, statement: str = "∃x. P(x)") -> Witness:
        return cls(predicate=predicate, element=element, statement=statement)

    def elim(self, continuation: Callable[[Any], Any]) -> Any:
        return continuation(self.element)

    def as_proposition(self) -> Proposition:
        """The existential this witness establishes."""
        return theorem(constant(self.statement, True), f"witness {self.element!r}")


def find_witness(
    domain: Iterable[Any],
    predicate: Callable[[Any], Any],
    statement: str = "∃x. P(x)",
) -> Optional[Witness]:
    """
    Search a bounded domain for a witness.

    Candidates the predicate cannot decide are skipped. Returns None when
    the domain is exhausted without a match.

    Raises:
        UnprovableProposition: If the domain is unbounded, or no match was
            found but some candidates could not be decided
    """
    undecided = 0
    for x in domain:
        try:
            matched = bool(predicate(x))
        except UnprovableProposition:
            undecided += 1
            continue
        if matched:
            _logger.debug("found witness %r for %s", x, statement)
            return Witness(predicate=predicate, element=x, statement=statement)
    if undecided:
        raise UnprovableProposition(
            f"{statement}: no witness found, {undecided} candidates undecided"
        )
    return None
