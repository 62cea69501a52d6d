"""
Sets as predicates.

A Predicate is a characteristic function over a Universe. The set
interface the rest of the algebra consumes is:

    elem(x, s)        — x ∈ s; decided by the characteristic function,
                        except that derived predicates (dom, ran) over an
                        unbounded universe raise UnprovableProposition
    subset(s1, s2)    — ∀x. x ∈ s1 ⇒ x ∈ s2     (a Proposition)
    seteq(s1, s2)     — subset both ways          (a Proposition)

subset and seteq quantify over the universe, so they are only decided
for bounded universes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .errors import UniverseMismatch
from .logic import Proposition, conj, forall
from .universe import Universe, same_universe


@dataclass(frozen=True, eq=False)
class Predicate:
    """
    A set, represented by its characteristic function.

    Equality between predicates is extensional and is a Proposition:
    use seteq(), not ==.
    """
    universe: Universe
    test: Callable[[Any], Any]
    name: str = "s"

    def __call__(self, x: Any) -> bool:
        return bool(self.test(x))

    def __contains__(self, x: Any) -> bool:
        return self(x)

    def __repr__(self) -> str:
        return f"Predicate({self.name} ⊆ {self.universe.name})"

    def extension(self) -> tuple:
        """The members of the set, in universe order (bounded universes only)."""
        return tuple(x for x in self.universe if self(x))

    def named(self, name: str) -> Predicate:
        return Predicate(self.universe, self.test, name)


# =============================================================================
# CONSTRUCTORS
# =============================================================================

def set_of(universe: Universe, *elements: Any, name: Optional[str] = None) -> Predicate:
    """The finite set {elements}, compared with the universe's equality."""
    members = tuple(elements)
    eq = universe.eq
    if name is None:
        name = "{" + ", ".join(repr(e) for e in members) + "}"
    return Predicate(universe, lambda x: any(eq(x, m) for m in members), name)


def emptyset(universe: Universe) -> Predicate:
    return Predicate(universe, lambda x: False, "∅")


def fullset(universe: Universe) -> Predicate:
    """The set of every element of the universe."""
    return Predicate(universe, lambda x: True, universe.name)


def union(s1: Predicate, s2: Predicate) -> Predicate:
    _check_same_universe(s1, s2)
    return Predicate(s1.universe, lambda x: s1(x) or s2(x), f"{s1.name} ∪ {s2.name}")


def intersection(s1: Predicate, s2: Predicate) -> Predicate:
    _check_same_universe(s1, s2)
    return Predicate(s1.universe, lambda x: s1(x) and s2(x), f"{s1.name} ∩ {s2.name}")


def complement(s: Predicate) -> Predicate:
    return Predicate(s.universe, lambda x: not s(x), f"∁{s.name}")


# =============================================================================
# SET INTERFACE
# =============================================================================

def elem(x: Any, s: Predicate) -> bool:
    """x ∈ s"""
    return s(x)


def subset(s1: Predicate, s2: Predicate) -> Proposition:
    """s1 ⊆ s2, i.e. ∀x. x ∈ s1 ⇒ x ∈ s2"""
    _check_same_universe(s1, s2)
    return forall(
        s1.universe,
        lambda x: (not s1(x)) or s2(x),
        statement=f"{s1.name} ⊆ {s2.name}",
    )


def seteq(s1: Predicate, s2: Predicate) -> Proposition:
    """Extensional equality: s1 ⊆ s2 and s2 ⊆ s1."""
    return conj(subset(s1, s2), subset(s2, s1), statement=f"{s1.name} = {s2.name}")


def _check_same_universe(s1: Predicate, s2: Predicate) -> None:
    if not same_universe(s1.universe, s2.universe):
        raise UniverseMismatch(
            f"{s1.name} ranges over {s1.universe.name}, "
            f"{s2.name} ranges over {s2.universe.name}"
        )
