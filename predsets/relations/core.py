"""
Relations as binary predicates.

A Relation is a total function (x, y) -> bool between a source and a
target universe. Domain and range are predicates; the closure properties
(reflexive, symmetric, transitive, equivalence) are Propositions, since
they quantify over the source universe and are only decided when it is
bounded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from ..errors import UniverseMismatch
from ..logic import Proposition, conj, exists, forall, theorem
from ..sets import Predicate, elem
from ..universe import Universe, same_universe


@dataclass(frozen=True, eq=False)
class Relation:
    """
    A binary relation between `source` and `target`.

    Equality between relations is a Proposition: use releq() or
    rel_equal(), not ==.
    """
    source: Universe
    target: Universe
    test: Callable[[Any, Any], Any]
    name: str = "R"

    @classmethod
    def from_pairs(
        cls,
        source: Universe,
        target: Universe,
        pairs: Iterable[tuple],
        name: Optional[str] = None,
    ) -> Relation:
        """The finite relation containing exactly `pairs`."""
        pairs = tuple(pairs)
        if name is None:
            name = "{" + ", ".join(f"({x!r},{y!r})" for x, y in pairs) + "}"
        return cls(
            source=source,
            target=target,
            test=lambda x, y: any(
                source.eq(x, a) and target.eq(y, b) for a, b in pairs
            ),
            name=name,
        )

    def __call__(self, x: Any, y: Any) -> bool:
        return bool(self.test(x, y))

    def __repr__(self) -> str:
        return f"Relation({self.name}: {self.source.name} → {self.target.name})"

    def pairs(self) -> tuple:
        """Every related pair (bounded universes only)."""
        return tuple(
            (x, y) for x in self.source for y in self.target if self(x, y)
        )


def check_same_type(R1: Relation, R2: Relation) -> None:
    """
    Raises:
        UniverseMismatch: If R1 and R2 do not relate the same universes
    """
    if not (same_universe(R1.source, R2.source) and same_universe(R1.target, R2.target)):
        raise UniverseMismatch(
            f"{R1.name}: {R1.source.name} → {R1.target.name} and "
            f"{R2.name}: {R2.source.name} → {R2.target.name} are not comparable"
        )


def check_endo(R: Relation) -> None:
    """
    Raises:
        UniverseMismatch: If R does not relate a universe to itself
    """
    if not same_universe(R.source, R.target):
        raise UniverseMismatch(
            f"{R.name} relates {R.source.name} to {R.target.name}, "
            f"closure properties need a single universe"
        )


# =============================================================================
# CANONICAL RELATIONS
# =============================================================================

def identity(universe: Universe) -> Relation:
    """x = y under the universe's equality."""
    return Relation(universe, universe, universe.eq, f"id[{universe.name}]")


def fullrel(source: Universe, target: Universe) -> Relation:
    return Relation(source, target, lambda x, y: True, "full")


def emptyrel(source: Universe, target: Universe) -> Relation:
    return Relation(source, target, lambda x, y: False, "∅")


def converse(R: Relation) -> Relation:
    return Relation(R.target, R.source, lambda y, x: R(x, y), f"{R.name}⁻¹")


def prod(s1: Predicate, s2: Predicate) -> Relation:
    """The cartesian product s1 × s2."""
    return Relation(
        s1.universe,
        s2.universe,
        lambda x, y: elem(x, s1) and elem(y, s2),
        f"{s1.name} × {s2.name}",
    )


def dom(R: Relation) -> Predicate:
    """{x | ∃y. R(x, y)}"""
    return Predicate(
        R.source,
        lambda x: exists(R.target, lambda y: R(x, y), f"∃y. {R.name}({x!r}, y)"),
        f"dom({R.name})",
    )


def ran(R: Relation) -> Predicate:
    """{y | ∃x. R(x, y)}"""
    return Predicate(
        R.target,
        lambda y: exists(R.source, lambda x: R(x, y), f"∃x. {R.name}(x, {y!r})"),
        f"ran({R.name})",
    )


def fullrel_prop(source: Universe, target: Universe) -> Proposition:
    full = fullrel(source, target)
    return theorem(
        forall(source, lambda x: forall(target, lambda y: full(x, y)),
               "∀x,y. full(x, y)"),
        "fullrel-prop",
    )


def emptyrel_prop(source: Universe, target: Universe) -> Proposition:
    empty = emptyrel(source, target)
    return theorem(
        forall(source, lambda x: forall(target, lambda y: not empty(x, y)),
               "∀x,y. ¬∅(x, y)"),
        "emptyrel-prop",
    )


# =============================================================================
# CLOSURE PROPERTIES
# =============================================================================

def reflexive(R: Relation) -> Proposition:
    """∀x. R(x, x)"""
    check_endo(R)
    return forall(R.source, lambda x: R(x, x), f"reflexive({R.name})")


def symmetric(R: Relation) -> Proposition:
    """∀x, y. R(x, y) ⇒ R(y, x)"""
    check_endo(R)
    return forall(
        R.source,
        lambda x: forall(R.source, lambda y: (not R(x, y)) or R(y, x)),
        f"symmetric({R.name})",
    )


def transitive(R: Relation) -> Proposition:
    """∀x, y, z. R(x, y) ∧ R(y, z) ⇒ R(x, z)"""
    check_endo(R)

    def through(x, y):
        if not R(x, y):
            return True
        return forall(R.source, lambda z: (not R(y, z)) or R(x, z))

    return forall(
        R.source,
        lambda x: forall(R.source, lambda y: through(x, y)),
        f"transitive({R.name})",
    )


def equivalence(R: Relation) -> Proposition:
    return conj(
        reflexive(R), symmetric(R), transitive(R),
        statement=f"equivalence({R.name})",
    )


def ident_refl(universe: Universe) -> Proposition:
    return theorem(reflexive(identity(universe)), "ident-refl")


def ident_sym(universe: Universe) -> Proposition:
    return theorem(symmetric(identity(universe)), "ident-sym")


def ident_trans(universe: Universe) -> Proposition:
    return theorem(transitive(identity(universe)), "ident-trans")


def ident_equiv(universe: Universe) -> Proposition:
    """The identity relation is an equivalence, on any universe."""
    return theorem(equivalence(identity(universe)), "ident-equiv")
