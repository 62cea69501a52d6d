"""
Sequential relational composition.

    rcomp(R1, R2)(x, z)  ⇔  ∃y. R1(x, y) ∧ R2(y, z)

Composition is associative only up to releq. The two inclusions are
separate results, each with a constructive counterpart that rebuilds an
intermediate witness for one bracketing from a witness for the other:

    rcomp_chain_forward:   R1;(R2;R3)  →  (R1;R2);R3
    rcomp_chain_backward:  (R1;R2);R3  →  R1;(R2;R3)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..errors import UniverseMismatch
from ..logic import Proposition, Witness, conj, exists, find_witness, theorem
from ..universe import same_universe
from .core import Relation, emptyrel
from .ordering import releq, subrel


_logger = logging.getLogger(__name__)


def rcomp(R1: Relation, R2: Relation) -> Relation:
    """
    R1 followed by R2.

    Raises:
        UniverseMismatch: If R1's target is not R2's source
    """
    if not same_universe(R1.target, R2.source):
        raise UniverseMismatch(
            f"cannot compose {R1.name}: … → {R1.target.name} "
            f"with {R2.name}: {R2.source.name} → …"
        )
    return Relation(
        R1.source,
        R2.target,
        lambda x, z: exists(
            R1.target,
            lambda y: R1(x, y) and R2(y, z),
            f"∃y. {R1.name}({x!r}, y) ∧ {R2.name}(y, {z!r})",
        ),
        f"({R1.name} ; {R2.name})",
    )


def rcomp_witness(R1: Relation, R2: Relation, x: Any, z: Any) -> Optional[Witness]:
    """
    The intermediate y with R1(x, y) and R2(y, z), if any.

    Raises:
        UnprovableProposition: If the middle universe is unbounded
    """
    return find_witness(
        R1.target,
        lambda y: R1(x, y) and R2(y, z),
        f"∃y. {R1.name}({x!r}, y) ∧ {R2.name}(y, {z!r})",
    )


def rcomp_chain_forward(
    R1: Relation,
    R2: Relation,
    R3: Relation,
    x: Any,
    z: Any,
) -> Optional[Witness]:
    """
    From (R1;(R2;R3))(x, z) build the witness w of ((R1;R2);R3)(x, z).

    The outer witness y gives R1(x, y) and (R2;R3)(y, z); the inner one
    gives w with R2(y, w) and R3(w, z). Then y witnesses (R1;R2)(x, w).
    """
    outer = rcomp_witness(R1, rcomp(R2, R3), x, z)
    if outer is None:
        return None
    y = outer.element
    inner = rcomp_witness(R2, R3, y, z)
    left = rcomp(R1, R2)
    _logger.debug("chaining %r through %r forward", (x, z), (y, inner.element))
    return Witness.intro(
        lambda w: left(x, w) and R3(w, z),
        inner.element,
        f"∃w. {left.name}({x!r}, w) ∧ {R3.name}(w, {z!r})",
    )


def rcomp_chain_backward(
    R1: Relation,
    R2: Relation,
    R3: Relation,
    x: Any,
    z: Any,
) -> Optional[Witness]:
    """
    From ((R1;R2);R3)(x, z) build the witness y of (R1;(R2;R3))(x, z).

    The outer witness w gives (R1;R2)(x, w) and R3(w, z); the inner one
    gives y with R1(x, y) and R2(y, w). Then w witnesses (R2;R3)(y, z).
    """
    outer = rcomp_witness(rcomp(R1, R2), R3, x, z)
    if outer is None:
        return None
    w = outer.element
    inner = rcomp_witness(R1, R2, x, w)
    right = rcomp(R2, R3)
    _logger.debug("chaining %r through %r backward", (x, z), (inner.element, w))
    return Witness.intro(
        lambda y: R1(x, y) and right(y, z),
        inner.element,
        f"∃y. {R1.name}({x!r}, y) ∧ {right.name}(y, {z!r})",
    )


def rcomp_assoc_subrel(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    """R1;(R2;R3) ⊆ (R1;R2);R3"""
    return theorem(
        subrel(rcomp(R1, rcomp(R2, R3)), rcomp(rcomp(R1, R2), R3)),
        "rcomp-assoc-subrel",
    )


def rcomp_assoc_suprel(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    """(R1;R2);R3 ⊆ R1;(R2;R3)"""
    return theorem(
        subrel(rcomp(rcomp(R1, R2), R3), rcomp(R1, rcomp(R2, R3))),
        "rcomp-assoc-suprel",
    )


def rcomp_assoc(R1: Relation, R2: Relation, R3: Relation) -> Proposition:
    """R1;(R2;R3) ≡ (R1;R2);R3, from the two inclusions."""
    return theorem(
        releq(rcomp(R1, rcomp(R2, R3)), rcomp(rcomp(R1, R2), R3)),
        "rcomp-assoc",
    )


def rcomp_emptyrel(R: Relation) -> Proposition:
    """Composing with ∅ on either side gives ∅."""
    empty = emptyrel(R.source, R.target)
    return theorem(
        conj(
            releq(rcomp(emptyrel(R.source, R.source), R), empty),
            releq(rcomp(R, emptyrel(R.target, R.target)), empty),
            statement=f"∅ ; {R.name} ≡ ∅ ∧ {R.name} ; ∅ ≡ ∅",
        ),
        "rcomp-emptyrel",
    )
