"""
Finite fixtures for testing algebraic laws.

Closure properties and equalities are only decided over bounded
universes. These helpers produce the relations, subsets and probes that
property tests quantify over: exhaustively for tiny universes, by seeded
random sampling otherwise.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator

from .relations.core import Relation, reflexive, symmetric, transitive
from .relations.equality import Probe
from .sets import Predicate, complement, emptyset, fullset, set_of
from .universe import MAX_POWERSET_BASE, Universe, same_universe


_logger = logging.getLogger(__name__)


# Default sampling parameters
DEFAULT_SAMPLE_SIZE = 24
DEFAULT_DENSITY = 0.4


def all_subsets(universe: Universe, limit: int = MAX_POWERSET_BASE) -> tuple:
    """Every subset of a bounded universe, as Predicates."""
    return tuple(set_of(universe, *members) for members in universe.subsets(limit))


def random_subsets(
    universe: Universe,
    count: int = DEFAULT_SAMPLE_SIZE,
    seed: int = 0,
    density: float = DEFAULT_DENSITY,
) -> tuple:
    rng = random.Random(seed)
    return tuple(
        set_of(universe, *(x for x in universe if rng.random() < density))
        for _ in range(count)
    )


def all_relations(
    source: Universe,
    target: Universe,
    limit: int = MAX_POWERSET_BASE,
) -> Iterator[Relation]:
    """
    Every relation between two bounded universes.

    Raises:
        EnumerationLimitExceeded: If there are more than `limit` pairs
    """
    pairs = source.product(target)
    for chosen in pairs.subsets(limit):
        yield Relation.from_pairs(source, target, chosen)


def random_relations(
    source: Universe,
    target: Universe,
    count: int = DEFAULT_SAMPLE_SIZE,
    seed: int = 0,
    density: float = DEFAULT_DENSITY,
) -> tuple:
    """`count` relations, each pair included with probability `density`."""
    rng = random.Random(seed)
    pairs = tuple(source.product(target))
    _logger.debug("sampling %d relations over %d pairs (seed %d)", count, len(pairs), seed)
    return tuple(
        Relation.from_pairs(source, target, [p for p in pairs if rng.random() < density])
        for _ in range(count)
    )


def standard_probes(R: Relation) -> tuple:
    """
    A family of structural probes for relations shaped like R.

    Closure-property probes are only included for relations on a single
    universe.
    """
    probes = [
        Probe("nonempty", lambda S: bool(S.pairs())),
        Probe("total", lambda S: all(S(x, y) for x in S.source for y in S.target)),
        Probe("even-size", lambda S: len(S.pairs()) % 2 == 0),
        Probe("left-total", lambda S: all(any(S(x, y) for y in S.target) for x in S.source)),
    ]
    if same_universe(R.source, R.target):
        probes += [
            Probe("reflexive", reflexive),
            Probe("symmetric", symmetric),
            Probe("transitive", transitive),
        ]
    return tuple(probes)


def sample_predicates(universe: Universe, seed: int = 0) -> tuple:
    """A handful of named predicates over a bounded universe."""
    elements = tuple(universe)
    rng = random.Random(seed)
    pick = rng.choice(elements) if elements else None
    only_pick = Predicate(universe, lambda x: universe.eq(x, pick), f"={pick!r}")
    return (
        emptyset(universe).named("none"),
        fullset(universe).named("all"),
        only_pick,
        complement(only_pick).named(f"≠{pick!r}"),
    )
