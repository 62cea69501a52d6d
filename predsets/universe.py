"""
Universes: the carriers predicates and relations range over.

A Universe plays the role of a type. It is either bounded (a finite,
enumerable tuple of elements) or unbounded (membership may be testable,
but the universe is never enumerated). Quantifiers over an unbounded
universe are not established; they are never silently looped over.
"""

from __future__ import annotations

import itertools
import logging
import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from .errors import EnumerationLimitExceeded, UnprovableProposition


_logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Largest derived domain (products, relation spaces) we will enumerate
MAX_ENUMERATION = 1 << 16

# Largest base universe whose subsets we will enumerate (2**12 candidates)
MAX_POWERSET_BASE = 12


# =============================================================================
# UNIVERSE
# =============================================================================

@dataclass(frozen=True)
class Universe:
    """
    The carrier of a predicate or relation.

    Fields:
        name:     Human-readable name, used in proposition statements
        elements: The enumerable elements, or None when unbounded
        eq:       The universe's equality on elements
        member:   Optional membership test for unbounded universes
    """
    name: str
    elements: Optional[tuple] = None
    eq: Callable[[Any, Any], bool] = field(default=operator.eq, compare=False)
    member: Optional[Callable[[Any], bool]] = field(default=None, compare=False)

    @classmethod
    def finite(
        cls,
        name: str,
        elements,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> Universe:
        """Build a bounded universe, dropping duplicates under `eq`."""
        distinct: list = []
        for element in elements:
            if not any(eq(element, seen) for seen in distinct):
                distinct.append(element)
        return cls(name=name, elements=tuple(distinct), eq=eq)

    @classmethod
    def unbounded(
        cls,
        name: str,
        member: Optional[Callable[[Any], bool]] = None,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> Universe:
        """Build an unbounded universe, e.g. all integers."""
        return cls(name=name, elements=None, eq=eq, member=member)

    @property
    def bounded(self) -> bool:
        return self.elements is not None

    def __iter__(self) -> Iterator[Any]:
        if self.elements is None:
            raise UnprovableProposition(
                f"cannot enumerate unbounded universe {self.name}"
            )
        return iter(self.elements)

    def __len__(self) -> int:
        if self.elements is None:
            raise UnprovableProposition(
                f"unbounded universe {self.name} has no size"
            )
        return len(self.elements)

    def __bool__(self) -> bool:
        # __len__ raises on unbounded universes
        return True

    def __contains__(self, x: Any) -> bool:
        if self.elements is not None:
            return any(self.eq(x, element) for element in self.elements)
        if self.member is None:
            return True
        return bool(self.member(x))

    def __str__(self) -> str:
        return self.name

    def product(self, other: Universe, limit: int = MAX_ENUMERATION) -> Universe:
        """The universe of pairs (x, y) with x in self and y in other."""
        name = f"{self.name}×{other.name}"
        if not (self.bounded and other.bounded):
            return Universe.unbounded(
                name,
                member=lambda pair: pair[0] in self and pair[1] in other,
                eq=_pair_eq(self.eq, other.eq),
            )
        size = len(self) * len(other)
        if size > limit:
            _logger.warning("product %s has %d pairs, limit is %d", name, size, limit)
            raise EnumerationLimitExceeded(
                f"product {name} has {size} pairs, limit is {limit}"
            )
        return Universe(
            name=name,
            elements=tuple(itertools.product(self.elements, other.elements)),
            eq=_pair_eq(self.eq, other.eq),
        )

    def subsets(self, limit: int = MAX_POWERSET_BASE) -> Iterator[tuple]:
        """
        Enumerate every subset of a bounded universe, smallest first.

        Raises:
            UnprovableProposition: If the universe is unbounded
            EnumerationLimitExceeded: If the universe has more than `limit` elements
        """
        elements = tuple(self)
        if len(elements) > limit:
            _logger.warning(
                "refusing to enumerate 2**%d subsets of %s (limit 2**%d)",
                len(elements), self.name, limit,
            )
            raise EnumerationLimitExceeded(
                f"{self.name} has {len(elements)} elements, "
                f"subset enumeration is limited to {limit}"
            )
        _logger.debug("enumerating %d subsets of %s", 1 << len(elements), self.name)
        for size in range(len(elements) + 1):
            yield from itertools.combinations(elements, size)


def _pair_eq(left: Callable[[Any, Any], bool], right: Callable[[Any, Any], bool]):
    return lambda p, q: left(p[0], q[0]) and right(p[1], q[1])


def same_universe(first: Universe, second: Universe) -> bool:
    """
    Check whether two universes describe the same carrier.

    Bounded universes compare by name and elements. Membership tests
    cannot be compared, so an unbounded universe is only the same
    carrier as itself.
    """
    if first is second:
        return True
    return first.bounded and second.bounded and first == second
