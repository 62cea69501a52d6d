# predsets
# Sets and relations as predicates

"""
Core invariant: a property that cannot be decided is reported as
not established, never as false.

This package implements sets-as-predicates, powersets, and the
relation algebra built on them.
"""

from .errors import (
    ContractError,
    ContractRule,
    EnumerationLimitExceeded,
    ExtensionalityGap,
    PreconditionViolation,
    UniverseMismatch,
    UnprovableProposition,
)
from .universe import MAX_ENUMERATION, MAX_POWERSET_BASE, Universe
from .logic import (
    Proposition,
    Verdict,
    Witness,
    conj,
    disj,
    exists,
    find_witness,
    forall,
    iff,
    implies,
    neg,
    postulate,
    require_constructive,
    theorem,
)
from .sets import Predicate, elem, emptyset, fullset, set_of, seteq, subset
from .powerset import (
    Powerset,
    UniquenessEvidence,
    find_set_witness,
    find_unique_set,
    intersections,
    intersections_lower_bound,
    set_elem,
    set_ex,
    set_ex_elim,
    set_ex_intro,
    set_single,
    set_unique,
    the_set,
    the_set_lemma,
    the_set_prop,
    unions,
    unions_upper_bound,
)
