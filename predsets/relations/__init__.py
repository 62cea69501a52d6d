# Relations package for predsets
"""
Relations as binary predicates.

Provides domain/range, closure properties, the subrelation preorder,
subset-based and Leibniz equality, and relational composition.
"""

from .core import (
    Relation,
    converse,
    dom,
    emptyrel,
    emptyrel_prop,
    equivalence,
    fullrel,
    fullrel_prop,
    ident_equiv,
    ident_refl,
    ident_sym,
    ident_trans,
    identity,
    prod,
    ran,
    reflexive,
    symmetric,
    transitive,
)
from .ordering import (
    psubrel,
    psubrel_antirefl,
    psubrel_antisym,
    psubrel_emptyrel,
    psubrel_emptyrel_conv,
    psubrel_emptyrel_equiv,
    releq,
    releq_refl,
    releq_sym,
    releq_trans,
    subrel,
    subrel_emptyrel_lower_bound,
    subrel_fullrel_upper_bound,
    subrel_prop,
    subrel_refl,
    subrel_trans,
)
from .equality import (
    EXTENSIONALITY_AXIOM,
    Probe,
    membership_probe,
    psubrel_trans,
    rel_equal,
    rel_equal_implies_releq,
    rel_equal_implies_subrel,
    rel_equal_prop,
    rel_equal_refl,
    rel_equal_releq,
    rel_equal_sym,
    rel_equal_trans,
    releq_implies_rel_equal,
    relies_on_extensionality,
)
from .composition import (
    rcomp,
    rcomp_assoc,
    rcomp_assoc_subrel,
    rcomp_assoc_suprel,
    rcomp_chain_backward,
    rcomp_chain_forward,
    rcomp_emptyrel,
    rcomp_witness,
)
