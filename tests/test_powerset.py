"""
Tests for predsets — the powerset layer.

These tests verify that:
1. The existential has explicit introduction and elimination
2. Uniqueness evidence is required by the choice descriptor
3. The chosen set is a member and equal to every other member
4. Generalized union and intersection behave on concrete families
"""

import pytest

from predsets.errors import PreconditionViolation, UnprovableProposition
from predsets.logic import Verdict
from predsets.powerset import (
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
from predsets.sets import Predicate, elem, fullset, set_of, seteq
from predsets.universe import Universe


U = Universe.finite("U", [1, 2, 3])
A = set_of(U, 1, 2)
B = set_of(U, 2, 3)

NATURALS = Universe.unbounded("ℕ", member=lambda n: isinstance(n, int) and n >= 0)
EVENS = Predicate(NATURALS, lambda n: n % 2 == 0, "even")
ODDS = Predicate(NATURALS, lambda n: n % 2 == 1, "odd")


# =============================================================================
# EXISTENTIAL TESTS
# =============================================================================

class TestSetExistential:
    """Test set_ex and its introduction and elimination."""

    def test_set_elem_is_application(self):
        X = Powerset.of(U, A)
        assert set_elem(set_of(U, 2, 1), X)
        assert not set_elem(B, X)

    def test_intro_then_elim_with_identity(self):
        """Intro followed by elim with the identity gives the witness back."""
        X = Powerset.of(U, A, B)
        assert set_ex_elim(set_ex_intro(X, A), lambda x: x) is A

    def test_elim_into_other_types(self):
        X = Powerset.of(U, A, B)
        existence = set_ex_intro(X, B)
        assert set_ex_elim(existence, lambda x: x.extension()) == (2, 3)
        assert set_ex_elim(existence, lambda x: elem_count(x)) == 2

    def test_intro_rejects_non_member(self):
        X = Powerset.of(U, A)
        with pytest.raises(PreconditionViolation, match="does not witness"):
            set_ex_intro(X, B)

    def test_set_ex(self):
        assert set_ex(Powerset.of(U, A)).verdict() is Verdict.HOLDS
        assert set_ex(Powerset.of(U)).verdict() is Verdict.FAILS

    def test_find_set_witness(self):
        X = Powerset(U, lambda s: seteq(s, B), "{B}")
        witness = find_set_witness(X)
        assert witness.element.extension() == (2, 3)

    def test_set_ex_without_family_enumerates_subsets(self):
        """Without a family, candidates are every subset of the base."""
        X = Powerset(U, lambda s: len(s.extension()) == 2, "pairs")
        assert len(X.candidates()) == 8
        assert len(X.members()) == 3
        assert set_ex(X)

    def test_set_ex_over_large_base_is_not_established(self):
        big = Universe.finite("big", range(20))
        X = Powerset(big, lambda s: True, "everything")
        assert set_ex(X).verdict() is Verdict.NOT_ESTABLISHED

    def test_family_must_share_base(self):
        other = Universe.finite("V", ["a"])
        with pytest.raises(PreconditionViolation, match="not U"):
            Powerset.of(U, set_of(other, "a"))


def elem_count(s):
    return len(s.extension())


# =============================================================================
# UNIQUENESS AND CHOICE TESTS
# =============================================================================

class TestChoice:
    """Test set_single, set_unique and the choice descriptor."""

    def test_single_member_scenario(self):
        """X = {A} with A = {1, 2}: unique, and the_set is A."""
        X = Powerset.of(U, A)
        assert set_unique(X)
        evidence = find_unique_set(X)
        assert evidence is not None
        chosen = the_set(X, evidence)
        assert seteq(chosen, A)

    def test_choice_properties(self):
        X = Powerset.of(U, A)
        evidence = find_unique_set(X)
        assert the_set_prop(X, evidence).check() is Verdict.HOLDS
        assert the_set_lemma(X, evidence).check() is Verdict.HOLDS
        assert the_set_lemma(X, evidence).proof == "the-set-lemma"

    def test_uniqueness_is_up_to_seteq(self):
        """Two descriptions of the same set are one member."""
        X = Powerset.of(U, set_of(U, 1, 2), Predicate(U, lambda x: x < 3, "small"))
        assert set_single(X)
        evidence = find_unique_set(X)
        assert the_set(X, evidence).extension() == (1, 2)

    def test_choice_over_all_subsets(self):
        X = Powerset(U, lambda s: seteq(s, A), "{A}")
        evidence = find_unique_set(X)
        assert the_set(X, evidence).extension() == (1, 2)

    def test_two_members_not_single(self):
        X = Powerset.of(U, A, B)
        assert set_single(X).verdict() is Verdict.FAILS
        assert set_unique(X).verdict() is Verdict.FAILS
        assert find_unique_set(X) is None

    def test_empty_family_has_no_unique_member(self):
        X = Powerset.of(U)
        assert set_single(X).verdict() is Verdict.HOLDS
        assert set_unique(X).verdict() is Verdict.FAILS
        assert find_set_witness(X) is None
        assert find_unique_set(X) is None

    def test_the_set_requires_evidence(self):
        """Calling the choice descriptor without evidence is a contract violation."""
        X = Powerset.of(U, A)
        with pytest.raises(PreconditionViolation, match="requires UniquenessEvidence"):
            the_set(X, None)
        with pytest.raises(PreconditionViolation):
            the_set(X, set_ex_intro(X, A))

    def test_the_set_rejects_evidence_for_other_family(self):
        X = Powerset.of(U, A)
        Y = Powerset.of(U, B)
        with pytest.raises(PreconditionViolation, match="evidence is about"):
            the_set(X, find_unique_set(Y))

    def test_evidence_requires_single(self):
        X = Powerset.of(U, A, B)
        with pytest.raises(PreconditionViolation, match="uniqueness not shown"):
            UniquenessEvidence(family=X, existence=set_ex_intro(X, A))

    def test_evidence_judges_its_own_family(self):
        """Singleness of another family cannot stand in for this one."""
        X = Powerset.of(U, A, B)
        with pytest.raises(TypeError):
            UniquenessEvidence(
                family=X,
                existence=set_ex_intro(X, A),
                single=set_single(Powerset.of(U, A)),
            )
        with pytest.raises(PreconditionViolation, match=r"single\(\{A, B\}\)"):
            UniquenessEvidence(family=Powerset.of(U, A, B, name="{A, B}"),
                               existence=set_ex_intro(X, A))

    def test_evidence_single_is_about_family(self):
        X = Powerset.of(U, A)
        evidence = find_unique_set(X)
        assert evidence.single.statement == f"single({X.name})"
        assert evidence.single.check() is Verdict.HOLDS
        assert evidence.proof is None

    def test_assumed_evidence_for_unbounded_base(self):
        """Callers supply evidence when the family cannot be enumerated."""
        X = Powerset(NATURALS, lambda s: s is EVENS, "{even}")

        assert set_unique(X).verdict() is Verdict.NOT_ESTABLISHED
        with pytest.raises(UnprovableProposition):
            find_unique_set(X)

        evidence = UniquenessEvidence.assume(X, EVENS, "only member by construction")
        assert the_set(X, evidence) is EVENS
        assert the_set_prop(X, evidence).verdict() is Verdict.HOLDS
        assert the_set_lemma(X, evidence).check() is Verdict.NOT_ESTABLISHED

    def test_assumed_evidence_for_explicit_family(self):
        """An explicit family over an unbounded base accepts its own members."""
        X = Powerset.of(NATURALS, EVENS)
        assert set_elem(EVENS, X)
        with pytest.raises(UnprovableProposition):
            set_elem(Predicate(NATURALS, lambda n: n % 2 == 0, "even again"), X)

        evidence = UniquenessEvidence.assume(X, EVENS, "singleton family")
        assert evidence.single.proof == "singleton family"
        assert the_set(X, evidence) is EVENS
        assert the_set_prop(X, evidence).check() is Verdict.HOLDS


# =============================================================================
# GENERALIZED UNION AND INTERSECTION TESTS
# =============================================================================

class TestUnionsIntersections:
    """Test unions and intersections of families."""

    def test_union_intersection_scenario(self):
        """X = {A, B}, A = {1, 2}, B = {2, 3}."""
        X = Powerset.of(U, A, B)
        assert unions(X).extension() == (1, 2, 3)
        assert intersections(X).extension() == (2,)
        assert seteq(unions(X), set_of(U, 1, 2, 3))
        assert seteq(intersections(X), set_of(U, 2))

    def test_empty_family(self):
        """The empty union is empty; the empty intersection is everything."""
        X = Powerset.of(U)
        assert unions(X).extension() == ()
        assert seteq(intersections(X), fullset(U))

    def test_bounds(self):
        X = Powerset.of(U, A, B, set_of(U, 2))
        assert unions_upper_bound(X).check() is Verdict.HOLDS
        assert intersections_lower_bound(X).check() is Verdict.HOLDS

    def test_bounds_over_all_subsets(self):
        X = Powerset(U, lambda s: 1 in s, "∋1")
        assert intersections(X).extension() == (1,)
        assert unions(X).extension() == (1, 2, 3)
        assert unions_upper_bound(X).check() is Verdict.HOLDS
        assert intersections_lower_bound(X).check() is Verdict.HOLDS

    def test_explicit_family_over_unbounded_base(self):
        X = Powerset.of(NATURALS, EVENS, ODDS)
        assert elem(4, unions(X))
        assert elem(7, unions(X))
        assert not elem(4, intersections(X))
