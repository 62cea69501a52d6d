"""
Contract errors for predsets.

Failures in the algebra are contractual, not incidental. Every error
carries the ContractRule it breaks so callers can audit why an
operation refused to produce a value.

    PRECONDITION_VIOLATION — evidence or witness does not hold
    UNIVERSE_MISMATCH      — operands range over different universes
    UNPROVABLE_PROPOSITION — a property cannot be decided (unbounded domain)
    ENUMERATION_LIMIT      — a derived domain is too large to enumerate
    EXTENSIONALITY_GAP     — a result relies on the extensionality postulate
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ContractRule(Enum):
    """The contracts an operation can refuse on."""
    PRECONDITION_VIOLATION = "precondition_violation"
    UNIVERSE_MISMATCH = "universe_mismatch"
    UNPROVABLE_PROPOSITION = "unprovable_proposition"
    ENUMERATION_LIMIT = "enumeration_limit"
    EXTENSIONALITY_GAP = "extensionality_gap"


class ContractError(Exception):
    """Base class for every contract failure raised by predsets."""

    rule = ContractRule.PRECONDITION_VIOLATION

    def __init__(self, reason: str, rule: Optional[ContractRule] = None):
        if rule is not None:
            self.rule = rule
        self.reason = reason
        super().__init__(f"[{self.rule.value}] {reason}")


class PreconditionViolation(ContractError):
    """
    Raised when an operation is invoked without the evidence it requires.

    Fatal to the caller. Never retried.
    """
    rule = ContractRule.PRECONDITION_VIOLATION


class UniverseMismatch(PreconditionViolation):
    """Raised when two operands do not range over the same universe."""
    rule = ContractRule.UNIVERSE_MISMATCH


class UnprovableProposition(ContractError):
    """
    Raised when a proposition cannot be established.

    This is "not established", never "false". Propositions turn it into
    Verdict.NOT_ESTABLISHED; only holds() lets it escape.
    """
    rule = ContractRule.UNPROVABLE_PROPOSITION


class EnumerationLimitExceeded(UnprovableProposition):
    """Raised when a derived domain exceeds the configured enumeration limit."""
    rule = ContractRule.ENUMERATION_LIMIT


class ExtensionalityGap(ContractError):
    """Raised when a constructive result was required but an axiom was used."""
    rule = ContractRule.EXTENSIONALITY_GAP
