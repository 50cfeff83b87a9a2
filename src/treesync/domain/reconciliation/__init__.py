"""Reconciliation of freshly loaded trees against the stored snapshot of a source.

``reconcile`` computes the diff without side effects; ``apply_reconciliation``
drives the store through the dependency-safe mutation order.
"""

from __future__ import annotations

from .apply import apply_reconciliation
from .contracts import AppliedMutations, ReconciliationResult
from .engine import reconcile
from .policy import COMPARABLE_FIELDS, changed_fields, has_changes, natural_key, same_tree

__all__ = [
    "COMPARABLE_FIELDS",
    "AppliedMutations",
    "ReconciliationResult",
    "apply_reconciliation",
    "changed_fields",
    "has_changes",
    "natural_key",
    "reconcile",
    "same_tree",
]
