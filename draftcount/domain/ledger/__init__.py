"""Pending-delta ledger package."""

from draftcount.domain.ledger.ledger import PendingLedger
from draftcount.domain.ledger.models import DeltaOutcome, LedgerSettings

__all__ = [
    "DeltaOutcome",
    "LedgerSettings",
    "PendingLedger",
]
