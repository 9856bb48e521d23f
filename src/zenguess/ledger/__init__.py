"""Ledger store: markets, trades, activity feed, settlement claims."""

from zenguess.ledger.store import LedgerStore

__all__ = ["LedgerStore"]
