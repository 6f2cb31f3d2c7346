"""
Data models for CBE transaction verification.

This module exports the typed structures passed through the
verification pipeline.
"""

from .transaction import TransactionRecord, VerificationConfig

__all__ = ['TransactionRecord', 'VerificationConfig']
