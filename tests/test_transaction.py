"""
Unit tests for the TransactionRecord and VerificationConfig dataclasses.

Run with: pytest tests/test_transaction.py -v
"""

import sys
from dataclasses import FrozenInstanceError
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cbe_verifier.models import TransactionRecord, VerificationConfig


class TestTransactionRecord:
    """Tests for the TransactionRecord dataclass."""

    def test_defaults_are_none(self):
        """Test that every field defaults to None."""
        record = TransactionRecord()

        assert record.reference_number is None
        assert record.payment_timestamp is None
        assert record.debited_amount is None
        assert record.receiver is None
        assert record.payer is None

    def test_is_frozen(self):
        """Test that a record cannot be modified after creation."""
        record = TransactionRecord(reference_number="FT23062669JJ")

        with pytest.raises(FrozenInstanceError):
            record.reference_number = "FT0000000000"

    def test_to_dict(self):
        """Test converting a record to a dictionary."""
        record = TransactionRecord(
            reference_number="FT23062669JJ",
            payment_timestamp=datetime(2023, 12, 25, 14, 30, 45),
            debited_amount="1,500.00 ETB",
            receiver="ACME Corporation Ltd",
            payer=None,
        )

        assert record.to_dict() == {
            "reference_number": "FT23062669JJ",
            "payment_timestamp": "2023-12-25T14:30:45",
            "debited_amount": "1,500.00 ETB",
            "receiver": "ACME Corporation Ltd",
            "payer": None,
        }

    def test_to_dict_without_timestamp(self):
        """Test that a missing timestamp stays None in the dictionary."""
        assert TransactionRecord().to_dict()["payment_timestamp"] is None


class TestVerificationConfig:
    """Tests for the VerificationConfig dataclass."""

    def test_defaults(self):
        """Test the documented default values."""
        config = VerificationConfig(account_number="1000012345678")

        assert config.max_age_hours == 24
        assert config.allow_insecure_transport is True
        assert config.timeout_seconds == 30.0

    def test_effective_max_age_with_none(self):
        """Test that a None age window resolves to 24 hours."""
        config = VerificationConfig(account_number="1000012345678", max_age_hours=None)
        assert config.effective_max_age_hours == 24

    def test_effective_max_age_with_value(self):
        """Test that an explicit age window is kept."""
        config = VerificationConfig(account_number="1000012345678", max_age_hours=6)
        assert config.effective_max_age_hours == 6

    def test_from_overrides(self):
        """Test building a config from keyword overrides."""
        config = VerificationConfig.from_overrides(
            "1000012345678", max_age_hours=48, allow_insecure_transport=False
        )

        assert config.account_number == "1000012345678"
        assert config.max_age_hours == 48
        assert config.allow_insecure_transport is False

    def test_from_overrides_rejects_unknown_field(self):
        """Test that a misspelled override is not silently ignored."""
        with pytest.raises(TypeError):
            VerificationConfig.from_overrides("1000012345678", max_age=48)

    def test_is_frozen(self):
        """Test that a config cannot be modified after creation."""
        config = VerificationConfig(account_number="1000012345678")

        with pytest.raises(FrozenInstanceError):
            config.max_age_hours = 1
