"""
Unit tests for the command runner.

Run with: pytest tests/test_main.py -v
"""

import asyncio
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import main
from cbe_verifier.errors import (
    DocumentRetrievalFailed,
    InvalidInputFormat,
    TransactionTooOld,
)
from cbe_verifier.models import TransactionRecord, VerificationConfig


@pytest.fixture
def clean_env(monkeypatch):
    """Remove runner settings from the environment."""
    for var in ('CBE_ACCOUNT_NUMBER', 'CBE_MAX_TRANSACTION_AGE_HOURS', 'CBE_REJECT_UNAUTHORIZED'):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


class TestValidateEnvironment:
    """Tests for the validate_environment function."""

    def test_missing_account_number(self, clean_env):
        """Test that a missing account number fails validation."""
        assert main.validate_environment() is False

    def test_account_number_present(self, clean_env):
        """Test that a set account number passes validation."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')
        assert main.validate_environment() is True


class TestLoadConfig:
    """Tests for the load_config function."""

    def test_defaults(self, clean_env):
        """Test config built from only the account number."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')
        config = main.load_config()

        assert config.account_number == '1000012345678'
        assert config.max_age_hours == 24
        assert config.allow_insecure_transport is True

    def test_overrides(self, clean_env):
        """Test the optional age window and certificate settings."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')
        clean_env.setenv('CBE_MAX_TRANSACTION_AGE_HOURS', '48')
        clean_env.setenv('CBE_REJECT_UNAUTHORIZED', 'true')
        config = main.load_config()

        assert config.max_age_hours == 48.0
        assert config.allow_insecure_transport is False

    def test_invalid_max_age_raises_error(self, clean_env):
        """Test that a non-numeric age window raises ValueError."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')
        clean_env.setenv('CBE_MAX_TRANSACTION_AGE_HOURS', 'a day')

        with pytest.raises(ValueError):
            main.load_config()


class TestVerifyOne:
    """Tests for the verify_one function."""

    config = VerificationConfig(account_number='1000012345678')

    def test_success_message(self):
        """Test the message for a verified transaction."""
        record = TransactionRecord(
            reference_number='FT23062669JJ',
            payment_timestamp=datetime(2023, 12, 25, 14, 30, 45),
            debited_amount='1,500.00 ETB',
            receiver='ACME Corporation Ltd',
            payer='John Doe',
        )

        with patch.object(main, 'verify', AsyncMock(return_value=record)):
            success, message = asyncio.run(main.verify_one('FT23062669JJ', self.config))

        assert success is True
        assert 'FT23062669JJ' in message
        assert '1,500.00 ETB' in message

    @pytest.mark.parametrize("error, prefix", [
        (InvalidInputFormat(), "Bad input"),
        (DocumentRetrievalFailed("Failed to download PDF: timed out"), "Could not fetch receipt"),
        (TransactionTooOld(30, 24), "Rejected"),
    ])
    def test_failure_messages(self, error, prefix):
        """Test that each failure kind gets its own message."""
        with patch.object(main, 'verify', AsyncMock(side_effect=error)):
            success, message = asyncio.run(main.verify_one('FT23062669JJ', self.config))

        assert success is False
        assert message.startswith(prefix)
        assert str(error) in message


class TestMain:
    """Tests for the main entry point."""

    def test_exits_when_environment_invalid(self, clean_env):
        """Test that missing settings exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main.main(['FT23062669JJ'])

        assert exc_info.value.code == 1

    def test_exits_without_arguments(self, clean_env):
        """Test that running with nothing to verify exits with status 1."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')

        with pytest.raises(SystemExit) as exc_info:
            main.main([])

        assert exc_info.value.code == 1

    def test_all_verified_exits_cleanly(self, clean_env):
        """Test that main returns normally when everything verifies."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')
        record = TransactionRecord(
            reference_number='FT23062669JJ',
            payment_timestamp=datetime(2023, 12, 25, 14, 30, 45),
        )

        with patch.object(main, 'verify', AsyncMock(return_value=record)):
            main.main(['FT23062669JJ'])

    def test_failure_exits_with_error(self, clean_env):
        """Test that one failed verification makes main exit with status 1."""
        clean_env.setenv('CBE_ACCOUNT_NUMBER', '1000012345678')

        with patch.object(main, 'verify', AsyncMock(side_effect=TransactionTooOld(30, 24))):
            with pytest.raises(SystemExit) as exc_info:
                main.main(['FT23062669JJ'])

        assert exc_info.value.code == 1
