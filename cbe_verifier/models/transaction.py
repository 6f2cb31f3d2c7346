"""
Dataclasses for CBE receipt data and verification settings.

TransactionRecord holds the fields pulled out of a receipt PDF.
VerificationConfig holds the caller's settings for one verification call.
Both are frozen: once built they are never modified.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from ..constants import (
    DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    DEFAULT_MAX_TRANSACTION_AGE_HOURS,
)


@dataclass(frozen=True)
class TransactionRecord:
    """
    Transaction details extracted from a CBE receipt.

    Every field is optional at extraction time. The validator makes sure
    reference_number and payment_timestamp are present before a record
    is handed back to the caller; the other three may stay None.

    Attributes:
        reference_number: Bank reference ("FT23062669JJ")
        payment_timestamp: When the debit happened, as printed on the receipt
        debited_amount: Amount with currency, kept as text ("1,500.00 ETB")
        receiver: Name of the receiving party
        payer: Name of the paying party

    Example:
        >>> record = TransactionRecord(
        ...     reference_number="FT23062669JJ",
        ...     payment_timestamp=datetime(2023, 12, 25, 14, 30, 45),
        ...     debited_amount="1,500.00 ETB",
        ...     receiver="ACME Corporation Ltd",
        ...     payer="John Doe",
        ... )
        >>> record.to_dict()["payment_timestamp"]
        '2023-12-25T14:30:45'
    """

    reference_number: Optional[str] = None
    payment_timestamp: Optional[datetime] = None
    debited_amount: Optional[str] = None
    receiver: Optional[str] = None
    payer: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Convert to a JSON-friendly dictionary.

        The timestamp is rendered as ISO-8601; absent fields stay None.
        """
        timestamp = self.payment_timestamp
        return {
            "reference_number": self.reference_number,
            "payment_timestamp": timestamp.isoformat() if timestamp else None,
            "debited_amount": self.debited_amount,
            "receiver": self.receiver,
            "payer": self.payer,
        }


@dataclass(frozen=True)
class VerificationConfig:
    """
    Settings for a single verification call.

    Attributes:
        account_number: The caller's own CBE account number (digits only).
            Its last 8 characters are embedded in the receipt URL.
        max_age_hours: Oldest transaction, in hours, that still verifies.
            None falls back to DEFAULT_MAX_TRANSACTION_AGE_HOURS.
        allow_insecure_transport: Skip TLS certificate checks when fetching
            the receipt. CBE's service presents a certificate that common
            trust stores reject, so this defaults to True.
        timeout_seconds: Download timeout handed to the fetcher.
    """

    account_number: str
    max_age_hours: Optional[float] = DEFAULT_MAX_TRANSACTION_AGE_HOURS
    allow_insecure_transport: bool = True
    timeout_seconds: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS

    @property
    def effective_max_age_hours(self) -> float:
        """Age window in hours, with None resolved to the default."""
        if self.max_age_hours is None:
            return DEFAULT_MAX_TRANSACTION_AGE_HOURS
        return self.max_age_hours

    @classmethod
    def from_overrides(cls, account_number: str, **overrides: Any) -> "VerificationConfig":
        """
        Build a config from an account number plus keyword overrides.

        Args:
            account_number: CBE account number
            **overrides: Any other VerificationConfig field

        Returns:
            VerificationConfig instance

        Raises:
            TypeError: If an override names an unknown field
        """
        return cls(account_number=account_number, **overrides)
