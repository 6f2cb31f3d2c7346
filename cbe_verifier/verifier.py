"""
CBE direct-deposit verification.

Ties the pipeline together:
1. Check the caller's input and classify it (reference code or URL)
2. Build the receipt URL for the caller's account
3. Fetch the receipt text
4. Extract the transaction fields
5. Validate them and return the record

Architecture:
- verify() takes the document fetcher as a parameter, so tests and host
  applications can supply their own
- verify_quick() is a thin wrapper that builds the config for you
"""

import logging
import re
from typing import Any, Awaitable, Protocol

from .errors import EmptyInput, MissingAccountNumber
from .input_classifier import build_url, classify
from .models import TransactionRecord, VerificationConfig
from .pdf_fetcher import fetch_document_text
from .receipt_parser import extract_fields, validate

logger = logging.getLogger(__name__)

_DIGITS_ONLY = re.compile(r'[0-9]+')

MIN_ACCOUNT_NUMBER_LENGTH = 8


class DocumentFetcher(Protocol):
    """
    What verify() needs from a document fetcher.

    fetch_document_text() is the production implementation; any
    coroutine function with this signature can stand in for it.
    """

    def __call__(
        self,
        url: str,
        allow_insecure_transport: bool = True,
        timeout: float = ...,
    ) -> Awaitable[str]:
        ...


async def verify(
    value: str,
    config: VerificationConfig,
    fetch: DocumentFetcher = fetch_document_text,
) -> TransactionRecord:
    """
    Verify a CBE direct deposit by reading its receipt.

    Every step is a hard gate: the first failure is raised to the caller
    and no partial record is returned. Errors from the fetcher propagate
    unchanged.

    Args:
        value: Transaction reference code or receipt URL
        config: Verification settings
        fetch: Coroutine function that returns the receipt text for a URL

    Returns:
        Validated TransactionRecord

    Raises:
        EmptyInput: If value is empty or not a string
        InvalidInputFormat: If value is neither a reference code nor a URL
        MissingAccountNumber: If config has no account number
        DocumentRetrievalFailed: If the receipt cannot be fetched or read
        MissingReferenceNumber: If the receipt has no reference number
        MissingPaymentTimestamp: If the receipt has no payment date
        TransactionTooOld: If the payment is outside the age window
    """
    if not value or not isinstance(value, str):
        raise EmptyInput()

    kind = classify(value)
    logger.info(f"Classified input as {kind}")

    if not config.account_number:
        raise MissingAccountNumber()

    url = build_url(value, config.account_number)
    logger.info(f"Fetching receipt: {url}")

    text = await fetch(
        url,
        allow_insecure_transport=config.allow_insecure_transport,
        timeout=config.timeout_seconds,
    )

    record = extract_fields(text)
    validate(record, config.effective_max_age_hours)

    logger.info(f"Verified transaction {record.reference_number}")
    return record


def create_default_config(account_number: str, **overrides: Any) -> VerificationConfig:
    """
    Build a config with the documented defaults.

    Defaults: max_age_hours=24, allow_insecure_transport=True,
    timeout_seconds=30.

    Args:
        account_number: CBE account number
        **overrides: Any other VerificationConfig field

    Returns:
        VerificationConfig instance
    """
    return VerificationConfig.from_overrides(account_number, **overrides)


async def verify_quick(
    value: str,
    account_number: str,
    *,
    fetch: DocumentFetcher = fetch_document_text,
    **overrides: Any,
) -> TransactionRecord:
    """
    Verify a payment with just an account number.

    Example:
        >>> record = await verify_quick("FT23062669JJ", "1000123456789")
        >>> record.debited_amount
        '1,500.00 ETB'
    """
    config = create_default_config(account_number, **overrides)
    return await verify(value, config, fetch)


def is_valid_account_number(value: Any) -> bool:
    """
    Check that value looks like a CBE account number.

    True only for strings of decimal digits at least 8 long. Never
    raises; anything that is not a str returns False.
    """
    return (
        isinstance(value, str)
        and len(value) >= MIN_ACCOUNT_NUMBER_LENGTH
        and _DIGITS_ONLY.fullmatch(value) is not None
    )
