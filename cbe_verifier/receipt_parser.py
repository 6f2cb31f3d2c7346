"""
Receipt parser for CBE transaction PDFs.

This module pulls structured transaction data out of the plain text of
a CBE receipt and checks that the result is usable: both mandatory
fields present and the payment recent enough.
"""

import logging
from datetime import datetime
from typing import Optional

from .constants import (
    DEFAULT_MAX_TRANSACTION_AGE_HOURS,
    PAYMENT_DATE_TIME_FORMAT,
    PDF_EXTRACTION_PATTERNS,
)
from .errors import (
    MissingPaymentTimestamp,
    MissingReferenceNumber,
    TransactionTooOld,
)
from .models import TransactionRecord, VerificationConfig

logger = logging.getLogger(__name__)


def _search(field: str, text: str) -> Optional[str]:
    """
    Run one extraction pattern and return its trimmed capture.

    Args:
        field: Key into PDF_EXTRACTION_PATTERNS
        text: Receipt text

    Returns:
        Captured value, or None if the label is missing or the value blank
    """
    match = PDF_EXTRACTION_PATTERNS[field].search(text)
    if not match:
        return None
    return match.group(1).strip() or None


def _parse_payment_date_time(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse a receipt timestamp such as "12/25/2023, 2:30:45 PM".

    Args:
        raw: Captured timestamp text

    Returns:
        Naive datetime, or None if missing or unparseable
    """
    if not raw:
        return None

    try:
        return datetime.strptime(raw, PAYMENT_DATE_TIME_FORMAT)
    except ValueError:
        logger.warning(f"Could not parse payment date and time: '{raw}'")
        return None


def extract_fields(text: str) -> TransactionRecord:
    """
    Extract transaction fields from unformatted receipt text.

    Never raises for missing data: a label that is not found simply
    leaves its field as None. Deciding what is mandatory is left to
    validate().

    Args:
        text: Plain text of the receipt PDF

    Returns:
        TransactionRecord with whatever fields were found
    """
    text = text or ""

    record = TransactionRecord(
        reference_number=_search("reference_number", text),
        payment_timestamp=_parse_payment_date_time(
            _search("payment_date_time", text)
        ),
        debited_amount=_search("total_amount", text),
        receiver=_search("receiver", text),
        payer=_search("payer", text),
    )

    found = [name for name, value in record.to_dict().items() if value]
    logger.info(f"Extracted receipt fields: {found}")
    return record


def transaction_age_hours(payment_timestamp: datetime, now: Optional[datetime] = None) -> int:
    """Whole hours between payment_timestamp and now, truncated toward zero."""
    now = now or datetime.now()
    return int((now - payment_timestamp).total_seconds() / 3600)


def validate(
    record: TransactionRecord,
    max_age_hours: Optional[float] = DEFAULT_MAX_TRANSACTION_AGE_HOURS,
    now: Optional[datetime] = None,
) -> TransactionRecord:
    """
    Check that an extracted record is complete and recent enough.

    A transaction exactly max_age_hours old is accepted; the comparison
    is strictly greater-than on the whole-hour age.

    Args:
        record: Output of extract_fields()
        max_age_hours: Age window in hours (None means the default of 24)
        now: Reference time, defaults to the current local time

    Returns:
        The same record, unchanged

    Raises:
        MissingReferenceNumber: If the reference number is absent
        MissingPaymentTimestamp: If the payment timestamp is absent
        TransactionTooOld: If the payment is older than the window
    """
    if not record.reference_number:
        raise MissingReferenceNumber()

    if record.payment_timestamp is None:
        raise MissingPaymentTimestamp()

    if max_age_hours is None:
        max_age_hours = DEFAULT_MAX_TRANSACTION_AGE_HOURS

    age_hours = transaction_age_hours(record.payment_timestamp, now)
    if age_hours > max_age_hours:
        raise TransactionTooOld(age_hours, max_age_hours)

    return record


def extract_transaction_details(
    text: str,
    config: VerificationConfig,
    now: Optional[datetime] = None,
) -> TransactionRecord:
    """
    Extract and validate transaction details in one step.

    Args:
        text: Plain text of the receipt PDF
        config: Verification settings (only max_age_hours is used)
        now: Reference time, defaults to the current local time

    Returns:
        Validated TransactionRecord

    Raises:
        MissingReferenceNumber, MissingPaymentTimestamp, TransactionTooOld
    """
    record = extract_fields(text)
    return validate(record, config.effective_max_age_hours, now)
