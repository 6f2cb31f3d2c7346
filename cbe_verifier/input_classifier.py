"""
Input classification and receipt URL construction.

A caller identifies a transaction either by its bare reference code
("FT23062669JJ") or by the full receipt URL the bank sent them. Both
forms are turned into a fetch URL that points at the caller's own
account.
"""

import logging
from typing import Literal

from .constants import (
    ACCOUNT_SUFFIX_LENGTH,
    CBE_VERIFICATION_BASE_URL,
    TRANSACTION_REFERENCE_REGEX,
    TRANSACTION_URL_REGEX,
)
from .errors import InvalidInputFormat

logger = logging.getLogger(__name__)

InputKind = Literal["reference", "url"]


def classify(value: str) -> InputKind:
    """
    Decide whether the input is a reference code or a receipt URL.

    The URL shape is checked first, so a receipt URL is always treated
    as a URL even though it contains a reference code. Both shapes must
    match the whole string.

    Args:
        value: Reference code or receipt URL supplied by the caller

    Returns:
        "url" or "reference"

    Raises:
        InvalidInputFormat: If value is empty, not a string, or matches
            neither shape
    """
    if not value or not isinstance(value, str):
        raise InvalidInputFormat()

    if TRANSACTION_URL_REGEX.fullmatch(value):
        return "url"
    if TRANSACTION_REFERENCE_REGEX.fullmatch(value):
        return "reference"

    logger.warning(f"Unrecognised transaction identifier: '{value}'")
    raise InvalidInputFormat()


def _account_suffix(account_number: str) -> str:
    # Shorter accounts contribute the whole string, no padding
    return account_number[-ACCOUNT_SUFFIX_LENGTH:]


def build_url(value: str, account_number: str) -> str:
    """
    Build the receipt fetch URL for the caller's account.

    For a receipt URL, the trailing account suffix is swapped for the
    caller's own. For a reference code, the full URL is assembled from
    the service base URL.

    Args:
        value: Input that already passed classify()
        account_number: Caller's CBE account number

    Returns:
        Complete receipt URL
    """
    suffix = _account_suffix(account_number)

    if TRANSACTION_URL_REGEX.fullmatch(value):
        return value[:-ACCOUNT_SUFFIX_LENGTH] + suffix

    return f"{CBE_VERIFICATION_BASE_URL}/?id={value}{suffix}"
