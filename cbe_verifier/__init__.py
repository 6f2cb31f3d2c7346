"""
CBE direct-deposit verification.

Fetches a Commercial Bank of Ethiopia receipt PDF and checks that the
transaction it describes exists and is recent.

Example:
    >>> from cbe_verifier import verify_quick
    >>> record = await verify_quick("FT23062669JJ", "1000123456789")
"""

from .constants import (
    CBE_VERIFICATION_BASE_URL,
    DEFAULT_MAX_TRANSACTION_AGE_HOURS,
    PDF_EXTRACTION_PATTERNS,
    TRANSACTION_REFERENCE_REGEX,
    TRANSACTION_URL_REGEX,
)
from .errors import (
    DocumentRetrievalFailed,
    EmptyInput,
    InvalidInputFormat,
    MissingAccountNumber,
    MissingPaymentTimestamp,
    MissingReferenceNumber,
    TransactionTooOld,
    VerificationError,
)
from .input_classifier import build_url, classify
from .models import TransactionRecord, VerificationConfig
from .pdf_fetcher import download_pdf, extract_pdf_text, fetch_document_text
from .receipt_parser import extract_fields, extract_transaction_details, validate
from .verifier import (
    create_default_config,
    is_valid_account_number,
    verify,
    verify_quick,
)

__all__ = [
    'CBE_VERIFICATION_BASE_URL',
    'DEFAULT_MAX_TRANSACTION_AGE_HOURS',
    'PDF_EXTRACTION_PATTERNS',
    'TRANSACTION_REFERENCE_REGEX',
    'TRANSACTION_URL_REGEX',
    'DocumentRetrievalFailed',
    'EmptyInput',
    'InvalidInputFormat',
    'MissingAccountNumber',
    'MissingPaymentTimestamp',
    'MissingReferenceNumber',
    'TransactionTooOld',
    'VerificationError',
    'TransactionRecord',
    'VerificationConfig',
    'build_url',
    'classify',
    'create_default_config',
    'download_pdf',
    'extract_fields',
    'extract_pdf_text',
    'extract_transaction_details',
    'fetch_document_text',
    'is_valid_account_number',
    'validate',
    'verify',
    'verify_quick',
]
