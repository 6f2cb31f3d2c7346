"""
Constants for CBE receipt verification.

Base URL, input-shape patterns, the default age window, and the regex
patterns used to pull fields out of the text of a CBE PDF receipt.
"""

import re

# Base URL for the CBE receipt service
CBE_VERIFICATION_BASE_URL = "https://apps.cbe.com.et:100"

# Reference code: "FT" + 10 alphanumerics (e.g. "FT23062669JJ")
TRANSACTION_REFERENCE_REGEX = re.compile(r'FT[a-zA-Z0-9]{10}')

# Receipt URL: reference code + 8-character account suffix after ?id=
TRANSACTION_URL_REGEX = re.compile(
    re.escape(CBE_VERIFICATION_BASE_URL) + r'/\?id=FT[a-zA-Z0-9]{18}'
)

# Number of trailing account-number characters embedded in a receipt URL
ACCOUNT_SUFFIX_LENGTH = 8

DEFAULT_MAX_TRANSACTION_AGE_HOURS = 24

# Seconds to wait for the receipt download
DEFAULT_DOWNLOAD_TIMEOUT_SECONDS = 30.0

# Receipt timestamps look like "12/25/2023, 2:30:45 PM"
PAYMENT_DATE_TIME_FORMAT = "%m/%d/%Y, %I:%M:%S %p"

# Each pattern captures the value that follows its label, up to end of line
PDF_EXTRACTION_PATTERNS = {
    "reference_number": re.compile(r'Reference No\. \(VAT Invoice No\)\s*(.+)'),
    "payment_date_time": re.compile(r'Payment Date & Time\s*(.+)'),
    "total_amount": re.compile(
        r'Total amount debited from customers account\s*([\d,.]+\s*[A-Z]{3})'
    ),
    "receiver": re.compile(r'Receiver\s*(.+)'),
    "payer": re.compile(r'Payer\s*(.+)'),
}
