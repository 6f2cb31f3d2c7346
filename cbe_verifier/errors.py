"""
Errors raised while verifying a CBE transaction.

Each class maps to one failure condition so callers can tell a network
problem apart from a receipt that did not contain what was expected.
"""


class VerificationError(Exception):
    """Base class for every verification failure."""
    pass


class EmptyInput(VerificationError):
    """Raised when the transaction identifier is empty or not a string."""

    def __init__(self, message: str = "Input must be a non-empty string"):
        super().__init__(message)


class InvalidInputFormat(VerificationError):
    """Raised when input is neither a reference code nor a receipt URL."""

    def __init__(
        self,
        message: str = "Invalid transaction reference number or URL format"
    ):
        super().__init__(message)


class MissingAccountNumber(VerificationError):
    """Raised when the config carries no account number."""

    def __init__(
        self,
        message: str = "CBE account number is required for verification"
    ):
        super().__init__(message)


class DocumentRetrievalFailed(VerificationError):
    """Raised when the receipt PDF cannot be downloaded or decoded."""
    pass


class MissingReferenceNumber(VerificationError):
    """Raised when the receipt text has no reference number."""

    def __init__(
        self,
        message: str = "Transaction reference number not found in the PDF"
    ):
        super().__init__(message)


class MissingPaymentTimestamp(VerificationError):
    """Raised when the receipt text has no parseable payment date."""

    def __init__(
        self,
        message: str = "Payment date and time not found in the PDF"
    ):
        super().__init__(message)


class TransactionTooOld(VerificationError):
    """Raised when the transaction falls outside the age window."""

    def __init__(self, age_hours: int, max_age_hours: float):
        self.age_hours = age_hours
        self.max_age_hours = max_age_hours
        super().__init__(
            f"Transaction is older than {max_age_hours:g} hours "
            f"({age_hours} hours old), cannot verify"
        )
