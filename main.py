"""
CBE Direct-Deposit Verifier - Command Runner

Verifies one or more CBE transactions against the account configured
in the environment:
1. Load settings from the environment (or a local .env file)
2. Verify each reference code / receipt URL given on the command line
3. Log the extracted details or the reason verification failed
4. Exit non-zero if any transaction could not be verified

Usage:
    python main.py FT23062669JJ "https://apps.cbe.com.et:100/?id=FT23062669JJ12345678"
"""

import asyncio
import os
import sys
import logging
from typing import List, Optional, Tuple
from dotenv import load_dotenv

# Load .env file if it exists (for local development)
load_dotenv()

from cbe_verifier import (
    DEFAULT_MAX_TRANSACTION_AGE_HOURS,
    DocumentRetrievalFailed,
    EmptyInput,
    InvalidInputFormat,
    MissingAccountNumber,
    MissingPaymentTimestamp,
    MissingReferenceNumber,
    TransactionTooOld,
    VerificationConfig,
    is_valid_account_number,
    verify,
)

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Send log records to stdout in the runner's format."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def validate_environment() -> bool:
    """
    Validate all required environment variables are present.

    Returns:
        True if all variables are set
    """
    required_vars = [
        'CBE_ACCOUNT_NUMBER',
    ]

    missing = []
    for var in required_vars:
        if not os.environ.get(var):
            missing.append(var)

    if missing:
        logger.error(f"Missing environment variables: {', '.join(missing)}")
        return False

    account_number = os.environ['CBE_ACCOUNT_NUMBER']
    if not is_valid_account_number(account_number):
        logger.warning(
            "CBE_ACCOUNT_NUMBER does not look like a CBE account number "
            "(expected at least 8 digits)"
        )

    logger.info("All required environment variables present")
    return True


def load_config() -> VerificationConfig:
    """
    Build a VerificationConfig from environment variables.

    Raises:
        ValueError: If CBE_MAX_TRANSACTION_AGE_HOURS is not a number
    """
    max_age = os.environ.get('CBE_MAX_TRANSACTION_AGE_HOURS')
    reject_unauthorized = os.environ.get('CBE_REJECT_UNAUTHORIZED', 'false')

    return VerificationConfig(
        account_number=os.environ.get('CBE_ACCOUNT_NUMBER', ''),
        max_age_hours=float(max_age) if max_age else DEFAULT_MAX_TRANSACTION_AGE_HOURS,
        allow_insecure_transport=reject_unauthorized.strip().lower() != 'true',
    )


async def verify_one(value: str, config: VerificationConfig) -> Tuple[bool, str]:
    """
    Verify a single transaction and describe the outcome.

    Args:
        value: Reference code or receipt URL
        config: Verification settings

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        record = await verify(value, config)
        return True, (
            f"Verified {record.reference_number}: {record.debited_amount or '?'} "
            f"from {record.payer or '?'} to {record.receiver or '?'} "
            f"at {record.payment_timestamp}"
        )

    except (EmptyInput, InvalidInputFormat) as e:
        return False, f"Bad input '{value}': {e}"

    except MissingAccountNumber as e:
        return False, f"Configuration error: {e}"

    except DocumentRetrievalFailed as e:
        return False, f"Could not fetch receipt for '{value}': {e}"

    except (MissingReferenceNumber, MissingPaymentTimestamp) as e:
        return False, f"Receipt for '{value}' is incomplete: {e}"

    except TransactionTooOld as e:
        return False, f"Rejected '{value}': {e}"


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point for the verification runner.

    Args:
        argv: Transaction identifiers (defaults to sys.argv[1:])
    """
    configure_logging()
    values = sys.argv[1:] if argv is None else argv

    logger.info("=" * 50)
    logger.info("CBE Direct-Deposit Verifier - Starting")
    logger.info("=" * 50)

    if not validate_environment():
        logger.error("Environment validation failed. Exiting.")
        sys.exit(1)

    if not values:
        logger.error("No transaction reference or receipt URL given.")
        sys.exit(1)

    try:
        config = load_config()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    verified = 0
    results: List[str] = []

    for i, value in enumerate(values, start=1):
        success, message = asyncio.run(verify_one(value, config))
        logger.info(f"  [{i}/{len(values)}] {message}")
        if success:
            verified += 1
            results.append(f"[OK] {message}")
        else:
            results.append(f"[ERROR] {message}")

    logger.info("")
    logger.info("=" * 50)
    logger.info("EXECUTION SUMMARY")
    logger.info("=" * 50)
    logger.info(f"Total:            {len(values)}")
    logger.info(f"Verified:         {verified}")
    logger.info(f"Failed:           {len(values) - verified}")
    logger.info("-" * 50)

    for result in results:
        logger.info(result)

    logger.info("=" * 50)

    if verified < len(values):
        sys.exit(1)


if __name__ == "__main__":
    main()
