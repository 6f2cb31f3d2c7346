"""
Receipt PDF download and text extraction.

Fetches the receipt over HTTPS and turns the PDF into plain text for the
receipt parser. Failures are raised as DocumentRetrievalFailed and are
never retried here.
"""

import asyncio
import logging
from io import BytesIO
from typing import Optional

import httpx
import pdfplumber

from .constants import DEFAULT_DOWNLOAD_TIMEOUT_SECONDS
from .errors import DocumentRetrievalFailed

logger = logging.getLogger(__name__)


async def download_pdf(
    url: str,
    allow_insecure_transport: bool = True,
    timeout: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> bytes:
    """
    Download the receipt PDF, following redirects.

    Args:
        url: Receipt URL
        allow_insecure_transport: Skip TLS certificate verification
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)

    Returns:
        Raw PDF bytes

    Raises:
        DocumentRetrievalFailed: On network error, timeout, or HTTP error status
    """
    try:
        async with httpx.AsyncClient(
            verify=not allow_insecure_transport,
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        ) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Failed to download PDF from {url}: {e}")
        raise DocumentRetrievalFailed(f"Failed to download PDF: {e}") from e

    logger.info(f"Downloaded {len(resp.content)} bytes from {url}")
    return resp.content


def extract_pdf_text(data: bytes) -> str:
    """
    Extract plain text from PDF bytes.

    Pages are joined with newlines so labels stay on their own lines.

    Args:
        data: Raw PDF bytes

    Returns:
        Text of every page

    Raises:
        DocumentRetrievalFailed: If the bytes cannot be read as a PDF
    """
    try:
        with pdfplumber.open(BytesIO(data)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.error(f"Failed to extract text from PDF: {e}")
        raise DocumentRetrievalFailed(f"Failed to extract text from PDF: {e}") from e

    return "\n".join(pages)


async def fetch_document_text(
    url: str,
    allow_insecure_transport: bool = True,
    timeout: float = DEFAULT_DOWNLOAD_TIMEOUT_SECONDS,
) -> str:
    """
    Download a receipt PDF and return its text.

    Args:
        url: Receipt URL
        allow_insecure_transport: Skip TLS certificate verification
        timeout: Request timeout in seconds

    Returns:
        Plain text of the receipt

    Raises:
        DocumentRetrievalFailed: If download or decoding fails
    """
    data = await download_pdf(url, allow_insecure_transport, timeout)
    # pdfplumber parsing blocks
    return await asyncio.to_thread(extract_pdf_text, data)
