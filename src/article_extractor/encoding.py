"""Character encoding normalization for HTML input and extracted text."""

import logging
import re
import unicodedata
from typing import Optional

from charset_normalizer import from_bytes as detect_encoding

logger = logging.getLogger(__name__)

_META_CHARSET_RE = re.compile(rb"""charset=["']?([^"'\s/>;]+)""", re.IGNORECASE)


def sniff_meta_charset(content: bytes) -> Optional[str]:
    """Find a charset declared in the first 2 KB of an HTML document."""
    match = _META_CHARSET_RE.search(content[:2048])
    if match:
        return match.group(1).decode("ascii", errors="ignore").strip() or None
    return None


def decode_html(content: bytes, declared: Optional[str] = None) -> str:
    """
    Decode HTML bytes with encoding detection.

    Fallback chain:
    1. Declared charset (e.g. from a Content-Type header)
    2. Charset from a meta tag in the document
    3. charset-normalizer detection
    4. UTF-8 with replacement

    Args:
        content: Raw HTML bytes
        declared: Charset declared outside the document, if known

    Returns:
        Decoded string
    """
    for encoding in (declared, sniff_meta_charset(content)):
        if not encoding:
            continue
        try:
            return content.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug(f"Failed to decode with declared encoding: {encoding}")

    best_match = detect_encoding(content).best()
    if best_match is not None:
        logger.debug(f"Detected encoding: {best_match.encoding}")
        return str(best_match)

    logger.debug("No encoding detected, falling back to UTF-8")
    return content.decode("utf-8", errors="replace")


def normalize_text(text: Optional[str]) -> Optional[str]:
    """Normalize extracted text to NFC so equivalent characters compare equal."""
    if text is None:
        return None
    return unicodedata.normalize("NFC", text)
