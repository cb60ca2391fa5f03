"""Language identification from HTML hints and from the extracted text."""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag
from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

# Make langdetect deterministic across runs
DetectorFactory.seed = 0

METHOD_HTML = "html"
METHOD_DETECTOR = "detector"


def _short_code(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    code = value.strip()[:2].lower()
    return code or None


def language_from_html(html: str) -> Optional[str]:
    """
    Look for a language hint in the HTML.

    Checks the lang attribute of the html tag first, then a
    content-language meta tag.

    Args:
        html: HTML source

    Returns:
        Two letter language code, or None if the page gives no hint
    """
    soup = BeautifulSoup(html, "html.parser")

    html_tag = soup.find("html")
    if isinstance(html_tag, Tag):
        lang = html_tag.get("lang")
        if isinstance(lang, str) and lang.strip():
            logger.debug(f"Found language {lang} on html tag")
            return _short_code(lang)

    for meta in soup.find_all("meta"):
        name = meta.get("name") or meta.get("http-equiv") or ""
        if name.lower() == "content-language":
            logger.debug(f"Found content-language meta tag: {meta.get('content')}")
            return _short_code(meta.get("content"))

    logger.debug("Found no language hint in HTML")
    return None


def detect_language(text: str, sample_chars: int = 100) -> Optional[str]:
    """
    Identify the language of a text sample.

    Args:
        text: Extracted article text
        sample_chars: Number of leading characters to look at

    Returns:
        Two letter language code, or None if it cannot be identified
    """
    sample = text[:sample_chars].strip()
    if not sample:
        return None
    try:
        return _short_code(detect(sample))
    except LangDetectException as e:
        logger.debug(f"Language detection failed: {e}")
        return None
