"""Tests for language hints, language detection and encoding handling."""

import unicodedata

from article_extractor.encoding import decode_html, normalize_text, sniff_meta_charset
from article_extractor.language import detect_language, language_from_html


class TestLanguageFromHtml:
    """Tests for language_from_html."""

    def test_lang_attribute(self):
        """Test the html lang attribute, cut to two letters."""
        assert language_from_html('<html lang="en-US"><body></body></html>') == "en"

    def test_lang_attribute_is_lowercased(self):
        """Test that codes are lower-cased."""
        assert language_from_html('<html lang="DE"></html>') == "de"

    def test_content_language_meta(self):
        """Test the content-language meta tag."""
        html = '<html><head><meta name="content-language" content="ja"></head></html>'
        assert language_from_html(html) == "ja"

    def test_http_equiv_meta(self):
        """Test the http-equiv form of the meta tag."""
        html = '<html><head><meta http-equiv="Content-Language" content="es-ES"></head></html>'
        assert language_from_html(html) == "es"

    def test_lang_attribute_wins_over_meta(self):
        """Test hint precedence."""
        html = '<html lang="it"><head><meta name="content-language" content="fr"></head></html>'
        assert language_from_html(html) == "it"

    def test_no_hint(self):
        """Test a page without hints."""
        assert language_from_html("<html><body><p>text</p></body></html>") is None

    def test_empty_lang_attribute(self):
        """Test that an empty lang attribute is no hint."""
        assert language_from_html('<html lang=""><body></body></html>') is None


class TestDetectLanguage:
    """Tests for detect_language."""

    def test_detects_english(self):
        """Test detection on an English sample."""
        text = (
            "The weather was cold and rainy, so the children stayed inside "
            "and read books about the history of the old town."
        )
        assert detect_language(text) == "en"

    def test_empty_text(self):
        """Test that empty text gives no language."""
        assert detect_language("   ") is None

    def test_text_without_letters(self):
        """Test that undetectable text gives no language."""
        assert detect_language("12345 67890 !!!") is None


class TestDecodeHtml:
    """Tests for decode_html."""

    def test_utf8(self):
        """Test plain UTF-8 input."""
        html = "<p>Héllo Wörld</p>".encode()
        assert "Héllo Wörld" in decode_html(html)

    def test_meta_charset(self):
        """Test decoding with a charset from a meta tag."""
        html = '<meta charset="iso-8859-1"><p>café crème</p>'.encode("latin-1")
        assert "café crème" in decode_html(html)

    def test_declared_charset_wins(self):
        """Test that an explicitly declared charset is used first."""
        html = "<p>naïve</p>".encode("cp1252")
        assert decode_html(html, declared="cp1252") == "<p>naïve</p>"

    def test_unknown_declared_charset_falls_back(self):
        """Test that a bogus charset does not break decoding."""
        html = b"<p>plain ascii text</p>"
        assert decode_html(html, declared="no-such-charset") == "<p>plain ascii text</p>"

    def test_sniff_meta_charset(self):
        """Test charset sniffing from http-equiv and meta charset forms."""
        assert sniff_meta_charset(b'<meta charset="utf-8">') == "utf-8"
        assert (
            sniff_meta_charset(b'<meta http-equiv="Content-Type" content="text/html; charset=windows-1252">')
            == "windows-1252"
        )
        assert sniff_meta_charset(b"<p>no charset</p>") is None


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_composes_characters(self):
        """Test NFC normalization."""
        decomposed = unicodedata.normalize("NFD", "café")
        assert normalize_text(decomposed) == "café"
        assert len(normalize_text(decomposed)) == 4

    def test_none(self):
        """Test absent text stays absent."""
        assert normalize_text(None) is None
