import pytest

from studybot.core.errors import ExtractionError
from studybot.modules.documents import extract_excerpt, extract_text, truncate_excerpt
from tests.conftest import make_pdf


@pytest.mark.unit
class TestTruncateExcerpt:
    def test_long_text_keeps_exactly_first_1500_chars(self):
        text = "The mitochondria is the powerhouse of the cell. " * 60
        excerpt = truncate_excerpt(text, 1500)
        assert len(excerpt) == 1500
        assert excerpt == text[:1500]

    def test_cut_may_fall_mid_word_and_is_not_trimmed(self):
        text = "a" * 1499 + " word"
        assert truncate_excerpt(text, 1500) == "a" * 1499 + " "

    def test_short_text_is_unchanged(self):
        text = "  short text with padding  \n"
        assert truncate_excerpt(text, 1500) == text

    def test_exactly_limit_is_unchanged(self):
        text = "x" * 1500
        assert truncate_excerpt(text, 1500) == text

    def test_default_limit_comes_from_settings(self):
        assert len(truncate_excerpt("y" * 5000)) == 1500


@pytest.mark.unit
class TestExtract:
    def test_reads_text_from_pdf(self, sample_pdf):
        assert "Photosynthesis" in extract_text(sample_pdf)

    def test_pages_are_all_included(self):
        text = extract_text(make_pdf("First page here", "Second page here"))
        assert "First page here" in text
        assert "Second page here" in text
        assert text.index("First") < text.index("Second")

    def test_excerpt_of_long_document_is_prefix(self):
        pdf = make_pdf("abcdefghij" * 200)
        full = extract_text(pdf)
        excerpt = extract_excerpt(pdf)
        assert len(full) > 1500
        assert len(excerpt) == 1500
        assert excerpt == full[:1500]
        assert excerpt.startswith("abcdefghij")

    def test_explicit_limit(self, sample_pdf):
        assert extract_excerpt(sample_pdf, limit=10) == extract_text(sample_pdf)[:10]

    @pytest.mark.parametrize("payload", [None, b""])
    def test_missing_file_is_an_error(self, payload):
        with pytest.raises(ExtractionError, match="No PDF file uploaded"):
            extract_excerpt(payload)

    def test_non_pdf_bytes_are_an_error(self):
        with pytest.raises(ExtractionError, match="Could not read the uploaded PDF"):
            extract_excerpt(b"this is definitely not a pdf")
