import pytest
from extraction.text_processor import InsufficientTextError, TextProcessor

@pytest.fixture
def text_processor():
    return TextProcessor()

def test_clean_text(text_processor):
    raw = "  Line one  \r\n\r\n\r\n\r\nLine   two\x0c"
    assert text_processor.clean_text(raw) == "Line one\n\nLine two"

def test_clean_text_empty(text_processor):
    assert text_processor.clean_text("") == ""

def test_count_meaningful_words(text_processor):
    assert text_processor.count_meaningful_words("I am a big fan") == 2

def test_no_text(text_processor):
    quality = text_processor.validate_text("")
    assert not quality.is_valid
    assert quality.reason == "No text extracted"

def test_short_pdf_text(text_processor):
    quality = text_processor.validate_text("short text", "PDF")
    assert not quality.is_valid
    assert quality.reason == "PDF text too short"

def test_short_docx_text(text_processor):
    quality = text_processor.validate_text("a few words only here", "DOCX")
    assert not quality.is_valid
    assert quality.reason == "Text too short"

def test_scanned_pdf_is_medium(text_processor):
    text = "\n".join(["Python developer"] * 21)
    quality = text_processor.validate_text(text, "PDF")
    assert quality.is_valid
    assert quality.quality == "medium"

def test_quality_levels(text_processor):
    assert text_processor.validate_text(" ".join(["experienced"] * 100), "DOCX").quality == "high"
    assert text_processor.validate_text(" ".join(["words"] * 20), "DOCX").quality == "medium"

    low = text_processor.validate_text(" ".join(["alpha"] * 9), "DOCX")
    assert low.is_valid
    assert low.quality == "low"

def test_insufficient_text_error_message():
    error = InsufficientTextError("Text too short")
    assert str(error) == "Insufficient text extracted: Text too short"
    assert error.reason == "Text too short"
    assert isinstance(error, ValueError)
