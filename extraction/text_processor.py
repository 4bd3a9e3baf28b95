import re
import logging
from typing import Optional

from .models import TextQuality

logger = logging.getLogger(__name__)


class InsufficientTextError(ValueError):
    """Raised when the text pulled out of a document is too thin to parse."""

    def __init__(self, reason: str, quality: Optional[TextQuality] = None):
        self.reason = reason
        self.quality = quality
        super().__init__(f"Insufficient text extracted: {reason}")


class TextProcessor:
    """Normalizes extracted resume text and judges whether it is usable."""

    def clean_text(self, text: str) -> str:
        """Clean extracted text by removing excessive whitespace and special characters"""
        if not text:
            return ''
        # Normalize line endings
        text = text.replace('\r\n', '\n').replace('\r', '\n')
        # Remove form feed characters
        text = text.replace('\x0c', '\n')
        # Remove non-printable characters (except newlines, tabs)
        text = ''.join(char for char in text if char.isprintable() or char in {'\n', '\t'})
        # Trim every line, then collapse runs of spaces and blank lines
        text = '\n'.join(line.strip() for line in text.split('\n'))
        text = re.sub(r'[^\S\n]{2,}', ' ', text)
        text = re.sub(r'\n{3,}', '\n\n', text)
        return text.strip()

    def count_meaningful_words(self, text: str) -> int:
        return len([word for word in (text or '').split() if len(word) > 2])

    def validate_text(self, text: Optional[str], document_type: str = "PDF") -> TextQuality:
        """Decide whether extracted text is worth parsing and how good it looks."""
        if not text:
            return TextQuality(is_valid=False, reason='No text extracted', quality='low')

        length = len(text)
        words = self.count_meaningful_words(text)
        line_count = len(text.split('\n'))

        if document_type == 'PDF':
            if length < 30 and words < 5:
                return TextQuality(is_valid=False, reason='PDF text too short', quality='low')
            # Scanned PDFs come back as many short lines
            if line_count > 20 and length >= 20 and words >= 3:
                return TextQuality(is_valid=True, quality='medium')

        if length < 50 and words < 8:
            return TextQuality(is_valid=False, reason='Text too short', quality='low')

        if length >= 500 and words >= 80:
            quality = 'high'
        elif length >= 100 and words >= 15:
            quality = 'medium'
        else:
            quality = 'low'

        logger.debug(f"Text quality: length={length}, words={words}, quality={quality}")
        return TextQuality(is_valid=True, quality=quality)
