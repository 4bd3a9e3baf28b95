import re
import logging

from .lexicons import ENGLISH_KEYWORDS, FRENCH_KEYWORDS
from .models import LanguageProfile

logger = logging.getLogger(__name__)

# A language must outscore the other by this factor to win outright
LANGUAGE_MARGIN = 1.5

_FRENCH_PATTERNS = [re.compile(rf'\b{re.escape(kw)}\b', re.IGNORECASE) for kw in FRENCH_KEYWORDS]
_ENGLISH_PATTERNS = [re.compile(rf'\b{re.escape(kw)}\b', re.IGNORECASE) for kw in ENGLISH_KEYWORDS]


def _score(text: str, patterns) -> int:
    return sum(len(pattern.findall(text)) for pattern in patterns)


def classify_language(french_score: int, english_score: int) -> LanguageProfile:
    """Turn keyword scores into a language profile.

    Both scores at zero yield ``mixed`` with a confidence of 0.5.
    """
    total = french_score + english_score
    confidence = max(french_score, english_score) / total if total > 0 else 0.5

    if french_score > english_score * LANGUAGE_MARGIN:
        code = 'fr'
    elif english_score > french_score * LANGUAGE_MARGIN:
        code = 'en'
    else:
        code = 'mixed'

    return LanguageProfile(
        code=code,
        confidence=confidence,
        french_score=french_score,
        english_score=english_score,
    )


def detect_language(text: str) -> LanguageProfile:
    """Score the text against the French and English CV vocabularies."""
    text = (text or '').lower()
    profile = classify_language(_score(text, _FRENCH_PATTERNS), _score(text, _ENGLISH_PATTERNS))
    logger.debug(
        f"Language scores: fr={profile.french_score} en={profile.english_score} -> {profile.code}"
    )
    return profile
