import re
import logging
from typing import List

from .lexicons import FRENCH_LANGUAGE_MAP, LANGUAGE_NAMES
from .models import ExtractionContext

logger = logging.getLogger(__name__)

_ALL_NAMES = list(dict.fromkeys(LANGUAGE_NAMES['en'] + LANGUAGE_NAMES['fr']))
LANGUAGE_PATTERN = re.compile(r'\b(' + '|'.join(_ALL_NAMES) + r')\b', re.IGNORECASE)


def canonical_language(name: str) -> str:
    """Lowercase English name for an English or French language name."""
    name = name.lower()
    return FRENCH_LANGUAGE_MAP.get(name, name)


def extract_languages(context: ExtractionContext) -> List[str]:
    logger.info("[ADVANCED] Extracting languages")

    section = context.section('languages')
    if section is None:
        logger.debug("[LANGUAGES] No dedicated language section, searching full document")
        search_text = context.full_text
    else:
        search_text = section.content

    languages = []
    for match in LANGUAGE_PATTERN.finditer(search_text):
        name = canonical_language(match.group(1))
        if name not in languages:
            languages.append(name)
            logger.debug(f"[LANGUAGES] Found: {name}")

    logger.info(f"[LANGUAGES] Found {len(languages)} languages")
    return languages
