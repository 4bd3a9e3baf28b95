import re
import logging
from typing import List, Optional

from .lexicons import DEGREE_KEYWORDS, INSTITUTION_KEYWORDS
from .models import EducationEntry, ExtractionContext

logger = logging.getLogger(__name__)

EDUCATION_HEADER = re.compile(r'^(?:EDUCATION|FORMATION|ÉDUCATION)', re.IGNORECASE)
YEAR_RANGE = re.compile(r'(\d{4})\s*[-–—]\s*(\d{4})')
INSTITUTION_PATTERN = re.compile(
    r'(?:' + '|'.join(re.escape(kw) for kw in INSTITUTION_KEYWORDS) + r')[^\d|]*',
    re.IGNORECASE,
)
FIELD_OF_STUDY = re.compile(r'\s(?:in|en)\s+(.+)$', re.IGNORECASE)


def _keyword_patterns(keywords):
    return [re.compile(rf'\b{re.escape(kw)}\b', re.IGNORECASE) for kw in keywords]


_DEGREE_PATTERNS = {code: _keyword_patterns(keywords) for code, keywords in DEGREE_KEYWORDS.items()}
_INSTITUTION_PATTERNS = _keyword_patterns(INSTITUTION_KEYWORDS)


def _strip_years(value: str) -> str:
    return YEAR_RANGE.sub('', value, count=1).strip(' ,-–—')


def _field_of_study(degree: str) -> Optional[str]:
    match = FIELD_OF_STUDY.search(degree)
    if match:
        return match.group(1).strip(' ,-') or None
    return None


def extract_education(context: ExtractionContext) -> List[EducationEntry]:
    """Degrees and schools listed in the education section."""
    logger.info("[ADVANCED] Extracting education")

    section = context.section('education')
    if section is None:
        logger.debug("[EDUCATION] No education section found")
        return []

    degree_patterns = _DEGREE_PATTERNS['fr' if context.language.code == 'fr' else 'en']
    education = []

    for line in section.lines:
        if EDUCATION_HEADER.match(line):
            continue

        has_degree = any(pattern.search(line) for pattern in degree_patterns)
        has_institution = any(pattern.search(line) for pattern in _INSTITUTION_PATTERNS)
        if not (has_degree or has_institution):
            continue

        dates = YEAR_RANGE.search(line)

        if '|' in line:
            parts = [part.strip() for part in line.split('|')]
            degree = parts[0] or line
            institution = parts[1] if len(parts) > 1 else ''
        else:
            institution_match = INSTITUTION_PATTERN.search(line)
            if institution_match:
                degree = line[:institution_match.start()].strip()
                institution = institution_match.group(0).strip()
            else:
                degree, institution = line, ''

        degree = _strip_years(degree)
        entry = EducationEntry(
            degree=degree,
            institution=_strip_years(institution),
            field_of_study=_field_of_study(degree),
            start_date=dates.group(1) if dates else None,
            end_date=dates.group(2) if dates else None,
        )
        education.append(entry)
        logger.debug(f"[EDUCATION] Found: {entry.degree} at {entry.institution}")

    return education
