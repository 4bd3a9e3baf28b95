import re
import logging
from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union

from .models import ExperienceEntry, ExtractionContext

logger = logging.getLogger(__name__)

PRESENT_WORDS = r"present|current|aujourd'hui|actuel|now"
MONTHS = (
    r"jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec|"
    r"janv|févr|mars|avr|mai|juin|juil|août|sept|déc"
)

# Tried in order on each line, first match wins
DATE_RANGE_PATTERNS = (
    # MM/YYYY - MM/YYYY or MM/YYYY - Present
    re.compile(
        rf"\b\d{{2}}/(?P<start>\d{{4}})\s*[-–—]\s*(?:\d{{2}}/(?P<end>\d{{4}})|(?P<present>{PRESENT_WORDS}))\b",
        re.IGNORECASE,
    ),
    # YYYY - YYYY or YYYY - Present
    re.compile(
        rf"\b(?P<start>\d{{4}})\s*[-–—]\s*(?:(?P<end>\d{{4}})|(?P<present>{PRESENT_WORDS}))\b",
        re.IGNORECASE,
    ),
    # Month YYYY - Month YYYY, French or English month names
    re.compile(
        rf"\b(?:{MONTHS})[a-zéû]*\.?\s+(?P<start>\d{{4}})\s*[-–—]\s*"
        rf"(?:(?:{MONTHS})[a-zéû]*\.?\s+)?(?:(?P<end>\d{{4}})|(?P<present>{PRESENT_WORDS}))\b",
        re.IGNORECASE,
    ),
)

EXPERIENCE_HEADER = re.compile(r'^(?:EXPERIENCE|EXPÉRIENCE|PROFESSIONAL|PARCOURS)', re.IGNORECASE)
NEXT_SECTION_HEADER = re.compile(r'^(?:EDUCATION|PROJET|CERTIFICATION|COMPETENCES)', re.IGNORECASE)
BULLET = re.compile(r'^[-•]')
DESCRIPTION_NOISE = re.compile(r'Technologies|Utilisees|Conception|Développement', re.IGNORECASE)
DESCRIPTION_KEYWORDS = re.compile(
    r'Technologies|Conception|Développement|Création|Intégration|Implémentation',
    re.IGNORECASE,
)
COMPANY_PATTERN = re.compile(r'\bl\s+([A-Z][A-Za-zÀ-ÿ ]+?)\s*$')

LOOKBACK_LINES = 5
LOOKAHEAD_LINES = 15
MAX_DESCRIPTION_LINES = 5

Year = Union[int, str]


def match_date_range(line: str) -> Optional[Tuple[int, Year]]:
    """Return ``(start_year, end_year or "Present")`` for the first matching family."""
    for pattern in DATE_RANGE_PATTERNS:
        match = pattern.search(line)
        if match:
            start = int(match.group('start'))
            end = int(match.group('end')) if match.group('end') else 'Present'
            return start, end
    return None


def format_duration(start: int, end: Year, current_year: Optional[int] = None) -> str:
    if current_year is None:
        current_year = datetime.now().year
    years = end - start if isinstance(end, int) else current_year - start
    return f"{years} years"


def _find_role(lines: Sequence[str], date_index: int) -> Tuple[str, str, str]:
    """Walk back from a date line looking for position, company and location."""
    position = company = location = ''

    for prev in lines[max(0, date_index - LOOKBACK_LINES):date_index]:
        if BULLET.match(prev) or DESCRIPTION_NOISE.search(prev) or EXPERIENCE_HEADER.match(prev):
            continue

        if '|' in prev:
            parts = [part.strip() for part in prev.split('|')]
            position = position or parts[0]
            company = company or (parts[1] if len(parts) > 1 else '')
            location = location or (parts[2] if len(parts) > 2 else '')
            break

        company_match = COMPANY_PATTERN.search(prev)
        if company_match and not company:
            company = company_match.group(1).strip()

        if not position and 5 < len(prev) < 150 and not re.search(r'\d{4}', prev) and re.search(r'[A-Z]', prev):
            position = prev

    return position, company, location


def _collect_description(lines: Sequence[str], date_index: int) -> str:
    collected = []
    for line in lines[date_index + 1:min(date_index + LOOKAHEAD_LINES, len(lines))]:
        if match_date_range(line) or NEXT_SECTION_HEADER.match(line):
            break
        if BULLET.match(line) or DESCRIPTION_KEYWORDS.search(line):
            collected.append(re.sub(r'^[-•]\s*', '', line).strip())
        if len(collected) >= MAX_DESCRIPTION_LINES:
            break
    return ' '.join(collected)


def extract_experience(context: ExtractionContext) -> List[ExperienceEntry]:
    """Work history anchored on date-range lines of the experience section."""
    logger.info("[ADVANCED] Extracting experience")

    section = context.section('experience')
    if section is None:
        logger.debug("[EXPERIENCE] No experience section found")
        return []

    lines = section.lines
    current_year = datetime.now().year
    experiences = []

    for idx, line in enumerate(lines):
        if EXPERIENCE_HEADER.match(line):
            continue

        dates = match_date_range(line)
        if dates is None:
            continue

        start, end = dates
        position, company, location = _find_role(lines, idx)
        experiences.append(ExperienceEntry(
            position=position or 'Position Not Specified',
            company=company,
            location=location,
            start_date=str(start),
            end_date=str(end),
            description=_collect_description(lines, idx),
            duration=format_duration(start, end, current_year),
        ))
        logger.debug(f"[EXPERIENCE] Extracted: {position} at {company} ({start} - {end})")

    logger.info(f"[EXPERIENCE] Found {len(experiences)} experience entries")
    return experiences
