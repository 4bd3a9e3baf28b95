import re
import logging
from collections import Counter
from typing import Optional, Sequence, Tuple

from .lexicons import KNOWN_CITIES, LOWER, POSITION_KEYWORDS, TECH_TERMS, UPPER
from .models import NAME_NOT_FOUND, ExtractionContext, PersonalInfo

logger = logging.getLogger(__name__)

# The local part must start with a letter and must not follow a digit,
# so a phone number glued to an address is not absorbed into it.
EMAIL_PATTERN = re.compile(r'(?<!\d)([a-zA-Z][\w.+-]*@[a-zA-Z0-9][\w.-]*\.[a-zA-Z]{2,})')

# Digit groups joined by exactly one space, dot or hyphen, so " - " in a
# date range ends the run
PHONE_PATTERN = re.compile(
    r'(?:Tel|Phone|Mobile|Téléphone|Tél|GSM|Contact)?[\s:]*'
    r'(\+?\(?\d+\)?(?:[ .-]\(?\d+\)?)*)',
    re.IGNORECASE,
)
YEAR_RANGE_PATTERN = re.compile(r'(?:19|20)\d{2}\s*[-–—]\s*(?:19|20)\d{2}')
# Last group of a run: "-2020" marks a reference number, " 2019" a year after the phone
TRAILING_GROUP = re.compile(r'([ -])(\d{4})$')
YEAR = re.compile(r'^(?:19|20)\d{2}$')
MIN_PHONE_DIGITS = 10
MAX_PHONE_DIGITS = 15

LINKEDIN_PATTERNS = (
    re.compile(r'linkedin\.com/in/([a-zA-Z0-9\-]+)', re.IGNORECASE),
    re.compile(r'lnkd\.in/([a-zA-Z0-9\-]+)', re.IGNORECASE),
    re.compile(r'linkedin\s*:\s*([a-zA-Z0-9\-]+)', re.IGNORECASE),
)

# Lines matching any of these can never be a name
NAME_EXCLUDE_PATTERNS = (
    re.compile(r'^(?:CURRICULUM|VITAE|CV|RESUME|RÉSUMÉ)', re.IGNORECASE),
    re.compile(
        r'\b(?:ENGINEER|MANAGER|DEVELOPER|DÉVELOPPEUR|DIRECTOR|DESIGNER|ARCHITECT|INGÉNIEUR|'
        r'ANALYST|CONSULTANT|SPECIALIST|COORDINATOR|TECHNICIAN|TECHNICIEN|OFFICER|EXECUTIVE|'
        r'SUPERVISOR|ASSISTANT|INTERN|LEAD|CHIEF|HEAD|FULL STACK|FRONTEND|BACKEND|GÉNIE|'
        r'INFORMATIQUE|FABRICATION|MECANIQUE|MÉCANIQUE)\b',
        re.IGNORECASE,
    ),
    re.compile(r'@|http|www\.|github\.com|linkedin', re.IGNORECASE),
    re.compile(r'^\d+'),
    re.compile(
        r'EXPERIENCE|EDUCATION|SKILLS|FORMATION|COMPÉTENCES|COMPETENCES|PROJET|PROJECT|CERTIFICATION',
        re.IGNORECASE,
    ),
    re.compile(r'\d{4}\s*[-–—]\s*\d{4}'),
    re.compile(r'^\s*fes\s*$', re.IGNORECASE),
    re.compile(r'^[A-Z\s]{20,}$'),
    re.compile(r'Technologies|Utilisees|Spring|Boot|Security|MySQL|Framework|JPA|Repository', re.IGNORECASE),
)

SPACED_CAPS_NAME = re.compile(rf'^(?:[{UPPER}]\s){{2,}}[{UPPER}]+$')
CAPS_NAME = re.compile(rf'^(?:[{UPPER}]+\s){{1,3}}[{UPPER}]+$')
TITLE_CASE_NAME = re.compile(rf'^[{UPPER}][{LOWER}]+(?:[\s-][{UPPER}][{LOWER}]+){{1,3}}$')
SECTION_START = re.compile(r'^(?:EXPERIENCE|EDUCATION|PROJET|PROJECT|COMPETENCES|SKILLS|CERTIFICATION)', re.IGNORECASE)
COMMON_WORDS = re.compile(
    r'\b(?:the|a|an|is|are|was|were|le|la|les|un|une|des|et|ou|dans|pour|avec|sur)\b',
    re.IGNORECASE,
)

CITY_COUNTRY_PATTERN = re.compile(r'\b([A-Z][a-zà-ÿ]+(?: +[A-Z][a-zà-ÿ]+)?), *([A-Z][a-zà-ÿ]+(?: +[A-Z][a-zà-ÿ]+)?)\b')
LOCATION_LABEL_PATTERN = re.compile(r'\b(?:Location|Adresse|Address|Ville|City)[ \t:]+([A-Za-zÀ-ÿ ,]+)', re.IGNORECASE)
# "l Paris" is what a broken "à Paris" or a bullet glyph often turns into
LOCATION_ARTIFACT_PATTERN = re.compile(r'\bl\s+([A-Z][a-zà-ÿ]+)\b')


def _is_excluded(line: str) -> bool:
    return any(pattern.search(line) for pattern in NAME_EXCLUDE_PATTERNS)


def _has_tech_term(value: str) -> bool:
    return any(term in value for term in TECH_TERMS)


# ============================================================
# Contact details
# ============================================================
def extract_email(text: str) -> Tuple[str, Optional[str]]:
    match = EMAIL_PATTERN.search(text)
    if not match:
        return '', None
    return match.group(1).strip(), match.group(1)


def extract_phone(text: str) -> Tuple[str, Optional[str]]:
    """Return ``(digits, raw_match)`` for the first plausible phone number."""
    for match in PHONE_PATTERN.finditer(text):
        raw = match.group(1)
        if YEAR_RANGE_PATTERN.search(raw):
            continue

        trailing = TRAILING_GROUP.search(raw)
        if trailing and len(re.sub(r'\D', '', raw[:trailing.start()])) >= MIN_PHONE_DIGITS:
            if trailing.group(1) == '-':
                continue
            if YEAR.match(trailing.group(2)):
                raw = raw[:trailing.start()]

        digits = re.sub(r'\D', '', raw)
        if MIN_PHONE_DIGITS <= len(digits) <= MAX_PHONE_DIGITS:
            return digits, raw
    return '', None


def extract_linkedin(text: str) -> str:
    for pattern in LINKEDIN_PATTERNS:
        match = pattern.search(text)
        if match:
            return f"https://linkedin.com/in/{match.group(1)}"
    return ''


# ============================================================
# Name
# ============================================================
def _name_from_capitals(lines: Sequence[str], search_end: int) -> Optional[str]:
    """Phase 1: "Y O U N E S" spaced capitals or an all-caps 2-4 word line."""
    for line in lines[:15]:
        line = line.strip()
        if len(line) < 5 or len(line) > 100 or _is_excluded(line):
            continue

        if SPACED_CAPS_NAME.match(line):
            name = re.sub(r'\s+', ' ', line)
            logger.info(f"[NAME] Phase 1a - Spaced Caps: \"{name}\"")
            return name

        if CAPS_NAME.match(line) and line == line.upper():
            words = line.split()
            if 2 <= len(words) <= 4 and 8 <= len(line) <= 50:
                name = ' '.join(word[0] + word[1:].lower() for word in words)
                logger.info(f"[NAME] Phase 1b - All Caps: \"{name}\"")
                return name
    return None


def _name_from_title_case(lines: Sequence[str], search_end: int) -> Optional[str]:
    """Phase 2: strict "Firstname Lastname" title case up to the contact block."""
    for line in lines[:search_end]:
        line = line.strip()
        if len(line) < 5 or len(line) > 80 or _is_excluded(line):
            continue
        if line == line.upper() or line == line.lower():
            continue
        if '|' in line or ':' in line or '/' in line:
            continue
        if TITLE_CASE_NAME.match(line) and not re.search(r'\d', line):
            if 2 <= len(line.split()) <= 4:
                logger.info(f"[NAME] Phase 2 - Strict Title Case: \"{line}\"")
                return line
    return None


def _name_from_top_lines(lines: Sequence[str], search_end: int) -> Optional[str]:
    """Phase 3: any capitalized, mixed-case, non-sentence line near the top."""
    candidates = [line.strip() for line in lines[:30] if line.strip() and not SECTION_START.match(line.strip())]
    for line in candidates:
        if len(line) < 5 or len(line) > 100 or _is_excluded(line):
            continue
        if not (re.match(rf'^[{UPPER}]', line) and re.search(r'[a-z]', line) and re.search(r'[\s-]', line)):
            continue
        if 2 <= len(line.split()) <= 5 and not re.search(r'\d{4}', line):
            if not COMMON_WORDS.search(line):
                logger.info(f"[NAME] Phase 3 - Flexible: \"{line}\"")
                return line
    return None


# Tried in order; every strategy takes search_end, only the title-case one uses it
NAME_STRATEGIES = (_name_from_capitals, _name_from_title_case, _name_from_top_lines)


def extract_name(lines: Sequence[str], email: Optional[str] = None, phone: Optional[str] = None) -> str:
    search_end = 40
    if email or phone:
        for idx, line in enumerate(lines):
            if (email and email.lower() in line.lower()) or (phone and phone in line):
                if idx > 10:
                    search_end = idx
                break

    for strategy in NAME_STRATEGIES:
        name = strategy(lines, search_end)
        if name:
            return name

    logger.warning("[NAME] Failed to extract name - using fallback")
    return NAME_NOT_FOUND


# ============================================================
# Position and location
# ============================================================
def extract_position(context: ExtractionContext) -> str:
    keywords = POSITION_KEYWORDS['fr' if context.language.code == 'fr' else 'en']
    for line in context.lines[:15]:
        line = line.strip()
        if '|' in line or any(kw in line for kw in keywords):
            if 10 < len(line) < 200 and '@' not in line:
                logger.debug(f"[POSITION] Found: \"{line}\"")
                return line
    return ''


def _location_from_city_country(lines: Sequence[str]) -> Optional[str]:
    match = CITY_COUNTRY_PATTERN.search('\n'.join(lines))
    if match:
        city, country = match.group(1).strip(), match.group(2).strip()
        if not _has_tech_term(city) and not _has_tech_term(country):
            return f"{city}, {country}"
    return None


def _location_from_known_city(lines: Sequence[str]) -> Optional[str]:
    for line in lines[:20]:
        line = line.strip()
        for city in KNOWN_CITIES:
            if line.lower() == city.lower():
                return city

        label = LOCATION_LABEL_PATTERN.search(line)
        if label:
            location = label.group(1).strip().rstrip(',').strip()
            if location and not _has_tech_term(location) and len(location) < 50:
                return location
    return None


def _location_from_artifacts(lines: Sequence[str]) -> Optional[str]:
    candidates = [
        candidate for candidate in LOCATION_ARTIFACT_PATTERN.findall('\n'.join(lines))
        if candidate not in TECH_TERMS and len(candidate) >= 3
    ]
    if candidates:
        return Counter(candidates).most_common(1)[0][0]
    return None


LOCATION_STRATEGIES = (_location_from_city_country, _location_from_known_city, _location_from_artifacts)


def extract_location(lines: Sequence[str]) -> str:
    for strategy in LOCATION_STRATEGIES:
        location = strategy(lines)
        if location:
            logger.debug(f"[LOCATION] Found via {strategy.__name__}: \"{location}\"")
            return location
    return ''


def extract_personal_info(context: ExtractionContext) -> PersonalInfo:
    """Contact details, name, headline position and location of the candidate."""
    logger.info("[ADVANCED] Extracting personal info")
    text = context.full_text

    email, raw_email = extract_email(text)
    phone, raw_phone = extract_phone(text)

    info = PersonalInfo(
        full_name=extract_name(context.lines, raw_email, raw_phone),
        position=extract_position(context),
        email=email,
        phone=phone,
        location=extract_location(context.lines),
        linkedin=extract_linkedin(text),
    )
    logger.debug(f"[ADVANCED] Personal info: {info.model_dump_json()}")
    return info
