import re
import logging
from datetime import datetime
from typing import List, Optional, Sequence

from .lexicons import INDUSTRY_KEYWORDS
from .models import EducationEntry, ExperienceEntry, PersonalInfo

logger = logging.getLogger(__name__)

MAX_CONFIDENCE = 0.95

ADVANCED_DEGREE = re.compile(r'master|phd|doctorate|ingénieur', re.IGNORECASE)
LEAD_ROLE = re.compile(r'lead|senior|principal|architect|chief|director', re.IGNORECASE)


def _to_year(value: Optional[str]) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


def calculate_experience_years(experience: Sequence[ExperienceEntry], current_year: Optional[int] = None) -> int:
    """Sum of ``end - start`` over entries with usable years; "Present" ends this year."""
    if current_year is None:
        current_year = datetime.now().year

    total = 0
    for entry in experience:
        start = _to_year(entry.start_date)
        if (entry.end_date or '').strip().lower() == 'present':
            end = current_year
        else:
            end = _to_year(entry.end_date)

        if start is None or end is None or end < start:
            logger.debug(f"[EXPERIENCE] Skipping unusable dates {entry.start_date!r} - {entry.end_date!r}")
            continue
        total += end - start
    return total


def estimate_seniority(years: int, experience: Sequence[ExperienceEntry], education: Sequence[EducationEntry]) -> str:
    has_advanced_degree = any(ADVANCED_DEGREE.search(e.degree or '') for e in education)
    has_lead_role = any(LEAD_ROLE.search(e.position or '') for e in experience)

    if years == 0 and not education:
        return 'Entry Level'
    if years < 2 and not has_advanced_degree:
        return 'Junior'
    if years < 5:
        return 'Mid-Senior' if has_lead_role else 'Mid Level'
    if years < 10:
        return 'Senior' if has_lead_role else 'Mid-Senior'
    return 'Lead/Principal'


def detect_industry(skills: Sequence[str], experience: Sequence[ExperienceEntry]) -> str:
    """Industry bucket with the most keywords present; ties keep the first bucket."""
    skill_text = ' '.join(skills).lower()
    experience_text = ' '.join(e.description or '' for e in experience).lower()
    combined = f"{skill_text} {experience_text}"

    best_score = 0
    industry = ''
    for name, keywords in INDUSTRY_KEYWORDS.items():
        score = sum(1 for kw in keywords if kw in combined)
        if score > best_score:
            best_score = score
            industry = name
    return industry


def calculate_confidence_score(personal_info: PersonalInfo, experience: Sequence[ExperienceEntry],
                               education: Sequence[EducationEntry], skills: List[str]) -> float:
    score = 0.0
    if personal_info.has_name:
        score += 0.2
    if personal_info.email:
        score += 0.15
    if personal_info.phone:
        score += 0.1
    if experience:
        score += 0.25
    if education:
        score += 0.15
    if len(skills) > 5:
        score += 0.15
    return round(min(score, MAX_CONFIDENCE), 2)
