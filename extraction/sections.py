import re
import logging
from typing import Dict, List, Sequence, Tuple

from .models import LanguageProfile, Section

logger = logging.getLogger(__name__)

# Iteration order decides which section wins a line matching several headers
SECTION_NAMES = (
    'experience', 'education', 'skills', 'languages',
    'certifications', 'projects', 'summary',
)

SECTION_PATTERNS = {
    'fr': {
        'experience': r'(?:EXPÉRIENCE|EXPERIENCE PROFESSIONNELLE|PARCOURS PROFESSIONNEL)',
        'education': r'(?:FORMATION|ÉDUCATION|ÉTUDES|PARCOURS ACADÉMIQUE)',
        'skills': r'(?:COMPÉTENCES|COMPETENCES|SAVOIR-FAIRE)',
        'languages': r'(?:LANGUES)',
        'certifications': r'(?:CERTIFICATIONS|CERTIFICATS)',
        'projects': r'(?:PROJETS|RÉALISATIONS)',
        'summary': r'(?:RÉSUMÉ|PROFIL|À PROPOS)',
    },
    'en': {
        'experience': r'(?:EXPERIENCE|PROFESSIONAL EXPERIENCE|WORK HISTORY|EMPLOYMENT)',
        'education': r'(?:EDUCATION|ACADEMIC BACKGROUND|QUALIFICATIONS)',
        'skills': r'(?:SKILLS|COMPETENCIES|TECHNICAL SKILLS|EXPERTISE)',
        'languages': r'(?:LANGUAGES)',
        'certifications': r'(?:CERTIFICATIONS|CERTIFICATES|LICENSES)',
        'projects': r'(?:PROJECTS|PORTFOLIO|KEY PROJECTS)',
        'summary': r'(?:SUMMARY|PROFILE|ABOUT|OBJECTIVE)',
    },
}

_COMPILED = {
    code: [(name, re.compile(patterns[name], re.IGNORECASE)) for name in SECTION_NAMES]
    for code, patterns in SECTION_PATTERNS.items()
}


def header_patterns(language: LanguageProfile):
    """Header regexes for a language; mixed documents use the English set."""
    return _COMPILED['fr' if language.code == 'fr' else 'en']


def identify_sections(lines: Sequence[str], language: LanguageProfile) -> Tuple[Tuple[Section, ...], Dict[str, Section]]:
    """Split ``lines`` into labeled, contiguous spans.

    Returns the ordered spans and a name -> span mapping. When a header
    repeats, the mapping keeps only its last occurrence.
    """
    starts: List[Tuple[int, str]] = []
    patterns = header_patterns(language)

    for idx, line in enumerate(lines):
        line = line.strip()
        for name, pattern in patterns:
            if pattern.search(line):
                starts.append((idx, name))
                break

    starts.sort(key=lambda item: item[0])

    spans = []
    for pos, (start, name) in enumerate(starts):
        end = starts[pos + 1][0] if pos < len(starts) - 1 else len(lines)
        spans.append(Section(
            name=name,
            start=start,
            end=end,
            content='\n'.join(lines[start:end]),
        ))

    sections = {}
    for span in spans:
        if span.name in sections:
            logger.debug(f"Repeated '{span.name}' header at line {span.start}, replacing earlier span")
        sections[span.name] = span

    return tuple(spans), sections
