import re
import logging
from typing import Iterable, List

from .lexicons import SKILL_LEXICON, SOFT_SKILL_PATTERNS, TECHNICAL_SKILL_PATTERNS, TOOL_SKILL_PATTERNS
from .models import ExtractionContext, SkillSet

logger = logging.getLogger(__name__)

# Word-character lookarounds instead of \b so "C++", "C#" and "CI/CD" still match
_SKILL_PATTERNS = [
    (fragment.replace('\\', ''), re.compile(rf'(?<!\w){fragment}(?!\w)', re.IGNORECASE))
    for fragment in SKILL_LEXICON
]

_TECHNICAL = [re.compile(pattern, re.IGNORECASE) for pattern in TECHNICAL_SKILL_PATTERNS]
_SOFT = [re.compile(pattern, re.IGNORECASE) for pattern in SOFT_SKILL_PATTERNS]
_TOOLS = [re.compile(pattern, re.IGNORECASE) for pattern in TOOL_SKILL_PATTERNS]


def _match_lexicon(text: str, found: dict) -> None:
    for name, pattern in _SKILL_PATTERNS:
        if name.lower() not in found and pattern.search(text):
            found[name.lower()] = name


def extract_skills(context: ExtractionContext) -> List[str]:
    """Lexicon skills found in the skills section, then anywhere in the document."""
    logger.info("[ADVANCED] Extracting skills")
    found = {}

    section = context.section('skills')
    if section is not None:
        _match_lexicon(section.content, found)

    # Skills mentioned in experience or project descriptions
    _match_lexicon(context.full_text, found)

    skills = list(found.values())
    logger.info(f"[SKILLS] Extracted {len(skills)} skills")
    return skills


def is_technical_skill(skill: str) -> bool:
    return any(pattern.search(skill) for pattern in _TECHNICAL)


def is_soft_skill(skill: str) -> bool:
    return any(pattern.search(skill) for pattern in _SOFT)


def is_tool_skill(skill: str) -> bool:
    return any(pattern.search(skill) for pattern in _TOOLS)


def categorize_skills(skills: Iterable[str]) -> SkillSet:
    """Sort a flat skill list into technical, soft and tool buckets.

    Each category is tested on its own, so one skill can appear in several
    buckets and a skill matching none of them is left out.
    """
    skills = list(skills)
    return SkillSet(
        technical=[s for s in skills if is_technical_skill(s)],
        soft=[s for s in skills if is_soft_skill(s)],
        tools=[s for s in skills if is_tool_skill(s)],
    )
