from typing import List, Optional

from .models import ExtractionResult

TOP_SKILLS = 6


def generate_summary(result: ExtractionResult, skills: Optional[List[str]] = None) -> str:
    """Template summary used when no language model writes one.

    ``skills`` is the flat skill list in extraction order; without it the
    non-language keywords are used. Clauses with nothing to say are left out.
    """
    info = result.personal_info
    metadata = result.metadata
    if skills is None:
        skills = [kw for kw in metadata.keywords if kw not in result.languages]

    if info.position:
        role = f"working as {info.position}"
    elif metadata.seniority_level != 'Entry Level':
        role = f"{metadata.seniority_level} professional"
    else:
        role = ''

    headline = info.full_name if info.has_name else ''
    if headline and role:
        headline = f"{headline}, {role}"
    elif role:
        headline = role[0].upper() + role[1:]
    if metadata.industry:
        headline = f"{headline} in {metadata.industry}" if headline else f"In {metadata.industry}"

    sentences = [headline] if headline else []
    if result.experience:
        sentences.append(f"{len(result.experience)} professional experience(s)")
    if result.education:
        sentences.append(f"{len(result.education)} educational qualification(s)")
    if skills:
        sentences.append(f"Skilled in: {', '.join(skills[:TOP_SKILLS])}")
    if result.languages:
        sentences.append(f"Languages: {', '.join(result.languages)}")

    if not sentences:
        return ''
    return '. '.join(sentences) + '.'
