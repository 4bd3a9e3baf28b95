import logging
from typing import List, Optional

from .certifications import extract_certifications
from .education import extract_education
from .experience import extract_experience
from .language import detect_language
from .languages import extract_languages
from .metrics import calculate_confidence_score, calculate_experience_years, detect_industry, estimate_seniority
from .models import ExtractionContext, ExtractionResult, ResultMetadata
from .personal_info import extract_personal_info
from .projects import extract_projects
from .sections import identify_sections
from .skills import categorize_skills, extract_skills
from .summary import generate_summary

logger = logging.getLogger(__name__)

ENGINE_MODEL = "regex-based"


class ExtractionEngine:
    """Rule-based resume extraction for French, English and mixed documents.

    The engine holds no per-document state: every call builds its own
    context, so one instance can serve concurrent callers.
    """

    def build_context(self, text: str, document_type: str = "PDF") -> ExtractionContext:
        lines = tuple(line.strip() for line in (text or '').split('\n') if line.strip())
        language = detect_language(text or '')
        spans, sections = identify_sections(lines, language)
        return ExtractionContext(
            language=language,
            lines=lines,
            spans=spans,
            sections=sections,
            document_type=document_type,
        )

    def extract(self, text: str, document_type: str = "PDF") -> ExtractionResult:
        """Extract a structured profile from cleaned resume text."""
        logger.info("[ADVANCED] Starting advanced extraction engine")
        context = self.build_context(text, document_type)

        logger.info(
            f"[ADVANCED] Language detected: {context.language.code} "
            f"(confidence: {context.language.confidence:.2f})"
        )
        logger.info(f"[ADVANCED] Sections identified: {', '.join(span.name for span in context.spans)}")

        personal_info = extract_personal_info(context)
        experience = extract_experience(context)
        education = extract_education(context)
        skills = extract_skills(context)
        languages = extract_languages(context)
        certifications = extract_certifications(context)
        projects = extract_projects(context)

        years = calculate_experience_years(experience)
        result = ExtractionResult(
            personal_info=personal_info,
            education=education,
            experience=experience,
            skills=categorize_skills(skills),
            languages=languages,
            certifications=certifications,
            internships=projects,
            metadata=ResultMetadata(
                total_experience_years=years,
                seniority_level=estimate_seniority(years, experience, education),
                industry=detect_industry(skills, experience),
                keywords=list(dict.fromkeys(skills + languages)),
            ),
            confidence_score=calculate_confidence_score(personal_info, experience, education, skills),
            photo_detected=False,
        )

        logger.info("[ADVANCED] Extraction complete")
        logger.debug(result.model_dump_json(by_alias=True))
        return result

    def summarize(self, result: ExtractionResult, skills: Optional[List[str]] = None) -> str:
        return generate_summary(result, skills)
