import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .engine import ENGINE_MODEL, ExtractionEngine
from .language import detect_language
from .models import ExtractionResult, ProcessingOutcome
from .text_processor import InsufficientTextError, TextProcessor

logger = logging.getLogger(__name__)

EXTRACTION_VERSION = "2.0.0"

# Receives cleaned text, returns a result mapping in the ExtractionResult shape
LLMExtractor = Callable[[str], Mapping[str, Any]]


class CvProcessor:
    """Turns extracted resume text into a stored-ready profile and summary.

    A language-model extractor can be injected; whenever it is missing,
    disabled or fails, the rule-based engine produces the result instead.
    """

    def __init__(self, engine: Optional[ExtractionEngine] = None,
                 text_processor: Optional[TextProcessor] = None,
                 llm_extractor: Optional[LLMExtractor] = None,
                 llm_provider: str = "llm", llm_model: str = "unknown"):
        self.engine = engine or ExtractionEngine()
        self.text_processor = text_processor or TextProcessor()
        self.llm_extractor = llm_extractor
        self.llm_provider = llm_provider
        self.llm_model = llm_model

    def process(self, text: str, document_type: str = "PDF", use_llm: bool = True,
                photo_detected: bool = False) -> ProcessingOutcome:
        cleaned = self.text_processor.clean_text(text)
        quality = self.text_processor.validate_text(cleaned, document_type)
        if not quality.is_valid:
            raise InsufficientTextError(quality.reason or 'unknown', quality)

        language = detect_language(cleaned)
        logger.info(
            f"Text extracted: {len(cleaned)} chars, language: {language.code}, quality: {quality.quality}"
        )

        provider, model = 'advanced', ENGINE_MODEL
        result = None
        if use_llm and self.llm_extractor is not None:
            try:
                logger.info(f"Using LLM extraction with provider: {self.llm_provider}")
                result = self._from_llm_payload(self.llm_extractor(cleaned))
                provider, model = self.llm_provider, self.llm_model
            except Exception as e:
                logger.warning(f"LLM extraction failed: {e}. Falling back to advanced processing.")
        else:
            logger.info("Using ADVANCED extraction (LLM disabled)")

        skills = None
        if result is None:
            result = self.engine.extract(cleaned, document_type)
            skills = [kw for kw in result.metadata.keywords if kw not in result.languages]

        if photo_detected:
            result = result.model_copy(update={"photo_detected": True})

        summary = self.engine.summarize(result, skills)
        logger.info(f"Advanced summary generated: {len(summary)} chars")

        return ProcessingOutcome(
            result=result,
            summary=summary,
            provider=provider,
            model=model,
            extraction_version=EXTRACTION_VERSION,
            language=language.code,
            text_quality=quality.quality,
        )

    def _from_llm_payload(self, payload: Mapping[str, Any]) -> ExtractionResult:
        if 'error' in payload:
            raise ValueError(f"LLM extraction failed: {payload.get('reason', payload['error'])}")

        # A flat skill list is categorized by SkillSet validation
        data: Dict[str, Any] = dict(payload)
        if data.get('confidence_score') is not None:
            data['confidence_score'] = max(0.0, min(float(data['confidence_score']), 0.95))
        return ExtractionResult.model_validate(data)
