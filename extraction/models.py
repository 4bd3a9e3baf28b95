from typing import Dict, List, Literal, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

NAME_NOT_FOUND = "Name Not Found"


def _dedupe(values: List[str]) -> List[str]:
    """Drop case-insensitive duplicates, keeping the first spelling."""
    seen = set()
    unique = []
    for value in values:
        key = value.strip().lower()
        if key and key not in seen:
            seen.add(key)
            unique.append(value.strip())
    return unique


# ============================================================
# Extraction context
# ============================================================
class LanguageProfile(BaseModel):
    """Dominant language of a document and the keyword scores behind it."""
    model_config = ConfigDict(frozen=True)

    code: Literal["fr", "en", "mixed"]
    confidence: float = Field(ge=0.0, le=1.0)
    french_score: int = Field(default=0, ge=0)
    english_score: int = Field(default=0, ge=0)


class Section(BaseModel):
    """A labeled span ``[start, end)`` of context lines."""
    model_config = ConfigDict(frozen=True)

    name: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    content: str = ""

    @property
    def lines(self) -> List[str]:
        return [line.strip() for line in self.content.split("\n") if line.strip()]


class ExtractionContext(BaseModel):
    """Everything the extractors may read about one document.

    ``spans`` keeps every detected section in document order, while
    ``sections`` maps a section name to its last occurrence.
    """
    model_config = ConfigDict(frozen=True)

    language: LanguageProfile
    lines: Tuple[str, ...] = ()
    spans: Tuple[Section, ...] = ()
    sections: Dict[str, Section] = Field(default_factory=dict)
    document_type: str = "PDF"

    @property
    def full_text(self) -> str:
        return "\n".join(self.lines)

    def section(self, name: str) -> Optional[Section]:
        return self.sections.get(name)


# ============================================================
# Extraction result
# ============================================================
class PersonalInfo(BaseModel):
    """Contact block of the candidate."""
    model_config = ConfigDict(frozen=True)

    full_name: Optional[str] = None
    position: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None

    @property
    def has_name(self) -> bool:
        return bool(self.full_name) and self.full_name != NAME_NOT_FOUND


class EducationEntry(BaseModel):
    """Education entry model."""
    model_config = ConfigDict(frozen=True)

    degree: Optional[str] = None
    institution: Optional[str] = None
    field_of_study: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class ExperienceEntry(BaseModel):
    """Work experience entry model."""
    model_config = ConfigDict(frozen=True)

    position: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("startDate", "start_date"),
        serialization_alias="startDate",
    )
    end_date: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("endDate", "end_date"),
        serialization_alias="endDate",
    )
    description: str = ""
    duration: Optional[str] = None


class SkillSet(BaseModel):
    """Skills split into technical, soft and tool categories."""
    model_config = ConfigDict(frozen=True)

    technical: List[str] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _from_flat_list(cls, value):
        # Flat lists are split into categories the way extraction does it
        if isinstance(value, (list, tuple)):
            from .skills import categorize_skills
            return categorize_skills(str(skill) for skill in value).model_dump()
        return value

    @field_validator("technical", "soft", "tools")
    @classmethod
    def _unique(cls, values: List[str]) -> List[str]:
        return _dedupe(values)


class CertificationEntry(BaseModel):
    """Certification entry model."""
    model_config = ConfigDict(frozen=True)

    name: str
    issuer: str = ""
    date: Optional[str] = None


class ProjectEntry(BaseModel):
    """Project entry, stored under ``internships``."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    date: Optional[str] = None


class ResultMetadata(BaseModel):
    """Metrics derived from the extracted fragments."""
    model_config = ConfigDict(frozen=True)

    total_experience_years: int = 0
    seniority_level: str = "Entry Level"
    industry: str = ""
    keywords: List[str] = Field(default_factory=list)


class ExtractionResult(BaseModel):
    """Canonical structured profile extracted from one resume."""
    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    education: List[EducationEntry] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    skills: SkillSet = Field(default_factory=SkillSet)
    languages: List[str] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    internships: List[ProjectEntry] = Field(default_factory=list)
    metadata: ResultMetadata = Field(default_factory=ResultMetadata)
    confidence_score: float = Field(default=0.0, ge=0.0, le=0.95)
    photo_detected: bool = False

    @field_validator("languages", mode="before")
    @classmethod
    def _language_names(cls, values):
        # Upstream payloads may send {"language": ..., "proficiency": ...} objects
        names = []
        for value in values or []:
            if isinstance(value, dict):
                value = value.get("language") or ""
            names.append(str(value).lower())
        return _dedupe(names)


# ============================================================
# Processing
# ============================================================
class TextQuality(BaseModel):
    """Outcome of the extracted-text quality gate."""
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    quality: Literal["high", "medium", "low"] = "low"
    reason: Optional[str] = None


class ProcessingOutcome(BaseModel):
    """What the caller receives for one processed document."""
    model_config = ConfigDict(frozen=True)

    result: ExtractionResult
    summary: str = ""
    provider: str = "advanced"
    model: str = "regex-based"
    extraction_version: str = "2.0.0"
    language: Optional[str] = None
    text_quality: str = "low"
