import pytest
from extraction.engine import ExtractionEngine
from extraction.models import NAME_NOT_FOUND, SkillSet

SAMPLE_RESUME = """JOHN SMITH
john.smith@example.com
+1234567890
EXPERIENCE
Software Engineer | Acme Corp | NYC
2019 - 2022
- Built scalable APIs
"""

FRENCH_RESUME = """MARIE DUPONT
Développeur Full Stack
marie.dupont@gmail.fr
Tél : 06 12 34 56 78
Paris
EXPÉRIENCE PROFESSIONNELLE
Développeur Web | Capgemini | Paris
2019 - 2022
- Développement d'applications React et Node.js
FORMATION
Master en Informatique | Université Paris-Saclay | 2016 - 2018
COMPÉTENCES
Python, Django, Docker
LANGUES
Français, Anglais, Espagnol
"""

@pytest.fixture
def engine():
    return ExtractionEngine()

def test_end_to_end_sample(engine):
    result = engine.extract(SAMPLE_RESUME)
    info = result.personal_info
    assert info.full_name == "John Smith"
    assert info.email == "john.smith@example.com"
    assert info.phone == "1234567890"

    assert len(result.experience) == 1
    job = result.experience[0]
    assert job.position == "Software Engineer"
    assert job.company == "Acme Corp"
    assert job.location == "NYC"
    assert job.start_date == "2019"
    assert job.end_date == "2022"
    assert job.duration == "3 years"
    assert "Built scalable APIs" in job.description

def test_experience_serializes_camel_case_dates(engine):
    data = engine.extract(SAMPLE_RESUME).model_dump(by_alias=True)
    job = data["experience"][0]
    assert job["startDate"] == "2019"
    assert job["endDate"] == "2022"

def test_end_to_end_metadata(engine):
    result = engine.extract(SAMPLE_RESUME)
    assert result.metadata.total_experience_years == 3
    assert result.metadata.seniority_level == "Mid Level"
    # name + email + phone + experience
    assert result.confidence_score == 0.7
    assert result.photo_detected is False

def test_extraction_is_deterministic(engine):
    first = engine.extract(FRENCH_RESUME)
    second = engine.extract(FRENCH_RESUME)
    assert first.model_dump_json() == second.model_dump_json()

def test_empty_input(engine):
    result = engine.extract("")
    assert result.personal_info.full_name == NAME_NOT_FOUND
    assert not result.personal_info.email
    assert not result.personal_info.phone
    assert not result.personal_info.location
    assert result.experience == []
    assert result.education == []
    assert result.confidence_score == 0

def test_document_without_sections(engine):
    text = "Jane Doe\njane.doe@example.com\nSome notes without headings"
    result = engine.extract(text)
    assert result.experience == []
    assert result.education == []
    assert result.certifications == []
    assert result.internships == []
    # Personal info still runs against the whole document
    assert result.personal_info.full_name == "Jane Doe"
    assert result.personal_info.email == "jane.doe@example.com"

def test_french_resume(engine):
    context = engine.build_context(FRENCH_RESUME)
    assert context.language.code == "fr"
    assert [span.name for span in context.spans] == ["experience", "education", "skills", "languages"]

    result = engine.extract(FRENCH_RESUME)
    info = result.personal_info
    assert info.full_name == "Marie Dupont"
    assert info.position == "Développeur Full Stack"
    assert info.phone == "0612345678"
    assert info.location == "Paris"

    job = result.experience[0]
    assert job.position == "Développeur Web"
    assert job.company == "Capgemini"
    assert "React" in job.description

def test_french_education(engine):
    education = engine.extract(FRENCH_RESUME).education
    assert len(education) == 1
    assert education[0].degree == "Master en Informatique"
    assert education[0].institution == "Université Paris-Saclay"
    assert education[0].field_of_study == "Informatique"
    assert education[0].start_date == "2016"
    assert education[0].end_date == "2018"

def test_french_languages_are_canonical(engine):
    result = engine.extract(FRENCH_RESUME)
    assert result.languages == ["french", "english", "spanish"]

def test_skills_extraction(engine):
    result = engine.extract(FRENCH_RESUME)
    technical = [s.lower() for s in result.skills.technical]
    for skill in ("python", "django", "docker", "react", "node.js"):
        assert skill in technical
    assert "python" in [k.lower() for k in result.metadata.keywords]

def test_skills_are_deduplicated(engine):
    text = "Sam Lee\nSKILLS\npython, Python, PYTHON, docker\nDocker"
    result = engine.extract(text)
    technical = [s.lower() for s in result.skills.technical]
    assert technical.count("python") == 1
    assert technical.count("docker") == 1

def test_present_end_date(engine):
    text = "EXPERIENCE\nData Engineer | Initech\n2018 - Present\n- Maintained pipelines"
    job = engine.extract(text).experience[0]
    assert job.end_date == "Present"
    assert job.company == "Initech"

def test_projects_and_certifications(engine):
    text = """Alex Martin
PROJECTS
Weather Dashboard 2021
- Responsive site with React
Inventory Tracker 2020
- Desktop app for stock management
CERTIFICATIONS
- AWS Certified Developer (2022)
- Scrum Master 2019
"""
    result = engine.extract(text)

    projects = result.internships
    assert [p.name for p in projects] == ["Weather Dashboard", "Inventory Tracker"]
    assert projects[0].date == "2021"
    assert projects[0].description == "Responsive site with React"

    certs = result.certifications
    assert [c.name for c in certs] == ["AWS Certified Developer", "Scrum Master"]
    assert [c.date for c in certs] == ["2022", "2019"]

def test_summary(engine):
    result = engine.extract(SAMPLE_RESUME)
    summary = engine.summarize(result)
    assert summary.startswith("John Smith, working as")
    assert "1 professional experience(s)" in summary

def test_skill_set_accepts_flat_list():
    skills = SkillSet.model_validate(["Python", "Teamwork", "Figma", "Cobol"])
    assert skills.technical == ["Python"]
    assert skills.soft == ["Teamwork"]
    assert skills.tools == ["Figma"]
