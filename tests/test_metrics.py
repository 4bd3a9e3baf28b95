from datetime import datetime

import pytest
from extraction.experience import format_duration, match_date_range
from extraction.metrics import (
    MAX_CONFIDENCE,
    calculate_confidence_score,
    calculate_experience_years,
    detect_industry,
    estimate_seniority,
)
from extraction.models import (
    NAME_NOT_FOUND,
    EducationEntry,
    ExperienceEntry,
    ExtractionResult,
    PersonalInfo,
    ResultMetadata,
)
from extraction.summary import generate_summary

@pytest.fixture
def current_job():
    return ExperienceEntry(position="Developer", start_date="2018", end_date="Present")

def test_date_range_families():
    assert match_date_range("01/2019 - 06/2021") == (2019, 2021)
    assert match_date_range("2018 – Present") == (2018, "Present")
    assert match_date_range("Janvier 2020 - aujourd'hui") == (2020, "Present")
    assert match_date_range("Sep 2017 - Mar 2019") == (2017, 2019)
    assert match_date_range("no dates here") is None

def test_present_duration_uses_current_year():
    year = datetime.now().year
    assert format_duration(2018, "Present") == f"{year - 2018} years"
    assert format_duration(2018, "Present", current_year=2025) == "7 years"

def test_present_counts_towards_total_years(current_job):
    year = datetime.now().year
    assert calculate_experience_years([current_job]) == year - 2018
    assert calculate_experience_years([current_job], current_year=2024) == 6

def test_unusable_dates_are_skipped():
    entries = [
        ExperienceEntry(start_date="abc", end_date="2020"),
        ExperienceEntry(start_date="2020", end_date="2015"),
        ExperienceEntry(start_date="2010", end_date="2012"),
    ]
    assert calculate_experience_years(entries) == 2

def test_seniority_levels():
    bachelor = [EducationEntry(degree="Bachelor of Arts")]
    master = [EducationEntry(degree="Master en Informatique")]
    lead = [ExperienceEntry(position="Lead Developer")]

    assert estimate_seniority(0, [], []) == "Entry Level"
    assert estimate_seniority(1, [], bachelor) == "Junior"
    assert estimate_seniority(1, [], master) == "Mid Level"
    assert estimate_seniority(3, lead, []) == "Mid-Senior"
    assert estimate_seniority(7, [], []) == "Mid-Senior"
    assert estimate_seniority(7, lead, []) == "Senior"
    assert estimate_seniority(12, [], []) == "Lead/Principal"

def test_industry_detection():
    assert detect_industry(["Docker", "Kubernetes", "Terraform"], []) == "DevOps"
    assert detect_industry([], []) == ""

def test_industry_tie_keeps_first_bucket():
    # "aws" scores once for DevOps and once for Cloud Computing
    assert detect_industry(["AWS"], []) == "DevOps"

def test_industry_reads_experience_descriptions():
    jobs = [ExperienceEntry(description="Trained tensorflow models for nlp analytics")]
    assert detect_industry([], jobs) == "Data Science"

def test_confidence_is_capped():
    info = PersonalInfo(full_name="Jane Roe", email="jane@roe.io", phone="0612345678")
    score = calculate_confidence_score(
        info,
        [ExperienceEntry(position="Developer")],
        [EducationEntry(degree="Master")],
        ["Python", "Java", "Go", "Rust", "Docker", "AWS"],
    )
    assert score == MAX_CONFIDENCE

def test_confidence_ignores_missing_name():
    info = PersonalInfo(full_name=NAME_NOT_FOUND)
    assert calculate_confidence_score(info, [], [], []) == 0

def test_confidence_is_rounded():
    info = PersonalInfo(full_name="Jane Roe", email="jane@roe.io")
    assert calculate_confidence_score(info, [], [], []) == 0.35

def test_summary_empty_result():
    assert generate_summary(ExtractionResult()) == ""

def test_summary_full():
    result = ExtractionResult(
        personal_info=PersonalInfo(full_name="John Smith", position="Developer"),
        experience=[ExperienceEntry(position="Developer")],
        languages=["english"],
        metadata=ResultMetadata(industry="Software Development", keywords=["Python", "Docker", "english"]),
    )
    assert generate_summary(result) == (
        "John Smith, working as Developer in Software Development. "
        "1 professional experience(s). Skilled in: Python, Docker. Languages: english."
    )

def test_summary_without_name_uses_seniority():
    result = ExtractionResult(metadata=ResultMetadata(seniority_level="Senior", industry="DevOps"))
    assert generate_summary(result) == "Senior professional in DevOps."

def test_summary_keeps_industry_without_headline():
    result = ExtractionResult(metadata=ResultMetadata(industry="DevOps", keywords=["Docker"]))
    assert generate_summary(result) == "In DevOps. Skilled in: Docker."

def test_summary_lists_top_six_skills():
    skills = ["A1", "B2", "C3", "D4", "E5", "F6", "G7"]
    summary = generate_summary(ExtractionResult(), skills)
    assert summary == "Skilled in: A1, B2, C3, D4, E5, F6."
