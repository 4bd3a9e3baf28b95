import pytest
from extraction.language import classify_language, detect_language
from extraction.sections import header_patterns, identify_sections

@pytest.fixture
def english():
    return classify_language(0, 5)

@pytest.fixture
def french():
    return classify_language(5, 0)

def test_french_wins_by_margin():
    profile = classify_language(10, 3)
    assert profile.code == "fr"
    assert profile.confidence == pytest.approx(10 / 13)

def test_close_scores_are_mixed():
    assert classify_language(10, 8).code == "mixed"
    assert classify_language(8, 10).code == "mixed"

def test_english_wins_by_margin():
    assert classify_language(3, 10).code == "en"

def test_zero_scores_default_to_mixed():
    profile = classify_language(0, 0)
    assert profile.code == "mixed"
    assert profile.confidence == 0.5

def test_detect_french_text():
    profile = detect_language("Expérience professionnelle, formation et compétences")
    assert profile.code == "fr"
    assert profile.french_score == 3
    assert profile.english_score == 0

def test_detect_english_text():
    profile = detect_language("Experience, education and skills of a software engineer")
    assert profile.code == "en"

def test_detect_empty_text():
    assert detect_language("").code == "mixed"

def test_mixed_documents_use_english_headers(french, english):
    assert header_patterns(classify_language(1, 1)) is header_patterns(english)
    assert header_patterns(french) is not header_patterns(english)

def test_spans_are_contiguous(english):
    lines = ["John Doe", "EXPERIENCE", "Dev at X", "EDUCATION", "BSc", "SKILLS", "Python"]
    spans, sections = identify_sections(lines, english)

    assert [span.name for span in spans] == ["experience", "education", "skills"]
    for current, following in zip(spans, spans[1:]):
        assert current.end == following.start
    assert spans[-1].end == len(lines)
    assert sections["education"].content == "EDUCATION\nBSc"

def test_lines_before_first_header_are_not_a_section(english):
    spans, _ = identify_sections(["John Doe", "EXPERIENCE", "Dev"], english)
    assert spans[0].start == 1

def test_repeated_header_keeps_last_span(english):
    lines = ["EXPERIENCE", "first job", "EDUCATION", "school", "EXPERIENCE", "second job"]
    spans, sections = identify_sections(lines, english)

    assert [span.name for span in spans] == ["experience", "education", "experience"]
    assert sections["experience"].start == 4
    assert sections["experience"].lines == ["EXPERIENCE", "second job"]

def test_line_matching_two_headers_goes_to_first_category(english):
    spans, _ = identify_sections(["TECHNICAL SKILLS & PROJECTS", "Python"], english)
    assert [span.name for span in spans] == ["skills"]

def test_french_headers(french, english):
    lines = ["COMPÉTENCES", "Python", "LANGUES", "Anglais"]
    spans, _ = identify_sections(lines, french)
    assert [span.name for span in spans] == ["skills", "languages"]

    spans, _ = identify_sections(lines, english)
    assert spans == ()

def test_no_headers(english):
    spans, sections = identify_sections(["Jane Doe", "jane@doe.io"], english)
    assert spans == ()
    assert sections == {}
