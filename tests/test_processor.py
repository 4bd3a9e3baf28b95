import pytest
from extraction.processor import CvProcessor
from extraction.text_processor import InsufficientTextError

SAMPLE_RESUME = (
    "JOHN SMITH\r\n"
    "john.smith@example.com\r\n"
    "+1234567890\r\n"
    "EXPERIENCE\r\n"
    "Software Engineer | Acme Corp | NYC\r\n"
    "2019 - 2022\r\n"
    "- Built scalable APIs\r\n"
)

@pytest.fixture
def processor():
    return CvProcessor()

def test_engine_processing(processor):
    outcome = processor.process(SAMPLE_RESUME)
    assert outcome.provider == "advanced"
    assert outcome.model == "regex-based"
    assert outcome.extraction_version == "2.0.0"
    assert outcome.language == "en"
    assert outcome.text_quality == "medium"
    assert outcome.result.personal_info.full_name == "John Smith"
    assert outcome.summary.startswith("John Smith")

def test_insufficient_text(processor):
    with pytest.raises(InsufficientTextError) as excinfo:
        processor.process("hi")
    assert excinfo.value.reason == "PDF text too short"
    assert excinfo.value.quality.quality == "low"

def test_photo_flag_is_set_by_caller(processor):
    assert processor.process(SAMPLE_RESUME, photo_detected=True).result.photo_detected is True
    assert processor.process(SAMPLE_RESUME).result.photo_detected is False

def test_llm_failure_falls_back_to_engine():
    def failing_llm(text):
        raise RuntimeError("quota exceeded")

    processor = CvProcessor(llm_extractor=failing_llm, llm_provider="openai")
    outcome = processor.process(SAMPLE_RESUME)
    assert outcome.provider == "advanced"
    assert outcome.result.experience[0].company == "Acme Corp"

def test_llm_error_payload_falls_back_to_engine():
    processor = CvProcessor(llm_extractor=lambda text: {"error": True, "reason": "timeout"})
    outcome = processor.process(SAMPLE_RESUME)
    assert outcome.provider == "advanced"
    assert outcome.model == "regex-based"

def test_llm_result_is_used():
    def llm(text):
        return {
            "personal_info": {"full_name": "Jane Model"},
            "skills": ["Python", "Leadership", "Jira"],
            "languages": [{"language": "English", "proficiency": "native"}],
            "confidence_score": 1.4,
        }

    processor = CvProcessor(llm_extractor=llm, llm_provider="openai", llm_model="gpt-test")
    outcome = processor.process(SAMPLE_RESUME)
    result = outcome.result

    assert outcome.provider == "openai"
    assert outcome.model == "gpt-test"
    assert result.personal_info.full_name == "Jane Model"
    assert result.skills.technical == ["Python"]
    assert result.skills.soft == ["Leadership"]
    assert result.skills.tools == ["Jira"]
    assert result.languages == ["english"]
    assert result.confidence_score == 0.95

def test_llm_disabled_is_not_called():
    calls = []

    def llm(text):
        calls.append(text)
        return {}

    processor = CvProcessor(llm_extractor=llm)
    outcome = processor.process(SAMPLE_RESUME, use_llm=False)
    assert calls == []
    assert outcome.provider == "advanced"

def test_llm_receives_cleaned_text():
    received = []

    def llm(text):
        received.append(text)
        return {"personal_info": {"full_name": "Jane Model"}}

    CvProcessor(llm_extractor=llm).process(SAMPLE_RESUME)
    assert "\r" not in received[0]
    assert received[0].startswith("JOHN SMITH\njohn.smith@example.com")
