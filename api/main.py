from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import Dict, Any, List
from contextlib import asynccontextmanager
import os
import sys
import uuid
from datetime import datetime
import time
import logging
from pythonjsonlogger import jsonlogger

# Rate limiting
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from extraction.engine import ExtractionEngine
from extraction.language import detect_language
from extraction.processor import EXTRACTION_VERSION, CvProcessor
from extraction.skills import categorize_skills
from extraction.text_processor import InsufficientTextError, TextProcessor

# ============================================================
# Logging Configuration
# ============================================================
def setup_logging():
    """Configure structured JSON logging."""
    log_logger = logging.getLogger()
    log_logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())

    # Clear existing handlers
    log_logger.handlers = []

    # JSON formatter for structured logging
    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(levelname)s %(name)s %(message)s',
        rename_fields={'asctime': 'timestamp', 'levelname': 'level'}
    )
    handler.setFormatter(formatter)
    log_logger.addHandler(handler)

    return logging.getLogger(__name__)

logger = setup_logging()

# Configuration
RATE_LIMIT = os.getenv("RATE_LIMIT", "100/minute")
BATCH_RATE_LIMIT = os.getenv("BATCH_RATE_LIMIT", "20/minute")

# Rate limiter
limiter = Limiter(key_func=get_remote_address)

# Initialize components
_processor = None

# Track app state
app_state = {
    "start_time": time.time(),
    "engine_loaded": False,
    "last_parse_time_ms": 0,
    "total_parses": 0,
}


def init_components():
    """Initialize components at startup."""
    global _processor, app_state

    logger.info("Initializing components...")

    try:
        _processor = CvProcessor(engine=ExtractionEngine(), text_processor=TextProcessor())
        app_state["engine_loaded"] = True
        logger.info("CvProcessor loaded", extra={"component": "cv_processor", "status": "success"})
    except Exception as e:
        logger.error("Failed to load CvProcessor", extra={"component": "cv_processor", "error": str(e)})
        app_state["engine_loaded"] = False

    logger.info("Component initialization complete", extra={"engine_loaded": app_state["engine_loaded"]})


def get_processor() -> CvProcessor:
    """Get the initialized processor."""
    if _processor is None:
        raise APIError(
            message="Extraction engine is not available",
            status_code=503,
            error_code="ENGINE_UNAVAILABLE"
        )
    return _processor


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    # Startup
    init_components()
    logger.info("API startup complete")
    yield
    # Shutdown
    logger.info("API shutting down")


app = FastAPI(
    title="CV Extraction Engine API",
    description="Rule-based resume extraction for French, English and mixed documents",
    version=EXTRACTION_VERSION,
    lifespan=lifespan,
    openapi_tags=[
        {"name": "parsing", "description": "Resume parsing operations"},
        {"name": "skills", "description": "Skill operations"},
        {"name": "language", "description": "Language detection"},
        {"name": "system", "description": "System operations"},
    ]
)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Enable CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================
# Custom Exception Handler
# ============================================================
class APIError(Exception):
    """Custom API error with structured response."""
    def __init__(self, message: str, status_code: int = 500, error_code: str = "INTERNAL_ERROR", details: Dict = None):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    """Handle custom API errors with structured response."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": {
                "code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
            },
            "timestamp": datetime.now().isoformat(),
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error("Unhandled exception", extra={"error": str(exc), "path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "details": {"error": str(exc)} if os.getenv("DEBUG", "false").lower() == "true" else {},
            },
            "timestamp": datetime.now().isoformat(),
        }
    )


# ============================================================
# Request/Response Models
# ============================================================
class ParseTextRequest(BaseModel):
    """Parse text request model."""
    text: str = Field(..., min_length=1, description="Resume text to parse")
    document_type: str = Field(default="PDF", description="Source document type (PDF, DOCX, ...)")
    photo_detected: bool = False


class BatchParseRequest(BaseModel):
    """Batch parse request model."""
    texts: List[str] = Field(..., min_length=1, max_length=10, description="List of resume texts to parse")
    document_type: str = "PDF"


class SkillsRequest(BaseModel):
    """Categorize skills request model."""
    skills: List[str] = Field(..., min_length=1, description="List of skills to categorize")


class DetectLanguageRequest(BaseModel):
    """Detect language request model."""
    text: str = Field(..., description="Text to classify")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str
    version: str
    engine_loaded: bool
    uptime_seconds: int
    memory_usage_mb: float
    last_parse_time_ms: int
    total_parses: int


# ============================================================
# Helper Functions
# ============================================================
def get_memory_usage() -> float:
    """Get current memory usage in MB."""
    import psutil
    process = psutil.Process()
    return round(process.memory_info().rss / 1024 / 1024, 2)


def process_text(text: str, document_type: str = "PDF", photo_detected: bool = False) -> Dict[str, Any]:
    """Run one text through the processor and shape the response payload."""
    try:
        outcome = get_processor().process(
            text,
            document_type=document_type,
            use_llm=False,
            photo_detected=photo_detected,
        )
    except InsufficientTextError as e:
        raise APIError(
            message=str(e),
            status_code=422,
            error_code="INSUFFICIENT_TEXT",
            details={"reason": e.reason},
        )

    return {
        "data": outcome.result.model_dump(by_alias=True),
        "summary": outcome.summary,
        "extraction": {
            "provider": outcome.provider,
            "model": outcome.model,
            "version": outcome.extraction_version,
            "language": outcome.language,
            "text_quality": outcome.text_quality,
        },
    }


# ============================================================
# Health endpoint
# ============================================================
@app.get("/api/v1/health", tags=["system"], response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    uptime = time.time() - app_state["start_time"]

    return HealthResponse(
        status="healthy" if app_state["engine_loaded"] else "degraded",
        version=EXTRACTION_VERSION,
        engine_loaded=app_state["engine_loaded"],
        uptime_seconds=int(uptime),
        memory_usage_mb=get_memory_usage(),
        last_parse_time_ms=app_state["last_parse_time_ms"],
        total_parses=app_state["total_parses"],
    )


# ============================================================
# Parsing endpoints
# ============================================================
@app.post("/api/v1/parse-text", tags=["parsing"])
@limiter.limit(RATE_LIMIT)
async def parse_text_v1(request: Request, body: ParseTextRequest):
    """Parse resume text and extract structured data."""
    global app_state
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    logger.info("Parse text request started", extra={
        "request_id": request_id,
        "text_length": len(body.text),
        "document_type": body.document_type,
    })

    try:
        payload = process_text(body.text, body.document_type, body.photo_detected)
    except APIError:
        raise
    except Exception as e:
        logger.error("Parse text failed", extra={"request_id": request_id, "error": str(e)})
        raise APIError(
            message=f"Failed to parse text: {str(e)}",
            status_code=500,
            error_code="PARSE_FAILED"
        )

    # Update stats
    processing_time = int((time.time() - start_time) * 1000)
    app_state["last_parse_time_ms"] = processing_time
    app_state["total_parses"] += 1

    logger.info("Parse text completed", extra={
        "request_id": request_id,
        "processing_time_ms": processing_time,
        "confidence_score": payload["data"]["confidence_score"],
    })

    return {
        "success": True,
        **payload,
        "processing_time_ms": processing_time,
    }


@app.post("/api/v1/parse-batch", tags=["parsing"])
@limiter.limit(BATCH_RATE_LIMIT)
async def parse_batch_v1(request: Request, body: BatchParseRequest):
    """Parse multiple resume texts in a single request (max 10)."""
    global app_state
    request_id = str(uuid.uuid4())[:8]
    start_time = time.time()

    logger.info("Batch parse request started", extra={
        "request_id": request_id,
        "batch_size": len(body.texts)
    })

    results = []
    for idx, text in enumerate(body.texts):
        try:
            results.append({
                "index": idx,
                "success": True,
                **process_text(text, body.document_type),
            })
        except APIError as e:
            results.append({
                "index": idx,
                "success": False,
                "error": {"code": e.error_code, "message": e.message},
            })
        except Exception as e:
            logger.error("Batch item failed", extra={"request_id": request_id, "index": idx, "error": str(e)})
            results.append({
                "index": idx,
                "success": False,
                "error": {"code": "PARSE_FAILED", "message": str(e)},
            })

    successful = len([r for r in results if r["success"]])
    processing_time = int((time.time() - start_time) * 1000)
    app_state["total_parses"] += successful

    logger.info("Batch parse completed", extra={
        "request_id": request_id,
        "processing_time_ms": processing_time,
        "successful": successful,
        "failed": len(results) - successful
    })

    return {
        "success": True,
        "results": results,
        "processing_time_ms": processing_time,
        "summary": {
            "total": len(body.texts),
            "successful": successful,
            "failed": len(results) - successful
        }
    }


# ============================================================
# Skills endpoints
# ============================================================
@app.post("/api/v1/categorize-skills", tags=["skills"])
@limiter.limit(RATE_LIMIT)
async def categorize_skills_v1(request: Request, body: SkillsRequest):
    """Split a flat skill list into technical, soft and tool skills."""
    try:
        categorized = categorize_skills(body.skills)
        return {
            "success": True,
            "skills": categorized.model_dump(),
        }
    except Exception as e:
        logger.error("Skill categorization failed", extra={"error": str(e)})
        raise APIError(
            message=f"Skill categorization failed: {str(e)}",
            status_code=500,
            error_code="CATEGORIZE_FAILED"
        )


# ============================================================
# Language endpoints
# ============================================================
@app.post("/api/v1/detect-language", tags=["language"])
@limiter.limit(RATE_LIMIT)
async def detect_language_v1(request: Request, body: DetectLanguageRequest):
    """Classify text as French, English or mixed."""
    profile = detect_language(body.text)
    return {
        "success": True,
        "language": profile.model_dump(),
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
