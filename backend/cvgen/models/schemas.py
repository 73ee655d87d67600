from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_COMPANY = "Unknown"

CV_PLACEHOLDER = "Waiting for your job description for CV generation"
COVER_LETTER_PLACEHOLDER = "Waiting for your question for Cover Letter"


class Language(str, Enum):
    FRENCH = "French"
    ENGLISH = "English"


class Provider(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def label(self) -> str:
        return "OpenAI" if self is Provider.OPENAI else "Gemini"


class DocumentType(str, Enum):
    CV = "cv"
    COVER_LETTER = "cover_letter"

    @property
    def label(self) -> str:
        return "CV" if self is DocumentType.CV else "Cover Letter"


class Slot(str, Enum):
    """One of the four (provider, document) result positions."""

    GEMINI_CV = "gemini_cv"
    OPENAI_CV = "openai_cv"
    GEMINI_COVER_LETTER = "gemini_cover_letter"
    OPENAI_COVER_LETTER = "openai_cover_letter"

    @property
    def provider(self) -> Provider:
        return Provider.GEMINI if self.value.startswith("gemini") else Provider.OPENAI

    @property
    def document(self) -> DocumentType:
        return DocumentType.CV if self.value.endswith("_cv") else DocumentType.COVER_LETTER

    @property
    def log_context(self) -> str:
        return f"Error with {self.provider.label} {self.document.label} generation"

    @property
    def error_prefix(self) -> str:
        return f"Error generating {self.document.label} with {self.provider.label}"


class GenerationStatus(str, Enum):
    IDLE = "idle"
    SUCCESS = "success"
    ERROR = "error"


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: GenerationStatus
    content: str


class ResultSet(BaseModel):
    """All four slots, always present."""

    model_config = ConfigDict(frozen=True)

    gemini_cv: GenerationResult
    openai_cv: GenerationResult
    gemini_cover_letter: GenerationResult
    openai_cover_letter: GenerationResult

    @classmethod
    def initial(cls) -> "ResultSet":
        cv = GenerationResult(status=GenerationStatus.IDLE, content=CV_PLACEHOLDER)
        letter = GenerationResult(status=GenerationStatus.IDLE, content=COVER_LETTER_PLACEHOLDER)
        return cls(
            gemini_cv=cv,
            openai_cv=cv,
            gemini_cover_letter=letter,
            openai_cover_letter=letter,
        )

    @classmethod
    def uniform(cls, status: GenerationStatus, content: str) -> "ResultSet":
        result = GenerationResult(status=status, content=content)
        return cls(**{slot.value: result for slot in Slot})

    def get(self, slot: Slot) -> GenerationResult:
        return getattr(self, slot.value)


class SubmissionForm(BaseModel):
    """Raw POST fields, before any validation."""

    job: str = ""
    language: str = ""
    position: str = ""
    words: str = ""
    token: Optional[str] = None
    company: str = ""
    search_company: str = ""

    @property
    def include_company_context(self) -> bool:
        return self.search_company == "true"


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str = Field(default=UNKNOWN_COMPANY)
    position: str
    job_description: str
    language: str
    word_count: str
    include_company_context: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"
