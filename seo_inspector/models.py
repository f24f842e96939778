from datetime import datetime
from typing import Any, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from seo_inspector.config import STATUS_CHECK_KEYS
from seo_inspector.errors import SchemaError


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeRequest(BaseModel):
    # Type-checked by normalize_url so bad input gets the same 400 envelope.
    url: Any = None


class StatusCheck(CamelModel):
    status: Literal["good", "warning", "error"]
    message: str


class Recommendation(CamelModel):
    type: Literal["success", "warning", "error", "info"]
    title: str
    description: str


class SEOReport(CamelModel):
    model_config = ConfigDict(frozen=True)

    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    canonical: Optional[str] = None
    h1: list[str] = Field(default_factory=list)
    h2: list[str] = Field(default_factory=list)
    h3: list[str] = Field(default_factory=list)
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    og_url: Optional[str] = None
    og_type: Optional[str] = None
    og_site_name: Optional[str] = None
    twitter_card: Optional[str] = None
    twitter_site: Optional[str] = None
    twitter_title: Optional[str] = None
    twitter_description: Optional[str] = None
    twitter_image: Optional[str] = None
    robots: Optional[str] = None
    keywords: Optional[str] = None
    language: Optional[str] = None
    favicon: Optional[str] = None
    content_length: Optional[int] = None
    score: int = Field(ge=0, le=100)
    grade: Optional[Literal["A", "B", "C", "D", "F"]] = None
    status_checks: dict[str, StatusCheck]
    recommendations: list[Recommendation]

    @field_validator("url")
    @classmethod
    def _absolute_http_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("must be an absolute http(s) URL")
        return v

    @model_validator(mode="after")
    def _all_status_checks(self) -> "SEOReport":
        if set(self.status_checks) != set(STATUS_CHECK_KEYS):
            raise ValueError(
                f"statusChecks must contain exactly {', '.join(STATUS_CHECK_KEYS)}"
            )
        return self

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def validate_report(data: dict[str, Any]) -> SEOReport:
    """Re-validate a report mapping, raising SchemaError with readable details."""
    try:
        return SEOReport.model_validate(data)
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'report'}: {err['msg']}"
            for err in e.errors()
        )
        raise SchemaError(details) from e


# --- Collaborator models ---

class HistoryEntry(CamelModel):
    url: str
    score: int
    timestamp: datetime


class TaskCreate(CamelModel):
    url: str
    title: str
    description: str
    priority: Literal["low", "medium", "high"] = "medium"
    status: Literal["todo", "in_progress", "done"] = "todo"


class RecommendationTask(CamelModel):
    url: str
    recommendation: Recommendation


class SEOTask(TaskCreate):
    id: int
    created_at: datetime
    updated_at: datetime


class ExportBundle(CamelModel):
    history: list[HistoryEntry]
    tasks: list[SEOTask]
    generated_at: datetime
