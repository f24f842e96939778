import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse, Response

from seo_inspector.config import LOG_LEVEL
from seo_inspector.errors import SchemaError, SEOInspectorError, ValidationError
from seo_inspector.models import (
    AnalyzeRequest, ExportBundle, HistoryEntry, RecommendationTask, SEOReport, SEOTask,
    TaskCreate,
)
from seo_inspector.pipeline import analyze
from seo_inspector.report import generate_csv, generate_pdf
from seo_inspector.storage import HistoryStore, TaskStore, task_from_recommendation, utcnow

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger("seo_inspector.api")

app = FastAPI(title="SEO Tag Inspector", version="1.0.0")

history_store = HistoryStore()
task_store = TaskStore()


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


@app.post("/api/analyze-seo", response_model=SEOReport, response_model_exclude_none=True)
def analyze_seo(req: AnalyzeRequest):
    if not req.url:
        return _error(400, "URL is required")

    try:
        report = analyze(req.url)
    except ValidationError as e:
        return _error(400, e.message)
    except SchemaError as e:
        logger.error("Validation error: %s", e.details)
        return _error(500, e.message, details=e.details)
    except SEOInspectorError as e:
        logger.error("Error analyzing SEO for %s: %s", req.url, e.message)
        return _error(500, e.message)
    except Exception:
        logger.exception("Unexpected error analyzing %s", req.url)
        return _error(500, "An unknown error occurred")

    history_store.record(report.url, report.score)
    return report


@app.get("/api/history/{url:path}", response_model=list[HistoryEntry])
def get_history(url: str):
    return history_store.for_url(url)


@app.post("/api/tasks", response_model=list[SEOTask])
def create_task(task: TaskCreate):
    task_store.add(task)
    return task_store.for_url(task.url)


@app.post("/api/tasks/from-recommendation", response_model=list[SEOTask])
def create_task_from_recommendation(req: RecommendationTask):
    task_store.add(task_from_recommendation(req.url, req.recommendation))
    return task_store.for_url(req.url)


@app.get("/api/tasks/{url:path}", response_model=list[SEOTask])
def get_tasks(url: str):
    return task_store.for_url(url)


@app.get("/api/export/{url:path}", response_model=ExportBundle)
def export_data(url: str):
    return ExportBundle(
        history=history_store.for_url(url),
        tasks=task_store.for_url(url),
        generated_at=utcnow(),
    )


@app.post("/api/report/csv")
def export_csv(data: SEOReport):
    return Response(
        content=generate_csv(data),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=seo-report.csv"},
    )


@app.post("/api/report/pdf")
def export_pdf(data: SEOReport):
    pdf_bytes = generate_pdf(data)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=seo-report.pdf"},
    )
