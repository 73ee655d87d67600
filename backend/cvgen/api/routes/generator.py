from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from fastapi import APIRouter, Depends, Form, Request
from fastapi.templating import Jinja2Templates
from starlette import status
from starlette.responses import Response

from cvgen.api import csrf
from cvgen.api.view_model import to_view_model
from cvgen.config import Settings, configuration_warnings, get_settings
from cvgen.core.resumes import ResumeStore
from cvgen.models.schemas import ResultSet, SubmissionForm
from cvgen.services.generation_service import GenerationService, SubmissionError
from cvgen.services.providers import build_providers
from cvgen.utils.prometheus_metrics import record_submission

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["generator"])


@lru_cache
def resume_store_for(resume_dir: Path) -> ResumeStore:
    return ResumeStore(resume_dir)


def get_resume_store(settings: Settings = Depends(get_settings)) -> ResumeStore:
    return resume_store_for(settings.resume_dir)


def get_generation_service(
    settings: Settings = Depends(get_settings),
    resumes: ResumeStore = Depends(get_resume_store),
) -> GenerationService:
    openai, gemini = build_providers(settings, resumes)
    return GenerationService(settings, openai=openai, gemini=gemini)


def render_page(
    request: Request,
    settings: Settings,
    outcome: Union[ResultSet, SubmissionError, None] = None,
    status_code: int = status.HTTP_200_OK,
    form_error: Optional[str] = None,
) -> Response:
    """Render the form with a fresh anti-forgery token."""
    secret = csrf.secret_from(request) or csrf.new_secret()
    view = to_view_model(
        outcome,
        configuration_warnings(settings),
        csrf_token=csrf.generate_token(secret),
        form_error=form_error,
    )
    response = templates.TemplateResponse(
        request,
        "index.html",
        view.as_context(),
        status_code=status_code,
    )
    csrf.set_secret_cookie(response, secret, secure=settings.csrf_cookie_secure)
    return response


@router.get("/")
async def index(request: Request, settings: Settings = Depends(get_settings)):
    return render_page(request, settings)


@router.post("/")
async def submit(
    request: Request,
    job: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    words: Optional[str] = Form(None),
    token: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    search_company: Optional[str] = Form(None, alias="searchCompany"),
    csrf_token: Optional[str] = Form(None, alias=csrf.CSRF_FIELD_NAME),
    settings: Settings = Depends(get_settings),
    service: GenerationService = Depends(get_generation_service),
):
    try:
        csrf.validate_request(request, csrf_token)
    except csrf.CSRFError:
        logger.warning(f"CSRF Token Validation Failed for request to: {request.url.path}")
        record_submission("csrf_failed")
        return render_page(
            request,
            settings,
            status_code=status.HTTP_403_FORBIDDEN,
            form_error=csrf.CSRF_ERROR_MESSAGE,
        )

    form = SubmissionForm(
        job=job or "",
        language=language or "",
        position=position or "",
        words=words or "",
        token=token,
        company=company or "",
        search_company=search_company or "",
    )

    try:
        results = await service.handle_submission(form)
    except SubmissionError as e:
        return render_page(request, settings, outcome=e)

    return render_page(request, settings, outcome=results)
