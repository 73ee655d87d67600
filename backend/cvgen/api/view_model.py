from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from cvgen.models.schemas import ResultSet
from cvgen.services.generation_service import SubmissionError


class RenderModel(BaseModel):
    """Everything the index template needs."""

    env_errors: List[str] = Field(default_factory=list)
    results: ResultSet
    csrf_token: str = ""
    form_error: Optional[str] = None

    def as_context(self) -> Dict[str, Any]:
        return {
            "env_errors": self.env_errors,
            "results": self.results,
            "csrf_token": self.csrf_token,
            "form_error": self.form_error,
        }


def to_view_model(
    outcome: Union[ResultSet, SubmissionError, None],
    config_warnings: List[str],
    csrf_token: str = "",
    form_error: Optional[str] = None,
) -> RenderModel:
    """
    Map a submission outcome to the page model.

    ``None`` means nothing was submitted yet (idle placeholders). A
    SubmissionError fills every slot with its short message and shows the
    full message above the form.
    """
    if isinstance(outcome, SubmissionError):
        return RenderModel(
            env_errors=list(config_warnings),
            results=outcome.results(),
            csrf_token=csrf_token,
            form_error=outcome.user_message,
        )

    return RenderModel(
        env_errors=list(config_warnings),
        results=outcome if outcome is not None else ResultSet.initial(),
        csrf_token=csrf_token,
        form_error=form_error,
    )
