from cvgen.api.view_model import to_view_model
from cvgen.models.schemas import (
    COVER_LETTER_PLACEHOLDER,
    CV_PLACEHOLDER,
    GenerationResult,
    GenerationStatus,
    ResultSet,
)
from cvgen.services.generation_service import ConfigurationFault, FormValidationError


def test_initial_view_has_idle_placeholders():
    view = to_view_model(None, ["OPENAI_API_KEY is not set."], csrf_token="abc-123")

    assert view.form_error is None
    assert view.csrf_token == "abc-123"
    assert view.env_errors == ["OPENAI_API_KEY is not set."]
    assert view.results.gemini_cv == GenerationResult(status=GenerationStatus.IDLE, content=CV_PLACEHOLDER)
    assert view.results.openai_cover_letter.content == COVER_LETTER_PLACEHOLDER


def test_submission_error_fills_every_slot():
    error = FormValidationError("Invalid token.", "Invalid token.")

    view = to_view_model(error, [])

    assert view.form_error == "Invalid token."
    assert view.results == ResultSet.uniform(GenerationStatus.ERROR, "Invalid token.")


def test_configuration_fault_message_is_shown():
    error = ConfigurationFault(
        "Security Alert: Application AUTH_TOKEN is not configured. Submission rejected.",
        "AUTH_TOKEN not configured.",
    )
    view = to_view_model(error, ["AUTH_TOKEN is not set or is empty."])

    assert view.form_error.startswith("Security Alert")
    assert view.results.openai_cv.content == "AUTH_TOKEN not configured."
    assert view.env_errors == ["AUTH_TOKEN is not set or is empty."]


def test_results_pass_through_unchanged():
    results = ResultSet.uniform(GenerationStatus.SUCCESS, "<p>done</p>")
    context = to_view_model(results, [], csrf_token="t").as_context()

    assert context["results"] is results
    assert context["form_error"] is None
    assert context["csrf_token"] == "t"
    assert context["env_errors"] == []
