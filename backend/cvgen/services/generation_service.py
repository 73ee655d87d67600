"""
Generation Service: validates a form submission and fans it out to both
providers for both documents.

Flow:
1. Validate the submission (first failing check wins, no provider calls)
2. Launch the four (provider, document) calls concurrently
3. Wait for all four to settle, never cancelling siblings on failure
4. Map every outcome to a GenerationResult slot
"""
from __future__ import annotations

import asyncio
import hmac
import logging
from typing import Awaitable, Dict

from cvgen.config import Settings
from cvgen.models.schemas import (
    UNKNOWN_COMPANY,
    GenerationRequest,
    GenerationResult,
    GenerationStatus,
    ResultSet,
    Slot,
    SubmissionForm,
)
from cvgen.services.providers import ProviderClient
from cvgen.utils.prometheus_metrics import record_submission, record_validation_failure

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class SubmissionError(Exception):
    """A submission rejected before any provider call."""

    validation_type = "submission"

    def __init__(self, user_message: str, slot_message: str):
        super().__init__(user_message)
        self.user_message = user_message
        self.slot_message = slot_message

    def results(self) -> ResultSet:
        return ResultSet.uniform(GenerationStatus.ERROR, self.slot_message)


class FormValidationError(SubmissionError):
    pass


class ConfigurationFault(SubmissionError):
    """The server is missing configuration required to accept submissions."""
    pass


class GenerationService:
    def __init__(self, settings: Settings, openai: ProviderClient, gemini: ProviderClient):
        self.settings = settings
        self.openai = openai
        self.gemini = gemini

    def validate(self, form: SubmissionForm) -> GenerationRequest:
        """
        Check a raw submission and turn it into a GenerationRequest.

        Raises:
            FormValidationError: missing fields, missing company, bad token
            ConfigurationFault: no AUTH_TOKEN configured on the server
        """
        if not form.job or not form.language or not form.position or not form.words or form.token is None:
            raise self._reject(
                FormValidationError(
                    "Missing required fields: job, language, position, words, or token.",
                    "Missing required fields.",
                ),
                "missing_fields",
            )

        if form.include_company_context and not form.company:
            raise self._reject(
                FormValidationError(
                    "Company name is required when 'Attempt to use specific information' is checked.",
                    "Company name required.",
                ),
                "company_required",
            )

        configured_token = self.settings.configured_auth_token()
        if configured_token is None:
            raise self._reject(
                ConfigurationFault(
                    "Security Alert: Application AUTH_TOKEN is not configured. Submission rejected.",
                    "AUTH_TOKEN not configured.",
                ),
                "token_not_configured",
            )

        if not hmac.compare_digest(form.token.encode("utf-8"), configured_token.encode("utf-8")):
            raise self._reject(
                FormValidationError("Invalid token.", "Invalid token."),
                "invalid_token",
            )

        return GenerationRequest(
            company=form.company if form.include_company_context else UNKNOWN_COMPANY,
            position=form.position,
            job_description=form.job,
            language=form.language,
            word_count=form.words,
            include_company_context=form.include_company_context,
        )

    @staticmethod
    def _reject(error: SubmissionError, validation_type: str) -> SubmissionError:
        logger.warning(f"Submission rejected ({validation_type}): {error.user_message}")
        record_validation_failure(validation_type)
        record_submission("rejected")
        return error

    async def generate_all(self, request: GenerationRequest) -> ResultSet:
        calls: Dict[Slot, Awaitable[str]] = {
            Slot.GEMINI_CV: self.gemini.generate_cv(request),
            Slot.OPENAI_CV: self.openai.generate_cv(request),
            Slot.GEMINI_COVER_LETTER: self.gemini.generate_cover_letter(request),
            Slot.OPENAI_COVER_LETTER: self.openai.generate_cover_letter(request),
        }

        # return_exceptions=True: every call settles, one failure never cancels the rest
        outcomes = await asyncio.gather(*calls.values(), return_exceptions=True)

        results = {
            slot.value: map_outcome(slot, outcome)
            for slot, outcome in zip(calls.keys(), outcomes)
        }
        return ResultSet(**results)

    async def handle_submission(self, form: SubmissionForm) -> ResultSet:
        request = self.validate(form)
        logger.info(
            f"Generating documents: language={request.language} position={request.position!r} "
            f"company_context={request.include_company_context}"
        )
        results = await self.generate_all(request)
        record_submission("generated")
        return results


def map_outcome(slot: Slot, outcome: object) -> GenerationResult:
    """Turn one settled call into its slot's result, logging failures."""
    if isinstance(outcome, BaseException):
        logger.error(f"{slot.log_context}: {outcome!r}", exc_info=outcome)
        message = str(outcome) or UNKNOWN_ERROR_MESSAGE
        return GenerationResult(
            status=GenerationStatus.ERROR,
            content=f"{slot.error_prefix}: {message}",
        )
    return GenerationResult(status=GenerationStatus.SUCCESS, content=outcome)
