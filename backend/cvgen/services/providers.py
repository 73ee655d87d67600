"""
LLM provider clients (OpenAI, Gemini).

Each client makes exactly one call per document: no retries, no fallback to
the other provider. Credentials are checked when a call is made, so a
missing key only fails the slots that need it.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI
from pydantic import SecretStr

from cvgen.config import Settings
from cvgen.core.instructions import build_cover_letter_instruction, build_cv_instruction
from cvgen.core.prompts import build_cover_letter_prompt, build_cv_prompt
from cvgen.core.resumes import ResumeStore
from cvgen.core.text import nl2br, null_to_empty_string, remove_markdown_code_blocks
from cvgen.models.schemas import GenerationRequest, Provider
from cvgen.utils.prometheus_metrics import track_provider_call

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when a single provider call fails."""
    pass


def _message_text(content: Any) -> str:
    """Flatten a LangChain message content (str or list of parts) to text."""
    if content is None or isinstance(content, str):
        return null_to_empty_string(content)
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text") or "")
    return "".join(parts)


class ProviderClient(ABC):
    """
    Base class for one LLM vendor.

    Subclasses implement ``_build_model``; everything else (prompt assembly,
    the call itself, post-processing) is shared.
    """

    name: str = ""
    key_env_var: str = ""

    def __init__(
        self,
        api_key: Optional[SecretStr],
        model: str,
        resumes: ResumeStore,
        timeout_seconds: int = 60,
    ):
        self.api_key = api_key
        self.model = model
        self.resumes = resumes
        self.timeout_seconds = timeout_seconds

    def _require_key(self) -> str:
        key = self.api_key.get_secret_value() if self.api_key is not None else ""
        if not key:
            raise ProviderError(f"{self.key_env_var} is not set")
        return key

    @abstractmethod
    def _build_model(self, api_key: str) -> BaseChatModel:
        """Return a LangChain chat model bound to ``api_key``."""

    async def generate(self, instruction: str, prompt: str) -> str:
        """Send one system instruction + user prompt, return the raw text."""
        api_key = self._require_key()
        messages = [
            SystemMessage(content=instruction),
            HumanMessage(content=prompt),
        ]

        try:
            chat_model = self._build_model(api_key)
            response = await chat_model.ainvoke(messages)
        except Exception as e:
            raise ProviderError(f"{self.name} request failed: {e}") from e

        text = _message_text(getattr(response, "content", None))
        if not text.strip():
            raise ProviderError(f"{self.name} returned an empty response")

        logger.info(f"{self.name} ({self.model}) returned {len(text)} chars")
        return text

    @track_provider_call("cover_letter")
    async def generate_cover_letter(self, request: GenerationRequest) -> str:
        instruction = build_cover_letter_instruction(
            company=request.company,
            job=request.job_description,
            word_count=request.word_count,
            language=request.language,
            include_company_context=request.include_company_context,
            resumes=self.resumes,
        )
        prompt = build_cover_letter_prompt(
            request.language, request.company, request.position, request.word_count
        )
        text = await self.generate(instruction, prompt)
        return nl2br(text)

    @track_provider_call("cv")
    async def generate_cv(self, request: GenerationRequest) -> str:
        instruction = build_cv_instruction(request.job_description, request.language, self.resumes)
        prompt = build_cv_prompt(request.language, request.job_description, request.position)
        text = await self.generate(instruction, prompt)
        return remove_markdown_code_blocks(text)


class OpenAIProvider(ProviderClient):
    name = Provider.OPENAI.value
    key_env_var = "OPENAI_API_KEY"

    def _build_model(self, api_key: str) -> ChatOpenAI:
        return ChatOpenAI(
            model=self.model,
            api_key=api_key,
            timeout=self.timeout_seconds,
            max_retries=0,  # one best-effort call per slot
        )


class GeminiProvider(ProviderClient):
    name = Provider.GEMINI.value
    key_env_var = "GEMINI_API_KEY"

    def _build_model(self, api_key: str) -> ChatGoogleGenerativeAI:
        return ChatGoogleGenerativeAI(
            model=self.model,
            google_api_key=api_key,
            timeout=self.timeout_seconds,
            max_retries=0,
        )


def build_providers(settings: Settings, resumes: ResumeStore) -> tuple[OpenAIProvider, GeminiProvider]:
    openai = OpenAIProvider(
        api_key=settings.openai_api_key,
        model=settings.openai_model,
        resumes=resumes,
        timeout_seconds=settings.timeout_seconds,
    )
    gemini = GeminiProvider(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        resumes=resumes,
        timeout_seconds=settings.timeout_seconds,
    )
    return openai, gemini
