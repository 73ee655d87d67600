from unittest.mock import AsyncMock, MagicMock

import pytest

from cvgen.config import Settings
from cvgen.core.resumes import ResumeStore


def make_settings(**overrides) -> Settings:
    values = {
        "openai_api_key": "fake-openai-key",
        "gemini_api_key": "fake-gemini-key",
        "auth_token": "s3cret",
        "openai_model": "gpt-4o",
        "gemini_model": "gemini-2.5-flash",
        "timeout_seconds": 30,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def fake_provider(cv="<p>CV</p>", letter="Dear team,<br>Hello"):
    provider = MagicMock()
    provider.generate_cv = AsyncMock(return_value=cv)
    provider.generate_cover_letter = AsyncMock(return_value=letter)
    return provider


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def resume_dir(tmp_path):
    (tmp_path / "cv-en.md").write_text("# John Smith\nPython developer", encoding="utf-8")
    (tmp_path / "cv-fr.md").write_text("# Jean Dupont\nDéveloppeur Python", encoding="utf-8")
    return tmp_path


@pytest.fixture
def resumes(resume_dir):
    return ResumeStore(resume_dir)
