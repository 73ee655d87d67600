"""User prompts sent alongside the system instructions."""
import logging

from cvgen.models.schemas import Language

logger = logging.getLogger(__name__)


COVER_LETTER_PROMPTS = {
    Language.FRENCH: (
        'Écris une lettre de motivation de {words} mots pour postuler au poste '
        '"{position}" dans la société "{company}".'
    ),
    Language.ENGLISH: (
        'Write a {words} words cover letter to apply for the "{position}" '
        'position at the "{company}" company.'
    ),
}

CV_PROMPTS = {
    Language.FRENCH: (
        'En te basant sur la description de poste suivante pour le rôle de "{position}", '
        'génère un CV personnalisé. La description de poste est : "{job_description}".'
    ),
    Language.ENGLISH: (
        'Based on the following job description for the "{position}" role, '
        'generate a tailored CV. The job description is: "{job_description}".'
    ),
}


def _template_for(templates: dict, language: str, kind: str) -> str:
    try:
        return templates[Language(language)]
    except ValueError:
        # Unsupported languages produce an empty prompt rather than an error.
        logger.warning(f"No {kind} prompt for language {language!r}")
        return ""


def build_cover_letter_prompt(language: str, company: str, position: str, word_count: str) -> str:
    template = _template_for(COVER_LETTER_PROMPTS, language, "cover letter")
    if not template:
        return ""
    return template.format(words=word_count, position=position, company=company)


def build_cv_prompt(language: str, job_description: str, position: str) -> str:
    template = _template_for(CV_PROMPTS, language, "CV")
    if not template:
        return ""
    return template.format(position=position, job_description=job_description)
