"""
System instructions for cover letter and CV generation.

Both builders embed the candidate's base resume verbatim and return an
empty string for languages they do not know.
"""
from __future__ import annotations

import logging

from cvgen.core.resumes import ResumeStore
from cvgen.models.schemas import UNKNOWN_COMPANY, Language

logger = logging.getLogger(__name__)


COVER_LETTER_INSTRUCTION_FR = (
    "# Instructions pour Lettre de Motivation\n\n"
    "Agis en tant que chercheur d'emploi qui veut rédiger une lettre de motivation "
    "qui sera utile pour obtenir un emploi. "
    "{company_clause}"
    "et écris une lettre de motivation de {words} mots avec des mots qui sont "
    "significatifs pour un responsable des ressources humaines.\n\n"
    'Voici la description du poste convoité:\n\n"{job}".\n'
    'Le CV de base du candidat est le suivant:\n\n"{resume}".\n'
    "Parles à la première personne, tu es le candidat. Pour formatter ta réponse, "
    "n'utilises pas Markdown, utilises simplement du texte brut."
)

COVER_LETTER_INSTRUCTION_EN = (
    "# Cover Letter Instructions\n\n"
    "Act as a job seeker who needs to write a cover letter that will be valuable "
    "to get a job. "
    "{company_clause}"
    "and write a {words} words cover letter with words that are meaningful to "
    "human resource staff.\n\n"
    'This is the job description:\n\n"{job}".\n'
    'The candidate\'s base CV is as follows:\n\n"{resume}".\n'
    "You will talk in the first person, as you are the candidate. For formatting "
    "your answer, do not use Markdown, just plain text."
)

COMPANY_CLAUSES = {
    Language.FRENCH: 'Prends ce que tu sais sur la société "{company}". ',
    Language.ENGLISH: 'Grab what you have about the company "{company}". ',
}

CV_INSTRUCTION_FR = (
    "# Instructions pour Génération de CV\n\n"
    " Tu es un expert en rédaction de CV. Ta tâche est de créer un CV sur mesure "
    "basé sur le CV de base fourni et la description de poste spécifique. \n"
    " Le CV doit mettre en évidence les compétences et expériences pertinentes du "
    "CV de base qui correspondent aux exigences du poste. \n"
    " Réorganise et reformule les sections du CV de base pour les aligner "
    "étroitement avec la description de poste. \n"
    " Assure-toi que le résultat est un CV complet, professionnel et optimisé pour le poste.\n\n"
    ' Voici la description du poste pour lequel adapter le CV:\n\n"{job}".\n\n'
    ' Voici le CV de base du candidat:\n\n"{resume}".\n\n'
    " Le CV généré doit être formaté dans un fragment HTML sans la balise HTML, "
    "ni la balise HEAD, ni la balise TITLE, ni la balise BODY, ni la balise BR."
    " Il ne faut mettre aucun élément Markdown dans la réponse: ne pas mettre de "
    "triple apostrophe inversées."
)

CV_INSTRUCTION_EN = (
    "# CV Generation Instructions\n\n"
    " You are an expert CV writer. Your task is to create a tailored CV based on "
    "the provided base CV and the specific job description.\n"
    " The CV should highlight relevant skills and experiences from the base CV "
    "that match the job requirements.\n"
    " Reorganize and rephrase sections of the base CV to align closely with the "
    "job description.\n"
    " Ensure the output is a complete, professional CV optimized for the position.\n\n"
    ' This is the job description to tailor the CV for:\n\n"{job}".\n\n'
    ' This is the candidate\'s base CV:\n\n"{resume}".\n\n'
    " The generated CV should be formatted in an HTML fragment without the HTML tag, "
    "nor the HEAD tag, nor the TITLE tag, nor the BODY tag, nor the BR tag."
    " Do not put any Markdown elements in the answer: do not put triple backticks."
)

COVER_LETTER_INSTRUCTIONS = {
    Language.FRENCH: COVER_LETTER_INSTRUCTION_FR,
    Language.ENGLISH: COVER_LETTER_INSTRUCTION_EN,
}

CV_INSTRUCTIONS = {
    Language.FRENCH: CV_INSTRUCTION_FR,
    Language.ENGLISH: CV_INSTRUCTION_EN,
}


def _parse_language(language: str) -> Language | None:
    try:
        return Language(language)
    except ValueError:
        logger.warning(f"No system instruction for language {language!r}")
        return None


def build_cover_letter_instruction(
    company: str,
    job: str,
    word_count: str,
    language: str,
    include_company_context: bool,
    resumes: ResumeStore,
) -> str:
    lang = _parse_language(language)
    if lang is None:
        return ""

    company_clause = ""
    if include_company_context and company != UNKNOWN_COMPANY:
        company_clause = COMPANY_CLAUSES[lang].format(company=company)

    return COVER_LETTER_INSTRUCTIONS[lang].format(
        company_clause=company_clause,
        words=word_count,
        job=job,
        resume=resumes.load(lang),
    )


def build_cv_instruction(job_description: str, language: str, resumes: ResumeStore) -> str:
    lang = _parse_language(language)
    if lang is None:
        return ""

    return CV_INSTRUCTIONS[lang].format(job=job_description, resume=resumes.load(lang))
