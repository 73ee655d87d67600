from cvgen.core.prompts import build_cover_letter_prompt, build_cv_prompt


def test_cover_letter_prompt_french():
    prompt = build_cover_letter_prompt("French", "Acme", "Développeur", "150")
    assert prompt == (
        'Écris une lettre de motivation de 150 mots pour postuler au poste '
        '"Développeur" dans la société "Acme".'
    )


def test_cover_letter_prompt_english():
    prompt = build_cover_letter_prompt("English", "Unknown", "Data Engineer", "300")
    assert prompt == (
        'Write a 300 words cover letter to apply for the "Data Engineer" '
        'position at the "Unknown" company.'
    )


def test_cv_prompt_embeds_job_and_position():
    prompt = build_cv_prompt("English", "Build APIs with {FastAPI}", "Backend Dev")
    assert '"Backend Dev" role' in prompt
    assert 'The job description is: "Build APIs with {FastAPI}".' in prompt


def test_cv_prompt_french():
    prompt = build_cv_prompt("French", "Créer des API", "Développeur")
    assert prompt.startswith('En te basant sur la description de poste suivante pour le rôle de "Développeur"')
    assert '"Créer des API"' in prompt


def test_unsupported_language_returns_empty_prompt():
    assert build_cover_letter_prompt("German", "Acme", "Dev", "200") == ""
    assert build_cv_prompt("", "job", "Dev") == ""
