import pytest

from cvgen.core.text import nl2br, null_to_empty_string, remove_markdown_code_blocks


def test_nl2br_replaces_mixed_line_endings():
    text = "Dear hiring manager,\r\nI am applying.\rThank you.\nJane"
    assert nl2br(text) == "Dear hiring manager,<br>I am applying.<br>Thank you.<br>Jane"


def test_nl2br_keeps_blank_lines():
    assert nl2br("a\n\nb") == "a<br><br>b"


def test_nl2br_without_line_endings_is_unchanged():
    assert nl2br("Single line letter") == "Single line letter"


def test_nl2br_is_idempotent():
    once = nl2br("one\r\ntwo\nthree")
    assert nl2br(once) == once


def test_remove_code_blocks_with_language_tag():
    text = "```html\n<h1>Jane Doe</h1>\n<p>Developer</p>\n```"
    assert remove_markdown_code_blocks(text) == "<h1>Jane Doe</h1>\n<p>Developer</p>\n"


def test_remove_code_blocks_without_language_tag():
    assert remove_markdown_code_blocks("```\n<p>x</p>\n```\n") == "<p>x</p>\n"


def test_remove_code_blocks_crlf_opening_fence():
    assert remove_markdown_code_blocks("```html\r\n<p>x</p>```") == "<p>x</p>"


@pytest.mark.parametrize(
    "text",
    [
        "```html\n<h1>CV</h1>\n```",
        "intro\n```\ncode\n```\noutro",
        "``` stray fence",
        "<p>no fences</p>",
    ],
)
def test_remove_code_blocks_is_idempotent(text):
    once = remove_markdown_code_blocks(text)
    assert remove_markdown_code_blocks(once) == once


def test_remove_code_blocks_without_fences_is_unchanged():
    html = "<section><h2>Experience</h2><ul><li>Python</li></ul></section>"
    assert remove_markdown_code_blocks(html) == html


def test_null_to_empty_string():
    assert null_to_empty_string(None) == ""
    assert null_to_empty_string("text") == "text"
