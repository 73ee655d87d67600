from unittest.mock import MagicMock

import pytest

from cvgen.api import csrf


def _request(cookies):
    request = MagicMock()
    request.cookies = cookies
    return request


def test_token_verifies_against_its_secret():
    secret = csrf.new_secret()
    token = csrf.generate_token(secret)
    assert csrf.verify_token(secret, token)


def test_tokens_are_fresh_per_render():
    secret = csrf.new_secret()
    assert csrf.generate_token(secret) != csrf.generate_token(secret)


@pytest.mark.parametrize("token", [None, "", "no-dash-digest-mismatch", "abcd"])
def test_bad_tokens_rejected(token):
    assert not csrf.verify_token(csrf.new_secret(), token)


def test_token_from_other_secret_rejected():
    token = csrf.generate_token(csrf.new_secret())
    assert not csrf.verify_token(csrf.new_secret(), token)


def test_validate_request_requires_cookie():
    token = csrf.generate_token("secret")
    with pytest.raises(csrf.CSRFError):
        csrf.validate_request(_request({}), token)

    csrf.validate_request(_request({csrf.CSRF_COOKIE_NAME: "secret"}), token)


@pytest.mark.parametrize("suffix", ["é", " ", "✓✓"])
def test_non_ascii_characters_in_token_rejected(suffix):
    secret = csrf.new_secret()
    token = csrf.generate_token(secret)
    assert not csrf.verify_token(secret, token + suffix)
