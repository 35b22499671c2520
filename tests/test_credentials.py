"""Tests for the credential gate."""

import pytest

from vocabsync.core.credentials import Credentials, validate_credentials
from vocabsync.core.errors import ConfigError, MissingNotebookError, MissingTokenError


class TestValidateCredentials:
    def test_both_present(self):
        creds = validate_credentials("tok", "np1")
        assert creds == Credentials(auth_token="tok", notebook_id="np1")

    @pytest.mark.parametrize("token", ["", None])
    def test_missing_token(self, token):
        with pytest.raises(MissingTokenError):
            validate_credentials(token, "np1")

    @pytest.mark.parametrize("notebook", ["", None])
    def test_missing_notebook(self, notebook):
        with pytest.raises(MissingNotebookError):
            validate_credentials("tok", notebook)

    def test_token_checked_first(self):
        with pytest.raises(MissingTokenError):
            validate_credentials("", "")

    def test_errors_are_config_errors(self):
        with pytest.raises(ConfigError, match="token"):
            validate_credentials(None, "np1")

    def test_credentials_are_immutable(self):
        creds = validate_credentials("tok", "np1")
        with pytest.raises(AttributeError):
            creds.auth_token = "other"
