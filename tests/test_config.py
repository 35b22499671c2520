"""Tests for config file loading."""

from vocabsync.adapters.maimemo_api import API_BASE
from vocabsync.config import Config, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.api_base == API_BASE

    def test_reads_keys(self, tmp_path):
        path = tmp_path / "vocabsync.conf"
        path.write_text(
            "# maimemo settings\n"
            "AUTH_TOKEN=abc123\n"
            "NOTEBOOK_ID = np1\n"
            "VOCABULARY_ID=v1\n"
            "SOURCE=pot\n"
            "TIMEOUT=10\n"
        )
        config = load_config(path)
        assert config.auth_token == "abc123"
        assert config.notebook_id == "np1"
        assert config.vocabulary_id == "v1"
        assert config.source == "pot"
        assert config.timeout == 10

    def test_quoted_values_and_inline_comments(self, tmp_path):
        path = tmp_path / "vocabsync.conf"
        path.write_text(
            'AUTH_TOKEN="Bearer abc#def" # keep the hash\n'
            "NOTEBOOK_ID=np1 # my words\n"
            "API_BASE='http://localhost:9000/v1'\n"
        )
        config = load_config(path)
        assert config.auth_token == "Bearer abc#def"
        assert config.notebook_id == "np1"
        assert config.api_base == "http://localhost:9000/v1"

    def test_ignores_unknown_and_malformed_lines(self, tmp_path, caplog):
        path = tmp_path / "vocabsync.conf"
        path.write_text("not a setting\nCOLOR=blue\nTIMEOUT=soon\nNOTEBOOK_ID=np1\n")
        config = load_config(path)
        assert config.notebook_id == "np1"
        assert config.timeout == 30
        assert "Unknown config key: color" in caplog.text
        assert "Invalid TIMEOUT value" in caplog.text
