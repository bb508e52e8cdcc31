"""
Unit tests for ClientConfig loading.
"""

import pytest

from vision_query.config import ClientConfig, _parse_simple_yaml
from vision_query.errors import ConfigError
from vision_query.utils import debug_enabled


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text(
        "# endpoint\n"
        "host: proxy.example.com   # inline comment\n"
        "token: \"sk-#not-a-comment\"\n"
        "timeout_seconds: 30\n"
        "organization: ~\n"
    )
    monkeypatch.setenv("VISION_QUERY_CONFIG", str(path))
    return path


class TestSimpleYaml:

    def test_parse(self, config_file):
        assert _parse_simple_yaml(config_file) == {
            "host": "proxy.example.com",
            "token": "sk-#not-a-comment",
            "timeout_seconds": 30,
            "organization": None,
        }


class TestLoad:

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        config = ClientConfig.load()
        assert config == ClientConfig()
        assert config.chat_url == "https://api.openai.com/v1/chat/completions"

    def test_file_values(self, config_file):
        config = ClientConfig.load()
        assert config.host == "proxy.example.com"
        assert config.token == "sk-#not-a-comment"
        assert config.timeout_seconds == 30
        assert config.organization is None

    def test_env_overrides_file(self, config_file, monkeypatch):
        monkeypatch.setenv("VISION_QUERY_HOST", "env.example.com")
        monkeypatch.setenv("VISION_QUERY_TIMEOUT_SECONDS", "5")
        config = ClientConfig.load()
        assert config.host == "env.example.com"
        assert config.timeout_seconds == 5
        assert config.token == "sk-#not-a-comment"

    def test_openai_api_key_fallback(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        assert ClientConfig.load().token == "sk-env"

    def test_debug_flag_enables_logging(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VISION_QUERY_DEBUG", "yes")
        assert ClientConfig.load().debug is True
        assert debug_enabled()

    def test_debug_off_after_later_load(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VISION_QUERY_DEBUG", "true")
        ClientConfig.load()
        assert debug_enabled()

        monkeypatch.delenv("VISION_QUERY_DEBUG")
        assert ClientConfig.load().debug is False
        assert not debug_enabled()

    def test_bad_timeout(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("VISION_QUERY_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigError):
            ClientConfig.load()

    def test_missing_explicit_file(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VISION_QUERY_CONFIG", str(tmp_path / "nope.yaml"))
        with pytest.raises(ConfigError):
            ClientConfig.load()

    def test_unknown_keys_are_ignored(self):
        config = ClientConfig.from_mapping({"host": "h", "colour": "blue"})
        assert config.host == "h"
