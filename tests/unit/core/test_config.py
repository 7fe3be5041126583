"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the packaged YAML files; failure scenarios point
QUEUE_CLI_CONFIG_DIR at a tmp_path directory.
"""

import pytest

from queue_cli.core.config import (
    CONFIG_DIR_ENV,
    AppConfig,
    find_config_dir,
    get_app_config,
    get_cosmos_base_url,
    get_request_timeout,
    get_service_base_url,
    get_settings,
    load_yaml_config,
)
from queue_cli.core.config_schema import ApplicationSchema, LoggingSchema
from queue_cli.core.exceptions import ConfigurationError

VALID_APPLICATION = """
name: queue-cli
version: 9.9.9
description: test
service:
  name: jobs
  cluster_url: https://cluster.example.com/
timeouts:
  request: 5
"""

VALID_LOGGING = """
level: INFO
format: json
handlers:
  console:
    enabled: true
  file:
    enabled: false
    path: logs/cli.jsonl
    max_bytes: 1024
    backup_count: 1
"""


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """A settings directory with valid files, selected through the environment."""
    (tmp_path / "application.yaml").write_text(VALID_APPLICATION)
    (tmp_path / "logging.yaml").write_text(VALID_LOGGING)
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    return tmp_path


class TestFindConfigDir:
    """Tests for settings directory discovery."""

    def test_defaults_to_packaged_settings(self):
        config_dir = find_config_dir()
        assert (config_dir / "application.yaml").is_file()
        assert (config_dir / "logging.yaml").is_file()

    def test_environment_override(self, config_dir):
        assert find_config_dir() == config_dir


class TestLoadYamlConfig:
    """Tests for YAML file loading."""

    def test_loads_application_yaml_as_dict(self):
        data = load_yaml_config("application.yaml")
        assert isinstance(data, dict)
        assert "service" in data

    def test_raises_for_nonexistent_file(self):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            load_yaml_config("does_not_exist.yaml")

    def test_returns_empty_dict_for_empty_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "empty.yaml").write_text("")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        assert load_yaml_config("empty.yaml") == {}


class TestAppConfig:
    """Tests for validated YAML configuration."""

    def test_packaged_config_is_valid(self):
        config = AppConfig()
        assert isinstance(config.application, ApplicationSchema)
        assert isinstance(config.logging, LoggingSchema)
        assert config.application.service.name == "queue"

    def test_unknown_key_is_rejected(self, config_dir):
        (config_dir / "application.yaml").write_text(VALID_APPLICATION + "unexpected: true\n")

        with pytest.raises(ConfigurationError, match="Invalid configuration in application.yaml"):
            AppConfig()

    def test_missing_file_is_configuration_error(self, config_dir):
        (config_dir / "logging.yaml").unlink()

        with pytest.raises(ConfigurationError, match="Configuration file not found"):
            AppConfig()

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()


class TestUrls:
    """Tests for URL and timeout helpers."""

    def test_service_base_url_from_yaml(self, config_dir):
        assert get_service_base_url() == "https://cluster.example.com/service/jobs"
        assert get_cosmos_base_url() == "https://cluster.example.com/cosmos"
        assert get_request_timeout() == 5.0

    def test_service_name_argument_wins(self, config_dir):
        assert get_service_base_url("/other/") == "https://cluster.example.com/service/other"

    def test_environment_overrides_yaml(self, config_dir, monkeypatch):
        monkeypatch.setenv("QUEUE_CLI_CLUSTER_URL", "http://override:9000")
        monkeypatch.setenv("QUEUE_CLI_SERVICE_NAME", "envqueue")
        monkeypatch.setenv("QUEUE_CLI_TIMEOUT", "12.5")
        get_settings.cache_clear()

        assert get_service_base_url() == "http://override:9000/service/envqueue"
        assert get_request_timeout() == 12.5
