"""
Configuration Management.

Loads settings from config/settings/*.yaml and overrides from the environment.
No hardcoded values in code — all configuration comes from these sources.

Settings (YAML):
    application.yaml   - App identity, queue service location, timeouts
    logging.yaml       - Logging configuration

The YAML files ship inside the package. Point QUEUE_CLI_CONFIG_DIR at another
directory to replace them.

Overrides (environment):
    QUEUE_CLI_CLUSTER_URL, QUEUE_CLI_SERVICE_NAME, QUEUE_CLI_TIMEOUT
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from queue_cli.core.config_schema import ApplicationSchema, LoggingSchema
from queue_cli.core.exceptions import ConfigurationError

CONFIG_DIR_ENV = "QUEUE_CLI_CONFIG_DIR"

_PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


def find_config_dir() -> Path:
    """Return the directory holding the YAML settings files."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return _PACKAGE_CONFIG_DIR


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = find_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides for application.yaml. Unset fields keep the YAML value."""

    cluster_url: str | None = None
    service_name: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="QUEUE_CLI_",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    try:
        raw = load_yaml_config(filename)
    except FileNotFoundError as e:
        raise ConfigurationError(str(e)) from e
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


def load_logging_config() -> LoggingSchema:
    """
    Load and validate logging.yaml on its own.

    Logging is configured before any command runs, so it must not depend on
    application.yaml being valid.

    Raises:
        ConfigurationError: If logging.yaml is missing or invalid.
    """
    return _load_validated(LoggingSchema, "logging.yaml")


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = load_logging_config()

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment overrides."""
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_cluster_url() -> str:
    """Cluster URL from the environment, falling back to application.yaml."""
    url = get_settings().cluster_url or get_app_config().application.service.cluster_url
    return url.rstrip("/")


def get_service_name() -> str:
    """Queue service name from the environment, falling back to application.yaml."""
    return get_settings().service_name or get_app_config().application.service.name


def get_request_timeout() -> float:
    """Request timeout in seconds."""
    timeout = get_settings().timeout
    if timeout is not None:
        return timeout
    return float(get_app_config().application.timeouts.request)


def get_service_base_url(service_name: str | None = None) -> str:
    """
    Get the base URL of the queue service's HTTP API.

    Args:
        service_name: Overrides the configured service name (e.g. from --name).

    Returns:
        URL of the form <cluster_url>/service/<service_name>.
    """
    name = (service_name or get_service_name()).strip("/")
    return f"{get_cluster_url()}/service/{name}"


def get_cosmos_base_url() -> str:
    """Get the base URL of the cluster's package manager API."""
    return f"{get_cluster_url()}/cosmos"
