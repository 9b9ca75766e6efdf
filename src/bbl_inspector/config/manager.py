# src/bbl_inspector/config/manager.py
import copy
import json
import os
from typing import Any, Dict, Optional

import structlog
from pydantic import ValidationError

from bbl_inspector.config.schemas import InspectorConfig
from bbl_inspector.config.utils.env_expansion import expand_env_vars
from bbl_inspector.infrastructure.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

CONFIG_FILE_ENV = "BBL_INSPECTOR_CONFIG"

DEFAULT_CONFIG: Dict[str, Any] = {
    "aws": {
        "access_key_id": "${BBL_AWS_ACCESS_KEY_ID}",
        "secret_access_key": "${BBL_AWS_SECRET_ACCESS_KEY}",
        "region": "${BBL_AWS_REGION:us-east-1}",
        "endpoint_url": "${BBL_AWS_ENDPOINT_URL:}",
    },
    "logging": {
        "level": "${LOG_LEVEL:INFO}",
        "destination": "${LOG_DESTINATION:stdout}",
        "file": {
            "path": "${LOG_FILE:logs/bbl-inspector.log}",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },
}


class ConfigurationManager:
    """
    Builds the inspector configuration.

    Order of precedence, lowest first:
    - DEFAULT_CONFIG
    - JSON file given as argument or through BBL_INSPECTOR_CONFIG
    - environment variables referenced by placeholders
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Args:
            config_file: Optional path to a JSON configuration file

        Raises:
            ConfigurationError: If the file cannot be read or validation fails
        """
        self._raw = copy.deepcopy(DEFAULT_CONFIG)

        config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        if config_file:
            self._load_config_file(config_file)

        self._config = self._validate(expand_env_vars(self._raw))

    def _load_config_file(self, config_path: str) -> None:
        try:
            with open(config_path, "r") as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {config_path}: {str(e)}"
            ) from e
        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )
        _deep_update(self._raw, user_config)
        logger.debug("Loaded configuration file", path=config_path)

    @staticmethod
    def _validate(raw: Dict[str, Any]) -> InspectorConfig:
        try:
            return InspectorConfig.model_validate(raw)
        except ValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", details=fields
            ) from e

    def get_config(self) -> InspectorConfig:
        """Return the validated configuration."""
        return self._config


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value
