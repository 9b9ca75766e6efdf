"""Configuration package."""

from .manager import ConfigurationManager, DEFAULT_CONFIG
from .schemas import AWSConfig, InspectorConfig, LoggingConfig

__all__ = [
    "AWSConfig",
    "ConfigurationManager",
    "DEFAULT_CONFIG",
    "InspectorConfig",
    "LoggingConfig",
]
