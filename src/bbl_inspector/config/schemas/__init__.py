"""Configuration schemas."""

from .aws_schema import AWSConfig
from .inspector_schema import InspectorConfig
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig

__all__ = [
    "AWSConfig",
    "InspectorConfig",
    "LogDestination",
    "LogFileConfig",
    "LoggingConfig",
]
