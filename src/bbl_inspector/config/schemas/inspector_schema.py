"""Top level configuration schema."""
from pydantic import BaseModel, Field

from .aws_schema import AWSConfig
from .logging_schema import LoggingConfig


class InspectorConfig(BaseModel):
    """Inspector configuration."""

    aws: AWSConfig
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
