"""AWS connection configuration schema."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AWSConfig(BaseModel):
    """Credentials and endpoint used to build the boto3 clients."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    access_key_id: str = Field(..., min_length=1, description="AWS access key id")
    secret_access_key: str = Field(
        ..., min_length=1, repr=False, description="AWS secret access key"
    )
    region: str = Field("us-east-1", min_length=1, description="AWS region")
    endpoint_url: Optional[str] = Field(
        None, description="Override endpoint for AWS-compatible services"
    )
    connect_timeout_ms: Optional[int] = Field(
        None, gt=0, description="Connection timeout in milliseconds"
    )

    @field_validator("access_key_id", "secret_access_key", "region")
    @classmethod
    def check_resolved(cls, value: str) -> str:
        """Reject environment placeholders that were never expanded."""
        if value.startswith("$"):
            raise ValueError(f"unresolved environment variable {value}")
        return value

    @field_validator("endpoint_url", mode="before")
    @classmethod
    def empty_endpoint_is_none(cls, value):
        if value == "":
            return None
        return value
