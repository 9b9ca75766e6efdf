# src/bbl_inspector/infrastructure/aws/exceptions.py
from typing import Any, Optional

from bbl_inspector.infrastructure.exceptions import InfrastructureError


class AWSQueryError(InfrastructureError):
    """Raised when an AWS describe call fails."""
    def __init__(
        self,
        operation: str,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(f"AWS {operation} failed: {message}", details)
        self.operation = operation
        self.error_code = error_code


class ResourceNotFoundError(AWSQueryError):
    """Raised when an AWS resource cannot be found."""
    pass


class StackNotFoundError(ResourceNotFoundError):
    """Raised when a CloudFormation stack does not exist."""
    def __init__(self, stack_name: str, details: Optional[Any] = None):
        super().__init__(
            "DescribeStacks",
            f"stack {stack_name} does not exist",
            error_code="ValidationError",
            details=details,
        )
        self.stack_name = stack_name


class CertificateNotFoundError(ResourceNotFoundError):
    """Raised when an IAM server certificate does not exist."""
    def __init__(self, certificate_name: str, details: Optional[Any] = None):
        super().__init__(
            "GetServerCertificate",
            f"server certificate {certificate_name} does not exist",
            error_code="NoSuchEntity",
            details=details,
        )
        self.certificate_name = certificate_name


class InstanceCardinalityError(AWSQueryError):
    """Raised when an instance id does not match exactly one instance."""
    def __init__(self, instance_id: str, reservations: int, instances: int):
        super().__init__(
            "DescribeInstances",
            f"expected 1 reservation with 1 instance for {instance_id}, "
            f"got {reservations} reservation(s) with {instances} instance(s)",
        )
        self.instance_id = instance_id
        self.reservations = reservations
        self.instances = instances
