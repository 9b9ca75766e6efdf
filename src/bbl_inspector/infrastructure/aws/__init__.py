"""boto3 backed query services."""

from .aws_client import AWSClientProvider
from .cloudformation import StackManager
from .ec2 import EC2Describer
from .iam import CertificateDescriber

__all__ = [
    "AWSClientProvider",
    "CertificateDescriber",
    "EC2Describer",
    "StackManager",
]
