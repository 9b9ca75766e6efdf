"""BBL Inspector - read-only AWS inspection for integration tests.

The integration suite of the bootloader provisions a complete environment
through a CloudFormation template and then asserts on what was created.
This package gives those tests one object to ask:

    - actors: the AWSInspector facade used directly by tests
    - infrastructure: boto3 backed query services (CloudFormation, IAM, EC2)
    - domain: value objects returned by the queries
    - config: pydantic configuration loaded from the environment
    - testing: pytest fixtures

Usage:
    >>> from bbl_inspector import AWSInspector, ConfigurationManager
    >>> config = ConfigurationManager().get_config()
    >>> inspector = AWSInspector(config.aws)
    >>> inspector.stack_exists("stack-bbl-env")
    True
"""

from bbl_inspector.actors.aws import AWSInspector, LOAD_BALANCER_OUTPUTS
from bbl_inspector.config.manager import ConfigurationManager
from bbl_inspector.domain.certificate.value_objects import Certificate
from bbl_inspector.domain.stack.value_objects import Stack

__version__ = "0.1.0"

__all__ = [
    "AWSInspector",
    "Certificate",
    "ConfigurationManager",
    "LOAD_BALANCER_OUTPUTS",
    "Stack",
    "__version__",
]
