"""
AWS actor for integration tests.

``AWSInspector`` answers the questions the integration suite asks about a
provisioned environment. Only the two absence cases a test may probe for
(missing stack, missing certificate) are turned into values; every other
failure is raised so the calling test stops.
"""
from typing import Dict, List, Optional

import structlog

from bbl_inspector.config.schemas import AWSConfig
from bbl_inspector.domain.certificate.value_objects import Certificate
from bbl_inspector.infrastructure.aws.aws_client import AWSClientProvider
from bbl_inspector.infrastructure.aws.cloudformation import StackManager
from bbl_inspector.infrastructure.aws.ec2 import EC2Describer, KeyPairInfo
from bbl_inspector.infrastructure.aws.iam import CertificateDescriber
from bbl_inspector.infrastructure.aws.exceptions import (
    CertificateNotFoundError,
    StackNotFoundError,
)
from bbl_inspector.infrastructure.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

LOAD_BALANCER_OUTPUTS = (
    "CFRouterLoadBalancer",
    "CFSSHProxyLoadBalancer",
    "ConcourseLoadBalancer",
    "ConcourseLoadBalancerURL",
)


class AWSInspector:
    """Read-only facade over the CloudFormation, IAM and EC2 queries."""

    def __init__(
        self,
        config: Optional[AWSConfig] = None,
        client_provider: Optional[AWSClientProvider] = None,
    ):
        """
        Args:
            config: AWS credentials and region
            client_provider: Already configured provider

        Raises:
            ConfigurationError: Unless exactly one of the two is given
        """
        if config is not None and client_provider is not None:
            raise ConfigurationError(
                "AWSInspector takes an AWSConfig or a client provider, not both"
            )
        if client_provider is None:
            if config is None:
                raise ConfigurationError("AWSInspector needs an AWSConfig or a client provider")
            client_provider = AWSClientProvider()
            client_provider.configure(config)

        self.client_provider = client_provider
        self.stack_manager = StackManager(client_provider)
        self.certificate_describer = CertificateDescriber(client_provider)
        self.ec2_describer = EC2Describer(client_provider)

    def stack_exists(self, stack_name: str) -> bool:
        try:
            self.stack_manager.describe(stack_name)
        except StackNotFoundError:
            logger.debug("Stack not found", stack_name=stack_name)
            return False
        return True

    def get_physical_id(self, stack_name: str, logical_id: str) -> str:
        return self.stack_manager.get_physical_id_for_resource(stack_name, logical_id)

    def load_balancers(self, stack_name: str) -> Dict[str, str]:
        """
        Return the load balancer outputs the stack actually provisioned.

        Only LOAD_BALANCER_OUTPUTS are considered and outputs with an empty
        value are left out of the result.
        """
        stack = self.stack_manager.describe(stack_name)
        return {
            name: stack.outputs[name]
            for name in LOAD_BALANCER_OUTPUTS
            if stack.outputs.get(name)
        }

    def describe_certificate(self, certificate_name: str) -> Certificate:
        """Return the certificate, or an empty ``Certificate()`` if it does not exist."""
        try:
            return self.certificate_describer.describe(certificate_name)
        except CertificateNotFoundError:
            logger.debug("Certificate not found", certificate_name=certificate_name)
            return Certificate()

    def get_ec2_instance_tags(self, instance_id: str) -> Dict[str, str]:
        return self.ec2_describer.get_instance_tags(instance_id)

    def describe_key_pairs(self, key_name: str) -> List[KeyPairInfo]:
        return self.ec2_describer.describe_key_pairs(key_name)
