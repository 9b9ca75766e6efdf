from typing import Any, Dict, List

import structlog
from botocore.exceptions import ClientError

from bbl_inspector.infrastructure.aws.aws_client import AWSClientProvider
from bbl_inspector.infrastructure.aws.exceptions import (
    AWSQueryError,
    InstanceCardinalityError,
)

logger = structlog.get_logger(__name__)

KeyPairInfo = Dict[str, Any]

KEY_PAIR_NOT_FOUND = "InvalidKeyPair.NotFound"


class EC2Describer:
    """EC2 instance and key pair queries."""

    def __init__(self, client_provider: AWSClientProvider):
        self.client_provider = client_provider

    def describe_instance(self, instance_id: str) -> Dict[str, Any]:
        """
        Describe the single instance with this id.

        Raises:
            InstanceCardinalityError: Unless exactly one reservation with
                exactly one instance comes back
            AWSQueryError: If the EC2 call fails
        """
        logger.debug("Describing instance", instance_id=instance_id)
        try:
            response = self.client_provider.ec2_client.describe_instances(
                Filters=[{"Name": "instance-id", "Values": [instance_id]}]
            )
        except ClientError as e:
            logger.error("Failed to describe instance", instance_id=instance_id, error=str(e))
            raise AWSQueryError(
                "DescribeInstances",
                str(e),
                error_code=e.response.get("Error", {}).get("Code"),
                details=e.response,
            ) from e

        reservations = response.get("Reservations", [])
        instances = [
            instance
            for reservation in reservations
            for instance in reservation.get("Instances", [])
        ]
        if len(reservations) != 1 or len(instances) != 1:
            logger.error(
                "Unexpected instance count",
                instance_id=instance_id,
                reservations=len(reservations),
                instances=len(instances),
            )
            raise InstanceCardinalityError(instance_id, len(reservations), len(instances))
        return instances[0]

    def get_instance_tags(self, instance_id: str) -> Dict[str, str]:
        """Return the tags of an instance as a key to value mapping."""
        instance = self.describe_instance(instance_id)
        tags: Dict[str, str] = {}
        for tag in instance.get("Tags", []):
            tags[tag.get("Key", "")] = tag.get("Value", "")
        return tags

    def describe_key_pairs(self, key_name: str) -> List[KeyPairInfo]:
        """
        Describe the key pair with exactly this name.

        A name with no key pair yields an empty list.
        """
        logger.debug("Describing key pairs", key_name=key_name)
        try:
            response = self.client_provider.ec2_client.describe_key_pairs(
                KeyNames=[key_name]
            )
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == KEY_PAIR_NOT_FOUND:
                logger.debug("Key pair not found", key_name=key_name)
                return []
            logger.error("Failed to describe key pairs", key_name=key_name, error=str(e))
            raise AWSQueryError(
                "DescribeKeyPairs",
                str(e),
                error_code=e.response.get("Error", {}).get("Code"),
                details=e.response,
            ) from e
        return response.get("KeyPairs", [])
