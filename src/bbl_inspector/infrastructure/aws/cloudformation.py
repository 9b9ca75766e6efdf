from typing import Optional

import structlog
from botocore.exceptions import ClientError

from bbl_inspector.domain.stack.value_objects import Stack
from bbl_inspector.infrastructure.aws.aws_client import AWSClientProvider
from bbl_inspector.infrastructure.aws.exceptions import AWSQueryError, StackNotFoundError

logger = structlog.get_logger(__name__)


def _is_stack_not_found(error: ClientError) -> bool:
    # CloudFormation reports a missing stack as a generic ValidationError,
    # phrased "Stack with id X does not exist" or "Stack 'X' does not exist"
    details = error.response.get("Error", {})
    message = details.get("Message", "")
    return (
        details.get("Code") == "ValidationError"
        and message.startswith("Stack ")
        and "does not exist" in message
    )


def _error_code(error: ClientError) -> Optional[str]:
    return error.response.get("Error", {}).get("Code")


class StackManager:
    """Read-only CloudFormation stack queries."""

    def __init__(self, client_provider: AWSClientProvider):
        self.client_provider = client_provider

    def describe(self, stack_name: str) -> Stack:
        """
        Describe a stack by name.

        Raises:
            StackNotFoundError: If the stack does not exist
            AWSQueryError: For any other CloudFormation failure
        """
        logger.debug("Describing stack", stack_name=stack_name)
        try:
            response = self.client_provider.cloudformation_client.describe_stacks(
                StackName=stack_name
            )
        except ClientError as e:
            if _is_stack_not_found(e):
                raise StackNotFoundError(stack_name, details=e.response) from e
            logger.error("Failed to describe stack", stack_name=stack_name, error=str(e))
            raise AWSQueryError(
                "DescribeStacks", str(e), error_code=_error_code(e), details=e.response
            ) from e

        stacks = response.get("Stacks", [])
        if not stacks:
            raise StackNotFoundError(stack_name)
        return Stack.from_describe_response(stacks[0])

    def get_physical_id_for_resource(self, stack_name: str, logical_id: str) -> str:
        """
        Resolve the physical id backing a logical resource of a stack.

        Raises:
            StackNotFoundError: If the stack does not exist
            AWSQueryError: If the resource cannot be described
        """
        logger.debug(
            "Describing stack resource", stack_name=stack_name, logical_id=logical_id
        )
        try:
            response = self.client_provider.cloudformation_client.describe_stack_resource(
                StackName=stack_name, LogicalResourceId=logical_id
            )
        except ClientError as e:
            if _is_stack_not_found(e):
                raise StackNotFoundError(stack_name, details=e.response) from e
            logger.error(
                "Failed to describe stack resource",
                stack_name=stack_name,
                logical_id=logical_id,
                error=str(e),
            )
            raise AWSQueryError(
                "DescribeStackResource", str(e), error_code=_error_code(e), details=e.response
            ) from e

        detail = response.get("StackResourceDetail", {})
        physical_id = detail.get("PhysicalResourceId")
        if not physical_id:
            raise AWSQueryError(
                "DescribeStackResource",
                f"resource {logical_id} in stack {stack_name} has no physical id",
                details=detail,
            )
        return physical_id
