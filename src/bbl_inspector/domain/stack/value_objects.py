# src/bbl_inspector/domain/stack/value_objects.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Stack:
    """Point-in-time snapshot of a CloudFormation stack."""
    name: str
    status: str = ""
    outputs: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_describe_response(cls, stack: Dict[str, Any]) -> Stack:
        """Build from one entry of the DescribeStacks ``Stacks`` list."""
        outputs = {
            output["OutputKey"]: output.get("OutputValue", "")
            for output in stack.get("Outputs", [])
        }
        return cls(
            name=stack["StackName"],
            status=stack.get("StackStatus", ""),
            outputs=outputs,
        )
