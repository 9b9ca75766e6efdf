from .aws import AWSInspector, LOAD_BALANCER_OUTPUTS

__all__ = ["AWSInspector", "LOAD_BALANCER_OUTPUTS"]
