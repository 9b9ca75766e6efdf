from .value_objects import Stack

__all__ = ["Stack"]
