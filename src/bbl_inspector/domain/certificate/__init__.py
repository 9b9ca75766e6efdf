from .value_objects import Certificate

__all__ = ["Certificate"]
