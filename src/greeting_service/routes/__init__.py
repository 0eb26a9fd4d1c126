from . import greeting

__all__ = ["greeting"]
