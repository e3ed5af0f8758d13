"""Blueprint exports."""

from . import habits

__all__ = [
    "habits",
]
