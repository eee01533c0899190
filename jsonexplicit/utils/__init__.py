"""jsonexplicit configuration utilities."""

from .config import ReadConfig, ReadLimits

__all__ = ["ReadConfig", "ReadLimits"]
