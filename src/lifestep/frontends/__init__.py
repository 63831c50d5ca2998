"""Frontend interfaces for lifestep."""

from .cli import main

__all__ = ["main"]
