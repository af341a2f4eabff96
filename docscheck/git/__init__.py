"""Git helpers for cloning and branch management."""

from .operations import GitOperations

__all__ = ["GitOperations"]
