"""Prompt construction for documentation analysis."""

from .builder import PromptBuilder

__all__ = ["PromptBuilder"]
