"""Analysis service adapters."""

from .client import AnalysisClient, ClaudeAnalysisClient
from .messages import ModelMessage, collect_response

__all__ = ["AnalysisClient", "ClaudeAnalysisClient", "ModelMessage", "collect_response"]
