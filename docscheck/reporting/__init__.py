"""Report rendering for analysis results."""

from .renderer import ReportRenderer, issue_location

__all__ = ["ReportRenderer", "issue_location"]
