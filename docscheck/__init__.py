"""docs-check: documentation quality review for GitHub repositories."""

from .analyzer import DocumentationAnalyzer
from .models import AnalysisResult, AnalysisSummary, DocumentationIssue, RepositoryRef

__version__ = "1.0.0"

__all__ = [
    "AnalysisResult",
    "AnalysisSummary",
    "DocumentationAnalyzer",
    "DocumentationIssue",
    "RepositoryRef",
    "__version__",
]
