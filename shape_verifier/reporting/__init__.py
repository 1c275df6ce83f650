"""Report rendering.

Rendering lives outside the matcher so that Report stays a plain data
structure.
"""

from .renderer import ReportRenderer, VerificationResult, log_report, pretty_dump

__all__ = ["ReportRenderer", "VerificationResult", "log_report", "pretty_dump"]
