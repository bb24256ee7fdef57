"""
Report — Serializable check results.
"""

from domnest.report.enums import CheckStatus, DiagnosticCode, DiagnosticLevel
from domnest.report.schema import CheckResult, Diagnostic

__all__ = [
    "CheckResult",
    "CheckStatus",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticLevel",
]
