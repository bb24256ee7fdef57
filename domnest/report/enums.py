"""
Report Enums — Severity, status and diagnostic codes.
"""

from enum import Enum


class DiagnosticLevel(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CheckStatus(str, Enum):
    """Outcome of checking one tree."""

    CLEAN = "clean"
    VIOLATIONS = "violations"
    ERROR = "error"


class DiagnosticCode(str, Enum):
    """Machine-readable diagnostic codes."""

    INVALID_DOM_HIERARCHY = "INVALID_DOM_HIERARCHY"
    INPUT_ERROR = "INPUT_ERROR"
