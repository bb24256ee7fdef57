"""
Report Schema — Pydantic models for check results.

A CheckResult is the complete, serializable outcome of checking one
syntax tree.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from domnest import __report_version__
from domnest.report.enums import CheckStatus, DiagnosticCode, DiagnosticLevel

REPORT_VERSION = __report_version__


class Diagnostic(BaseModel):
    """A diagnostic message."""

    id: str
    level: DiagnosticLevel
    code: DiagnosticCode
    message: str
    source: Optional[str] = Field(None, description="File the tree was loaded from")
    parent_tag: Optional[str] = None
    child_tag: Optional[str] = None
    line: Optional[int] = Field(None, description="1-based line of the offending node")
    column: Optional[int] = Field(None, description="1-based column of the offending node")

    @property
    def location(self) -> str:
        parts = [self.source or "<tree>"]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)


class CheckResult(BaseModel):
    """The complete output of checking one tree."""

    version: str = Field(default=REPORT_VERSION, description="Report schema version")
    request_id: str = Field(..., description="Unique check ID")
    timestamp: datetime = Field(..., description="When the check ran")
    source: Optional[str] = Field(None, description="Input file, if any")
    ruleset: str = Field(..., description="Content-model ruleset used")
    status: CheckStatus
    elements_checked: int = Field(default=0, ge=0)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @property
    def violations(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.code == DiagnosticCode.INVALID_DOM_HIERARCHY]

    @property
    def ok(self) -> bool:
        return self.status == CheckStatus.CLEAN
