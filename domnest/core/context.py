"""
CheckContext — Mutable state for one tree check.

The request says what to check; the context accumulates diagnostics
while checking and is turned into an immutable CheckResult at the end.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional
from uuid import uuid4

from domnest.report.enums import CheckStatus, DiagnosticCode, DiagnosticLevel
from domnest.report.schema import CheckResult, Diagnostic
from domnest.tree.nodes import SyntaxNode


@dataclass
class CheckRequest:
    """
    Input to the checker: either a file to load or an already built tree.
    """

    source: Optional[Path] = None
    tree: Optional[SyntaxNode] = None
    request_id: Optional[str] = None

    def __post_init__(self) -> None:
        if self.source is None and self.tree is None:
            raise ValueError("CheckRequest needs a source file or a tree")
        if self.source is not None:
            self.source = Path(self.source)
        if self.request_id is None:
            self.request_id = str(uuid4())

    @property
    def label(self) -> Optional[str]:
        return str(self.source) if self.source is not None else None


@dataclass
class CheckContext:
    """Accumulates the outcome of one check."""

    request: CheckRequest
    ruleset: str
    elements_checked: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    status: CheckStatus = CheckStatus.CLEAN
    start_time: datetime = field(default_factory=datetime.now)

    def add_diagnostic(
        self,
        level: DiagnosticLevel,
        code: DiagnosticCode,
        message: str,
        **details,
    ) -> Diagnostic:
        """Record a diagnostic and return it."""
        diag = Diagnostic(
            id=f"diag_{len(self.diagnostics) + 1:04d}",
            level=level,
            code=code,
            message=message,
            source=self.request.label,
            **details,
        )
        self.diagnostics.append(diag)
        return diag

    def to_result(self) -> CheckResult:
        return CheckResult(
            request_id=self.request.request_id,
            timestamp=self.start_time,
            source=self.request.label,
            ruleset=self.ruleset,
            status=self.status,
            elements_checked=self.elements_checked,
            diagnostics=list(self.diagnostics),
        )
