"""
Settings Schema

Pydantic model for checker configuration, usually read from a
``domnest.yaml`` file next to the trees being checked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domnest.report.enums import DiagnosticLevel


class CheckerSettings(BaseModel):
    """Checker configuration."""

    model_config = ConfigDict(extra="forbid")

    ruleset: str = Field(default="html", description="Bundled ruleset name")
    ruleset_path: Optional[Path] = Field(
        None,
        description="Custom ruleset YAML file; takes precedence over ruleset",
    )
    pragma: str = Field(default="React", description="Object owning createElement")
    create_element: list[str] = Field(
        default_factory=lambda: ["createElement"],
        description="Function names that create elements",
    )
    map_methods: list[str] = Field(
        default_factory=lambda: ["map"],
        description="Collection methods whose callbacks produce siblings",
    )
    level: DiagnosticLevel = Field(
        default=DiagnosticLevel.ERROR,
        description="Severity of hierarchy diagnostics",
    )

    @field_validator("create_element", "map_methods")
    @classmethod
    def _not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("must name at least one function")
        return value
