"""
Settings Loader

Load and validate checker settings from YAML files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from domnest.config.schema import CheckerSettings

SETTINGS_FILENAME = "domnest.yaml"


def load_settings(path: Path | str) -> CheckerSettings:
    """
    Load checker settings from a YAML file.

    A relative ``ruleset_path`` is resolved against the settings file's
    directory.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If validation fails
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    settings = CheckerSettings.model_validate(data)

    if settings.ruleset_path is not None and not settings.ruleset_path.is_absolute():
        settings = settings.model_copy(
            update={"ruleset_path": path.parent / settings.ruleset_path}
        )

    return settings


def find_settings(start: Optional[Path] = None) -> Optional[Path]:
    """Return ``domnest.yaml`` in ``start`` (default: cwd) if it exists."""
    candidate = (start or Path.cwd()) / SETTINGS_FILENAME
    return candidate if candidate.exists() else None


def resolve_settings(
    path: Optional[Path | str] = None,
    **overrides: Any,
) -> CheckerSettings:
    """
    Build effective settings: file (explicit or discovered) plus overrides.

    Overrides set to None are ignored, so CLI flags left unset keep the
    file's values.
    """
    if path is None:
        path = find_settings()

    settings = load_settings(path) if path is not None else CheckerSettings()

    update = {k: v for k, v in overrides.items() if v is not None}
    if update:
        # Re-validate so overrides get the same checks as file values
        settings = CheckerSettings.model_validate({**settings.model_dump(), **update})

    return settings
