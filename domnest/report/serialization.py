"""
Report Serialization — JSON import/export for check results.
"""

import json
from pathlib import Path
from typing import Union

from domnest.report.schema import CheckResult


def to_json(result: CheckResult, indent: int = 2) -> str:
    """Serialize a CheckResult to JSON string."""
    return result.model_dump_json(indent=indent)


def from_json(json_str: str) -> CheckResult:
    """Deserialize a CheckResult from JSON string."""
    return CheckResult.model_validate_json(json_str)


def results_to_json(results: list[CheckResult], indent: int = 2) -> str:
    """Serialize several results as one JSON array."""
    return json.dumps([r.model_dump(mode="json") for r in results], indent=indent)


def save(result: CheckResult, path: Union[str, Path]) -> None:
    """Save a CheckResult to a JSON file."""
    path = Path(path)
    path.write_text(to_json(result))


def load(path: Union[str, Path]) -> CheckResult:
    """Load a CheckResult from a JSON file."""
    path = Path(path)
    return from_json(path.read_text())
