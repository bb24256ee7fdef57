"""
Text Formatting — Human-readable check output.
"""

from domnest.report.schema import CheckResult


def format_text(results: list[CheckResult]) -> str:
    """
    One line per diagnostic, then a summary line.

    Example:
        page.json:3:5: error: Invalid DOM elements hierarchy: <td> is not
        a valid child of <table>. [INVALID_DOM_HIERARCHY]
    """
    lines = []
    problems = 0

    for result in results:
        for diag in result.diagnostics:
            problems += 1
            lines.append(
                f"{diag.location}: {diag.level.value}: {diag.message} [{diag.code.value}]"
            )

    files = len(results)
    if problems:
        lines.append(f"\n{problems} problem{'s' if problems != 1 else ''} in {files} file{'s' if files != 1 else ''}")
    else:
        lines.append(f"No problems found in {files} file{'s' if files != 1 else ''}")

    return "\n".join(lines)
