"""
Engine — Check orchestration.

The engine loads trees, runs the hierarchy checker against the
configured content model, and packages results.

The engine is NOT where nesting rules live.
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from domnest.config.schema import CheckerSettings
from domnest.core.context import CheckContext, CheckRequest
from domnest.core.logging import CheckLogger
from domnest.hierarchy.checker import check_tree, error_message
from domnest.model.engine import ContentModel, get_content_model, load_content_model
from domnest.report.enums import CheckStatus, DiagnosticCode, DiagnosticLevel
from domnest.report.schema import CheckResult
from domnest.tree.host import EstreeHost
from domnest.tree.nodes import SyntaxNode
from domnest.tree.serialization import load_tree


class Engine:
    """
    Check orchestrator.

    Holds one content model and one host, both immutable, so a single
    engine can check many trees concurrently.
    """

    def __init__(self, settings: Optional[CheckerSettings] = None) -> None:
        self.settings = settings or CheckerSettings()
        self._model: Optional[ContentModel] = None
        self.host = EstreeHost(
            pragma=self.settings.pragma,
            create_element=tuple(self.settings.create_element),
            map_methods=tuple(self.settings.map_methods),
        )

    @property
    def model(self) -> ContentModel:
        """Lazy-load the content model; configuration errors raise here."""
        if self._model is None:
            if self.settings.ruleset_path is not None:
                self._model = load_content_model(self.settings.ruleset_path)
            else:
                self._model = get_content_model(self.settings.ruleset)
        return self._model

    def check(self, request: CheckRequest) -> CheckResult:
        """
        Check one tree.

        Input problems (unreadable file, bad JSON, not an ESTree node)
        produce an ERROR result instead of raising.
        """
        model = self.model
        ctx = CheckContext(request=request, ruleset=model.name)
        clog = CheckLogger(request.request_id, source=request.label)
        clog.check_start(model.name)

        try:
            tree = request.tree if request.tree is not None else load_tree(request.source)
        except (OSError, ValueError) as e:
            clog.check_error(e)
            ctx.status = CheckStatus.ERROR
            ctx.add_diagnostic(
                level=DiagnosticLevel.ERROR,
                code=DiagnosticCode.INPUT_ERROR,
                message=f"Could not load syntax tree: {e}",
            )
        else:
            self._check_tree(tree, model, ctx, clog)

        clog.check_complete(
            status=ctx.status.value,
            elements=ctx.elements_checked,
            diagnostics=len(ctx.diagnostics),
        )
        return ctx.to_result()

    def _check_tree(
        self,
        tree: SyntaxNode,
        model: ContentModel,
        ctx: CheckContext,
        clog: CheckLogger,
    ) -> None:
        def report(parent_tag: str, child_tag: str, node: SyntaxNode) -> None:
            clog.violation(parent_tag, child_tag, node.line)
            ctx.add_diagnostic(
                level=self.settings.level,
                code=DiagnosticCode.INVALID_DOM_HIERARCHY,
                message=error_message(parent_tag, child_tag),
                parent_tag=parent_tag,
                child_tag=child_tag,
                line=node.line,
                # ESTree columns are 0-based
                column=node.column + 1 if node.column is not None else None,
            )

        ctx.elements_checked = check_tree(tree, report, model=model, host=self.host)
        if ctx.diagnostics:
            ctx.status = CheckStatus.VIOLATIONS

    def check_many(self, requests: Iterable[CheckRequest], jobs: int = 1) -> list[CheckResult]:
        """
        Check several trees, optionally in parallel.

        Results come back in request order.
        """
        requests = list(requests)
        # Load the model up front so workers only ever read it
        self.model

        if jobs <= 1 or len(requests) <= 1:
            return [self.check(r) for r in requests]

        with ThreadPoolExecutor(max_workers=jobs) as pool:
            return list(pool.map(self.check, requests))


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance (default settings)."""
    global _engine
    if _engine is None:
        _engine = Engine()
    return _engine


def check_file(path: Union[str, Path], settings: Optional[CheckerSettings] = None) -> CheckResult:
    """
    Convenience function for checking a single ESTree JSON file.
    """
    engine = Engine(settings) if settings is not None else get_engine()
    return engine.check(CheckRequest(source=Path(path)))
