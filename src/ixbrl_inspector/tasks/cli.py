# src/ixbrl_inspector/tasks/cli.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""ixbrl-inspector CLI: fact inspection commands.

Commands:
    describe   Describe one fact of a viewer document.
    aligned    List facts aligned with a fact under a coverage.

Both commands accept a bare viewer-data ``.json`` payload or an inline XBRL
viewer document, and print JSON on stdout. Logs go to stderr.

Environment:
    IXBRL_INSPECTOR_LOG_LEVEL              Root log level (default WARNING).
    IXBRL_INSPECTOR_LABEL_LANGUAGE         Preferred label language.
    IXBRL_INSPECTOR_MESSAGE_LOCALE         Message catalog locale (en).
    IXBRL_INSPECTOR_PERIOD_SPAN_TOLERANCE  Duration equivalence tolerance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import typer

from ixbrl_inspector.adapters.locale.message_catalog import StaticMessageCatalog
from ixbrl_inspector.adapters.report.viewer_data_report import ViewerDataReport
from ixbrl_inspector.application.use_cases.facts.describe_fact import (
    DescribeFactRequest,
    DescribeFactUseCase,
)
from ixbrl_inspector.application.use_cases.facts.find_aligned_facts import (
    FindAlignedFactsRequest,
    FindAlignedFactsUseCase,
)
from ixbrl_inspector.config.settings import InspectorSettings, get_settings
from ixbrl_inspector.domain.exceptions.base import DomainError
from ixbrl_inspector.infrastructure.loaders.viewer_data_loader import load_viewer_document
from ixbrl_inspector.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
    set_report_context,
)

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _settings_or_exit() -> InspectorSettings:
    try:
        return get_settings()
    except RuntimeError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.callback()
def main() -> None:
    """Inspect facts of inline XBRL viewer documents."""
    configure_root_logging(_settings_or_exit().log_level)


def _load_report(path: Path, settings: InspectorSettings) -> ViewerDataReport:
    """Load a viewer document and build its report.

    Args:
        path: Viewer document path.
        settings: Inspector settings (label language, message locale).

    Returns:
        The in-memory report.
    """
    set_report_context(report_id=path.name)
    document = load_viewer_document(path)
    return ViewerDataReport(
        document.data,
        ix_nodes=document.ix_nodes,
        messages=StaticMessageCatalog(settings.message_locale),
        language=settings.label_language,
    )


def parse_allow_option(values: list[str]) -> dict[str, list[str]]:
    """Parse repeated ``KEY=V1,V2`` options into a coverage mapping.

    Args:
        values: Raw option values.

    Returns:
        Mapping of aspect key to admitted values.

    Raises:
        typer.BadParameter: If an entry has no ``=`` or an empty key.
    """
    allowed: dict[str, list[str]] = {}
    for raw in values:
        key, sep, members = raw.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=V1,V2, got {raw!r}", param_hint="--allow")
        allowed.setdefault(key, []).extend(m.strip() for m in members.split(",") if m.strip())
    return allowed


def _fail(exc: DomainError) -> typer.Exit:
    log.error(
        "cli.failed",
        extra={"extra": {"code": exc.code, "error": exc.message, "details": exc.details}},
    )
    typer.echo(f"error: {exc.code}: {exc.message}", err=True)
    return typer.Exit(code=1)


@app.command("describe")
def describe(
    path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Viewer document or JSON."
    ),
    fact_id: str = typer.Argument(..., help="Fact id."),  # noqa: B008
) -> None:
    """Describe one fact: value, accuracy, period, dimensions, links, duplicates."""
    settings = _settings_or_exit()
    try:
        report = _load_report(path, settings)
        dto = DescribeFactUseCase(report).execute(DescribeFactRequest(fact_id=fact_id))
    except DomainError as exc:
        raise _fail(exc) from exc
    typer.echo(dto.model_dump_json(indent=2))


@app.command("aligned")
def aligned(
    path: Path = typer.Argument(  # noqa: B008
        ..., exists=True, dir_okay=False, readable=True, help="Viewer document or JSON."
    ),
    fact_id: str = typer.Argument(..., help="Query fact id."),  # noqa: B008
    any_: list[str] | None = typer.Option(  # noqa: B008
        None, "--any", help="Aspect key that may take any value (repeatable)."
    ),
    allow: list[str] | None = typer.Option(  # noqa: B008
        None, "--allow", help="KEY=V1,V2: aspect key restricted to the listed values (repeatable)."
    ),
    same_duration: bool = typer.Option(  # noqa: B008
        False, "--same-duration", help="Keep only facts with an equivalent period length."
    ),
) -> None:
    """List the facts aligned with a fact under the given coverage.

    Args:
        path: Viewer document or JSON payload.
        fact_id: Query fact id.
        any_: Aspect keys covered by a wildcard.
        allow: Aspect keys restricted to a set of values.
        same_duration: Restrict results to duration-equivalent periods.
    """
    settings = _settings_or_exit()
    coverage: dict[str, Any] = {key: None for key in any_ or []}
    coverage.update(parse_allow_option(allow or []))

    try:
        report = _load_report(path, settings)
        uc = FindAlignedFactsUseCase(report, span_tolerance=settings.period_span_tolerance)
        dto = uc.execute(
            FindAlignedFactsRequest(
                fact_id=fact_id, coverage=coverage, same_duration_only=same_duration
            )
        )
    except DomainError as exc:
        raise _fail(exc) from exc
    typer.echo(dto.model_dump_json(indent=2))


if __name__ == "__main__":  # pragma: no cover
    app()
