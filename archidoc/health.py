"""Health aggregation over file maturity and pattern confidence."""

from __future__ import annotations

from collections.abc import Sequence

from archidoc.models import (
    C4Level,
    ElementHealth,
    HealthReport,
    HealthStatus,
    ModuleDoc,
    PatternStatus,
)


def aggregate_health(docs: Sequence[ModuleDoc]) -> HealthReport:
    """Count files by maturity and patterns by confidence, overall and per element."""
    report = HealthReport(
        total_elements=len(docs),
        container_count=sum(d.c4_level is C4Level.CONTAINER for d in docs),
        component_count=sum(d.c4_level is C4Level.COMPONENT for d in docs),
    )

    for doc in docs:
        elem = ElementHealth(
            name=doc.module_path,
            c4_level=str(doc.c4_level),
            file_count=len(doc.files),
            pattern=doc.pattern,
            pattern_confidence=str(doc.pattern_status),
        )

        for entry in doc.files:
            if entry.health is HealthStatus.PLANNED:
                report.files_planned += 1
                elem.files_planned += 1
            elif entry.health is HealthStatus.ACTIVE:
                report.files_active += 1
                elem.files_active += 1
            else:
                report.files_stable += 1
                elem.files_stable += 1

        report.total_files += len(doc.files)

        if doc.pattern and doc.pattern != "--":
            report.patterns_total += 1
            if doc.pattern_status is PatternStatus.VERIFIED:
                report.patterns_verified += 1
            else:
                report.patterns_planned += 1

        report.per_element.append(elem)

    return report


def _percent(part: int, total: int) -> float:
    return part / total * 100.0 if total else 0.0


def format_health_report(report: HealthReport) -> str:
    """Render a health report as human-readable text."""
    lines = [
        "Architecture Health Report",
        "==========================",
        f"Elements:    {report.total_elements} total "
        f"({report.container_count} containers, {report.component_count} components)",
        f"Files:       {report.total_files} total",
    ]

    if report.total_files > 0:
        for label, count in (
            ("planned:", report.files_planned),
            ("active:", report.files_active),
            ("stable:", report.files_stable),
        ):
            lines.append(
                f"  {label:<11}{count} ({_percent(count, report.total_files):.1f}%)"
            )

    lines.append(f"Patterns:    {report.patterns_total} assigned")
    if report.patterns_total > 0:
        for label, count in (
            ("planned:", report.patterns_planned),
            ("verified:", report.patterns_verified),
        ):
            lines.append(
                f"  {label:<11}{count} ({_percent(count, report.patterns_total):.1f}%)"
            )

    return "\n".join(lines) + "\n"