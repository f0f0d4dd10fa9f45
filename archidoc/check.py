"""Detection of drift between generated and committed documentation."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from archidoc.architecture import generate
from archidoc.models import DriftedFile, DriftReport, ModuleDoc

_ARCHITECTURE_NAME = "ARCHITECTURE.md"


def _line_count(text: str) -> int:
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def _read(path: Path) -> str:
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return ""


def check_drift(
    docs: Sequence[ModuleDoc], architecture_file: str | Path, root: str | Path
) -> DriftReport:
    """Compare freshly generated ARCHITECTURE.md content with the file on disk."""
    expected = generate(docs, root)
    report = DriftReport()
    path = Path(architecture_file)

    if not path.exists():
        report.missing_files.append(_ARCHITECTURE_NAME)
        return report

    actual = _read(path)
    if expected != actual:
        report.drifted_files.append(
            DriftedFile(
                path=_ARCHITECTURE_NAME,
                expected_lines=_line_count(expected),
                actual_lines=_line_count(actual),
            )
        )
    return report


def format_drift_report(report: DriftReport) -> str:
    """Render a drift report as human-readable text."""
    if not report.has_drift():
        return "Documentation is up to date.\n"

    lines = ["Documentation drift detected!", ""]

    if report.drifted_files:
        lines.append(f"Changed files ({len(report.drifted_files)}):")
        lines.extend(
            f"  {f.path} (expected {f.expected_lines} lines, got {f.actual_lines})"
            for f in report.drifted_files
        )

    if report.missing_files:
        lines.append(f"Missing files ({len(report.missing_files)}):")
        lines.extend(f"  {name}" for name in report.missing_files)

    if report.extra_files:
        lines.append(f"Extra files ({len(report.extra_files)}):")
        lines.extend(f"  {name}" for name in report.extra_files)

    lines.extend(["", "Run `archidoc` to regenerate."])
    return "\n".join(lines) + "\n"