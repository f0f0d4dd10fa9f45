"""Ghost and orphan detection for module file tables."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path, PurePath

from archidoc.models import GhostEntry, ModuleDoc, OrphanEntry, ValidationReport

_STRUCTURAL_FILES = frozenset({"mod.rs", "lib.rs", "main.rs"})


def _source_dir(source_file: str) -> str | None:
    """Directory holding a source file; "" for a bare name, None for no parent."""
    path = PurePath(source_file)
    if not path.parts or path.parent == path:
        return None
    return str(path.parent) if len(path.parts) > 1 else ""


def _names_in(directory: str) -> list[str]:
    if not directory:
        return []
    try:
        with os.scandir(directory) as entries:
            return sorted(entry.name for entry in entries)
    except OSError:
        return []


def validate_file_tables(docs: Iterable[ModuleDoc]) -> ValidationReport:
    """Compare file catalogs with the files actually on disk.

    Catalog entries whose file is missing are ghosts; ``.rs`` files on disk
    missing from the catalog are orphans. Modules without a catalog are skipped.
    """
    report = ValidationReport()

    for doc in docs:
        if not doc.files:
            continue
        source_dir = _source_dir(doc.source_file)
        if source_dir is None:
            continue

        base = Path(source_dir) if source_dir else Path()
        cataloged = {entry.name for entry in doc.files}

        report.ghosts.extend(
            GhostEntry(element=doc.module_path, filename=entry.name, source_dir=source_dir)
            for entry in doc.files
            if not (base / entry.name).exists()
        )

        report.orphans.extend(
            OrphanEntry(element=doc.module_path, filename=name, source_dir=source_dir)
            for name in _names_in(source_dir)
            if name.endswith(".rs")
            and name not in _STRUCTURAL_FILES
            and name not in cataloged
        )

    return report


def format_validation_report(report: ValidationReport) -> str:
    """Render a validation report as human-readable text."""
    if report.is_clean():
        return "File validation: all clear\n"

    lines: list[str] = []
    if report.ghosts:
        lines.append(f"Ghost entries ({len(report.ghosts)} found):")
        lines.extend(
            f"  {g.element} — '{g.filename}' listed in catalog but not found on disk"
            for g in report.ghosts
        )
    if report.orphans:
        lines.append(f"Orphan files ({len(report.orphans)} found):")
        lines.extend(
            f"  {o.element} — '{o.filename}' exists on disk but not in catalog"
            for o in report.orphans
        )
    return "\n".join(lines) + "\n"