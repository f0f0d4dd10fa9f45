"""Scaffolding of module annotations for a source directory."""

from __future__ import annotations

import os
from pathlib import Path, PurePath

_ENTRY_FILES = frozenset(
    {"mod.rs", "lib.rs", "main.rs", "index.ts", "index.js", "__init__.py"}
)
_SOURCE_EXTENSIONS = (".rs", ".ts", ".js", ".py")


def suggest_annotation(directory: str | Path) -> str:
    """Return a ready-to-paste annotation block with TODO placeholders."""
    level = infer_c4_level(directory)
    files = scan_source_files(directory)

    lines = [
        f"//! @c4 {level}",
        "//!",
        f"//! # {_module_name(directory)}",
        "//!",
        "//! [TODO: describe this module's responsibility]",
    ]
    if files:
        lines += [
            "//!",
            "//! | File | Pattern | Purpose | Health |",
            "//! |------|---------|---------|--------|",
        ]
        lines += [f"//! | `{name}` | -- | [TODO] | active |" for name in files]

    return "\n".join(lines) + "\n"


def infer_c4_level(directory: str | Path) -> str:
    """Infer the C4 level from the directory's depth below ``src``.

    One level below ``src`` is a container, deeper is a component; without
    a ``src`` ancestor the directory is taken to be a container.
    """
    parts = PurePath(directory).parts
    if "src" not in parts:
        return "container"
    depth = len(parts) - parts.index("src") - 1
    return "container" if depth == 1 else "component"


def scan_source_files(directory: str | Path) -> list[str]:
    """Return sorted names of source files in a directory, without entry files."""
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return []

    names = []
    for entry in entries:
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        if entry.name in _ENTRY_FILES:
            continue
        if entry.name.endswith(_SOURCE_EXTENSIONS):
            names.append(entry.name)
    return sorted(names)


def _module_name(directory: str | Path) -> str:
    name = PurePath(directory).name
    if not name or name == "..":
        name = "Module"
    spaced = name.replace("_", " ")
    return spaced[:1].upper() + spaced[1:]