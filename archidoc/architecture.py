"""Generation of the single ARCHITECTURE.md document."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path, PurePath

from archidoc.mermaid import component_diagram, container_diagram
from archidoc.models import C4Level, ModuleDoc

_FOOTER = "---\n\n*Auto-generated by archidoc. Do not edit manually.*\n"


def generate(docs: Sequence[ModuleDoc], root: str | Path) -> str:
    """Return the full ARCHITECTURE.md content.

    Source links in the component index are made relative to ``root``.
    """
    return "".join(
        (
            "# Architecture Context\n\n",
            "> Auto-generated by archidoc. Do not edit manually.\n\n",
            _section_narrative(docs),
            _section_container_diagram(docs),
            _section_component_diagram(docs),
            _section_component_index(docs, Path(root)),
            _section_relationship_map(docs),
            _FOOTER,
        )
    )


def _text_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _section_narrative(docs: Sequence[ModuleDoc]) -> str:
    lib = next((d for d in docs if d.module_path == "_lib"), None)
    if lib is None:
        return ""

    kept: list[str] = []
    in_table = False
    for line in _text_lines(lib.content):
        trimmed = line.strip()
        if trimmed.startswith("@c4 ") or trimmed.startswith("GoF:"):
            continue
        if trimmed.startswith("| File") or trimmed.startswith("| file"):
            in_table = True
            continue
        if in_table:
            if trimmed.startswith("|"):
                continue
            in_table = False
        kept.append(line)

    narrative = "\n".join(kept).strip()
    return f"{narrative}\n\n" if narrative else ""


def _section_container_diagram(docs: Sequence[ModuleDoc]) -> str:
    if not any(d.c4_level == C4Level.CONTAINER for d in docs):
        return ""
    return f"## System Diagram\n\n{container_diagram(docs)}\n\n"


def _section_component_diagram(docs: Sequence[ModuleDoc]) -> str:
    if not any(d.c4_level == C4Level.COMPONENT for d in docs):
        return ""
    return f"## Component Diagram\n\n{component_diagram(docs)}\n\n"


def _relative_path(path: PurePath, base: PurePath) -> PurePath | None:
    """Express ``path`` relative to ``base``; None when that is impossible."""
    if path.is_absolute() != base.is_absolute():
        return path if path.is_absolute() else None

    left = list(path.parts)
    right = list(base.parts)
    comps: list[str] = []
    i = j = 0
    while True:
        a = left[i] if i < len(left) else None
        b = right[j] if j < len(right) else None
        if a is None and b is None:
            break
        if b is None:
            comps.extend(left[i:])
            break
        if a is None:
            comps.append("..")
            j += 1
            continue
        if not comps and a == b:
            i += 1
            j += 1
        elif b == ".":
            comps.append(a)
            i += 1
            j += 1
        elif b == "..":
            return None
        else:
            comps.append("..")
            comps.extend(".." for _ in right[j + 1 :])
            comps.extend(left[i:])
            break
    return PurePath(*comps) if comps else PurePath()


def _link(source_file: str, root: Path) -> str:
    source = PurePath(source_file)
    rel = _relative_path(source, PurePath(root))
    if rel is None:
        rel = source
    text = "" if rel == PurePath() and source_file != "." else str(rel)
    return text.replace("\\", "/")


def _section_component_index(docs: Sequence[ModuleDoc], root: Path) -> str:
    modules = sorted(
        (d for d in docs if d.module_path != "_lib"), key=lambda d: d.module_path
    )
    if not modules:
        return ""

    rows = [
        "## Component Index\n\n",
        "| Module | Level | Pattern | Description |\n",
        "|--------|-------|---------|-------------|\n",
    ]
    rows.extend(
        f"| [{d.module_path}]({_link(d.source_file, root)}) | {d.c4_level.value} "
        f"| {d.pattern} | {d.description} |\n"
        for d in modules
    )
    rows.append("\n")
    return "".join(rows)


def _section_relationship_map(docs: Sequence[ModuleDoc]) -> str:
    entries = [
        f'- {doc.module_path} -> {rel.target}: "{rel.label}" ({rel.protocol})\n'
        for doc in docs
        for rel in doc.relationships
    ]
    if not entries:
        return ""
    return "## Relationship Map\n\n" + "".join(entries) + "\n"