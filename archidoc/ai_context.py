"""Token-optimized architecture context for AI assistants.

The output is a compact tree: narrative prose, one line per module and a
flat relationship list. It has no diagrams, no ASCII art and no tables.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

from archidoc.models import ModuleDoc

_LIB = "_lib"


def generate(docs: Sequence[ModuleDoc]) -> str:
    """Return the AI context document for the given module docs."""
    parts = ["# Architecture (AI Context)\n\n"]

    narrative = _narrative(docs)
    if narrative:
        parts.append(narrative + "\n")

    parts.append(_module_tree(docs))

    relationships = _relationships(docs)
    if relationships:
        parts.append("\n" + relationships)

    return "".join(parts)


def _text_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _is_header(line: str) -> bool:
    return line.strip().startswith("#")


def _has_content(following: Sequence[str]) -> bool:
    section = takewhile(lambda line: not _is_header(line), following)
    return any(line.strip() for line in section)


def _narrative(docs: Sequence[ModuleDoc]) -> str:
    """Prose from the _lib module, without code blocks, tables or markers."""
    lib = next((d for d in docs if d.module_path == _LIB), None)
    if lib is None:
        return ""

    kept: list[str] = []
    in_code_block = False
    in_table = False

    for line in _text_lines(lib.content):
        trimmed = line.strip()

        if trimmed.startswith("```"):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue
        if trimmed.startswith("@c4 ") or trimmed.startswith("GoF:"):
            continue
        if trimmed.startswith(("| File", "| file")):
            in_table = True
            continue
        if in_table:
            if trimmed.startswith("|"):
                continue
            in_table = False

        kept.append(line)

    # Headers with nothing beneath them before the next header are dropped.
    filtered = [
        line
        for index, line in enumerate(kept)
        if not _is_header(line) or _has_content(kept[index + 1 :])
    ]

    text = "\n".join(filtered).strip()
    while "\n\n\n" in text:
        text = text.replace("\n\n\n", "\n\n")

    return f"{text}\n" if text else ""


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix) :] if prefix and path.startswith(prefix) else path


def _common_prefix(modules: Sequence[ModuleDoc]) -> str:
    """Dot-terminated prefix shared by all module paths, or an empty string."""
    if len(modules) < 2:
        return ""

    first = modules[0].module_path.split(".")
    length = len(first)

    for module in modules[1:]:
        parts = module.module_path.split(".")
        shared = 0
        for a, b in zip(first, parts):
            if a != b:
                break
            shared += 1
        length = min(length, shared)

    # Every module keeps at least one segment of its own.
    min_segments = min(m.module_path.count(".") + 1 for m in modules)
    length = min(length, min_segments - 1)

    if length == 0:
        return ""
    return ".".join(first[:length]) + "."


def _module_tree(docs: Sequence[ModuleDoc]) -> str:
    modules = sorted(
        (d for d in docs if d.module_path != _LIB), key=lambda d: d.module_path
    )
    if not modules:
        return ""

    prefix = _common_prefix(modules)
    short_paths = {_strip_prefix(d.module_path, prefix) for d in modules}

    lines: list[str] = []
    for doc in modules:
        short = _strip_prefix(doc.module_path, prefix)
        parts = short.split(".")
        name = parts[-1]
        depth = sum(
            ".".join(parts[:i]) in short_paths for i in range(1, len(parts))
        )

        line = "  " * depth + name + "/"
        if doc.pattern != "--":
            line += " " + doc.pattern
        if doc.description:
            line += " — " + doc.description
        lines.append(line + "\n")

    return "".join(lines)


def _relationships(docs: Sequence[ModuleDoc]) -> str:
    modules = [d for d in docs if d.module_path != _LIB]
    prefix = _common_prefix(modules)

    return "".join(
        f"{_strip_prefix(doc.module_path, prefix)} -> "
        f'{_strip_prefix(rel.target, prefix)}: "{rel.label}" ({rel.protocol})\n'
        for doc in modules
        for rel in doc.relationships
    )