"""Mermaid C4 container and component diagrams."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from archidoc.models import C4Level, ModuleDoc
from archidoc.naming import diagram_id, leaf_name, title_case

_LAYOUT = '    UpdateLayoutConfig($c4ShapeInRow="3", $c4BoundaryInRow="1")'


def _relationship_lines(docs: Iterable[ModuleDoc]) -> str:
    return "".join(
        f'    Rel({diagram_id(doc.module_path)}, {diagram_id(rel.target)}, '
        f'"{rel.label}", "{rel.protocol}")\n'
        for doc in docs
        for rel in doc.relationships
    )


def _write(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8", newline="")


def container_diagram(docs: Sequence[ModuleDoc]) -> str:
    """Return the C4 container diagram as a fenced Mermaid block."""
    containers = [d for d in docs if d.c4_level == C4Level.CONTAINER]

    container_defs = "".join(
        f'        Container({diagram_id(d.module_path)}, "{title_case(d.module_path)}", '
        f'"{d.pattern}", "{d.description}")\n'
        for d in containers
    )
    rel_defs = _relationship_lines(containers)

    return (
        "```mermaid\nC4Container\n    title Container Diagram\n\n"
        '    System_Boundary(sys, "System") {\n'
        f"{container_defs}    }}\n\n"
        f"{rel_defs}\n"
        f"{_LAYOUT}\n```"
    )


def generate_container(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-container.md with the container diagram and a container table."""
    containers = [d for d in docs if d.c4_level == C4Level.CONTAINER]
    rows = "\n".join(
        f"| {d.module_path} | {d.pattern} | {d.description} |" for d in containers
    )
    content = (
        "# C4 Container Diagram\n\n> Auto-generated by archidoc\n\n"
        f"{container_diagram(docs)}\n\n"
        "## Containers\n\n"
        "| Container | Pattern | Description |\n"
        "|-----------|---------|-------------|\n"
        f"{rows}\n"
    )
    _write(Path(output_dir) / "c4-container.md", content)


def _emit_node(
    doc: ModuleDoc, children: dict[str, list[ModuleDoc]], depth: int
) -> str:
    indent = "    " * depth
    ident = diagram_id(doc.module_path)
    name = leaf_name(doc.module_path)
    component = f'Component({ident}, "{name}", "{doc.pattern}", "{doc.description}")\n'

    kids = children.get(doc.module_path)
    if not kids:
        return indent + component

    parts = [
        f'{indent}Container_Boundary({ident}_boundary, "{name}") {{\n',
        f"{indent}    {component}",
    ]
    parts.extend(_emit_node(kid, children, depth + 1) for kid in kids)
    parts.append(f"{indent}}}\n")
    return "".join(parts)


def _owning_container(comp: ModuleDoc, containers: Sequence[ModuleDoc]) -> str:
    owners = [
        c.module_path
        for c in containers
        if comp.module_path.startswith(f"{c.module_path}.")
    ]
    if owners:
        return max(owners, key=len)
    if comp.parent_container is not None:
        return comp.parent_container
    return "other"


def component_diagram(docs: Sequence[ModuleDoc]) -> str:
    """Return the C4 component diagram as a fenced Mermaid block.

    Components are grouped under their nearest container and nested by
    module path; parent-to-child containment arrows are added.
    """
    components = [d for d in docs if d.c4_level == C4Level.COMPONENT]
    containers = [d for d in docs if d.c4_level == C4Level.CONTAINER]

    by_container: dict[str, list[ModuleDoc]] = {}
    for comp in components:
        by_container.setdefault(_owning_container(comp, containers), []).append(comp)

    boundaries: list[str] = []
    containment: list[tuple[str, str]] = []

    for container_path in sorted(by_container):
        comps = by_container[container_path]
        paths = [c.module_path for c in comps]
        children: dict[str, list[ModuleDoc]] = {}
        has_parent: set[str] = set()

        for comp in comps:
            candidates = [
                p
                for p in paths
                if p != comp.module_path and comp.module_path.startswith(f"{p}.")
            ]
            if candidates:
                parent = max(candidates, key=len)
                has_parent.add(comp.module_path)
                children.setdefault(parent, []).append(comp)
                containment.append((parent, comp.module_path))

        roots = [c for c in comps if c.module_path not in has_parent]

        boundaries.append(
            f"    Container_Boundary({diagram_id(container_path)}_boundary, "
            f'"{title_case(container_path)}") {{\n'
        )
        boundaries.extend(_emit_node(root, children, 2) for root in roots)
        boundaries.append("    }\n\n")

    rel_defs = "".join(
        f'    Rel({diagram_id(src)}, {diagram_id(dst)}, "contains")\n'
        for src, dst in containment
    )
    rel_defs += _relationship_lines(components)

    return (
        "```mermaid\nC4Component\n    title Component Diagram (GoF Patterns)\n\n"
        f"{''.join(boundaries)}{rel_defs}```"
    )


def generate_component(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-component.md with the component diagram."""
    content = (
        "# C4 Component Diagram\n\n> Auto-generated by archidoc\n\n"
        f"{component_diagram(docs)}\n"
    )
    _write(Path(output_dir) / "c4-component.md", content)