"""PlantUML C4 container and component diagrams."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from archidoc.models import C4Level, ModuleDoc
from archidoc.naming import diagram_id, leaf_name, title_case


def _write(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8", newline="")


def _relationship_lines(docs: Iterable[ModuleDoc]) -> str:
    return "".join(
        f'Rel({diagram_id(doc.module_path)}, {diagram_id(rel.target)}, '
        f'"{rel.label}", "{rel.protocol}")\n'
        for doc in docs
        for rel in doc.relationships
    )


def generate_container(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-container.puml from the container-level modules."""
    containers = [d for d in docs if d.c4_level == C4Level.CONTAINER]

    container_defs = "".join(
        f'    Container({diagram_id(d.module_path)}, "{title_case(d.module_path)}", '
        f'"{d.pattern}", "{d.description}")\n'
        for d in containers
    )
    rel_defs = _relationship_lines(containers)

    content = (
        "@startuml c4-container\n"
        "!include <C4/C4_Container>\n\n"
        "title Container Diagram\n\n"
        'System_Boundary(sys, "System") {\n'
        f"{container_defs}}}\n\n"
        f"{rel_defs}\n"
        "@enduml\n"
    )
    _write(Path(output_dir) / "c4-container.puml", content)


def generate_component(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-component.puml with components grouped by parent container."""
    components = [d for d in docs if d.c4_level == C4Level.COMPONENT]

    grouped: dict[str, list[ModuleDoc]] = {}
    for doc in components:
        parent = doc.parent_container if doc.parent_container is not None else "other"
        grouped.setdefault(parent, []).append(doc)

    boundaries: list[str] = []
    for parent in sorted(grouped):
        boundaries.append(
            f'Container_Boundary({diagram_id(parent)}_boundary, "{title_case(parent)}") {{\n'
        )
        boundaries.extend(
            f'    Component({diagram_id(d.module_path)}, "{leaf_name(d.module_path)}", '
            f'"{d.pattern}", "{d.description}")\n'
            for d in grouped[parent]
        )
        boundaries.append("}\n\n")

    content = (
        "@startuml c4-component\n"
        "!include <C4/C4_Component>\n\n"
        "title Component Diagram (GoF Patterns)\n\n"
        f"{''.join(boundaries)}{_relationship_lines(components)}\n"
        "@enduml\n"
    )
    _write(Path(output_dir) / "c4-component.puml", content)