"""draw.io CSV import files for C4 container and component diagrams."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from archidoc.models import C4Level, ModuleDoc
from archidoc.naming import leaf_name, title_case

_CSV_HEADER = "\n".join(
    (
        "## C4 Diagram",
        "## Import: Arrange > Insert > Advanced > CSV",
        "#",
        '# label: <b>%name%</b><br><font style="font-size:11px;">%description%</font>',
        "# stylename: type",
        '# styles: {"container": "rounded=1;whiteSpace=wrap;fillColor=#438DD5;'
        'fontColor=#ffffff;", \\',
        '#          "component": "rounded=1;whiteSpace=wrap;fillColor=#85BBF0;'
        'fontColor=#000000;"}',
        '# connect: {"from": "refs", "to": "id", "invert": false, "style": '
        '"curved=1;exitX=0.5;exitY=1;entryX=0.5;entryY=0;"}',
        "# width: 200",
        "# height: 100",
        "# padding: 30",
        "# ignore: id,refs,type,pattern",
        "# identity: id",
        "# namespace: c4",
    )
)

_COLUMNS = "id,name,type,pattern,description,refs"


def _write_csv(path: Path, rows: Sequence[str]) -> None:
    content = f"{_CSV_HEADER}\n{_COLUMNS}\n" + "\n".join(rows)
    path.write_text(content, encoding="utf-8", newline="")


def _refs(doc: ModuleDoc) -> list[str]:
    return [rel.target for rel in doc.relationships]


def generate_container_csv(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-container.csv listing every container and its dependencies."""
    rows = [
        f"{d.module_path},{title_case(d.module_path)},container,"
        f"{d.pattern},{d.description},{','.join(_refs(d))}"
        for d in docs
        if d.c4_level == C4Level.CONTAINER
    ]
    _write_csv(Path(output_dir) / "c4-container.csv", rows)


def generate_component_csv(output_dir: str | Path, docs: Sequence[ModuleDoc]) -> None:
    """Write c4-component.csv with container stubs followed by the components."""
    components = [d for d in docs if d.c4_level == C4Level.COMPONENT]
    parents = sorted(
        {
            d.parent_container if d.parent_container is not None else "other"
            for d in components
        }
    )

    rows = [f"{parent},{title_case(parent)},container,,," for parent in parents]

    for doc in components:
        refs = _refs(doc)
        link = ",".join(refs) if refs else (doc.parent_container or "")
        rows.append(
            f"{doc.module_path},{leaf_name(doc.module_path)},component,"
            f"{doc.pattern},{doc.description},{link}"
        )

    _write_csv(Path(output_dir) / "c4-component.csv", rows)