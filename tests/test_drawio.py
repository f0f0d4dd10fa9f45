from archidoc.drawio import generate_component_csv, generate_container_csv
from archidoc.models import C4Level, ModuleDoc, Relationship

COLUMNS = "id,name,type,pattern,description,refs"


def container(path, pattern="--", desc="", targets=()):
    return ModuleDoc(
        module_path=path,
        c4_level=C4Level.CONTAINER,
        pattern=pattern,
        description=desc,
        relationships=[Relationship(t, "uses", "call") for t in targets],
    )


def component(path, parent=None, pattern="--", desc="", targets=()):
    return ModuleDoc(
        module_path=path,
        c4_level=C4Level.COMPONENT,
        pattern=pattern,
        description=desc,
        parent_container=parent,
        relationships=[Relationship(t, "uses", "call") for t in targets],
    )


def data_rows(path):
    lines = path.read_text(encoding="utf-8").split("\n")
    return lines[lines.index(COLUMNS) + 1 :]


def test_container_csv_has_import_header(tmp_path):
    generate_container_csv(tmp_path, [container("api")])
    text = (tmp_path / "c4-container.csv").read_text(encoding="utf-8")
    assert text.startswith("## C4 Diagram\n## Import: Arrange > Insert > Advanced > CSV\n")
    assert "# namespace: c4\n" + COLUMNS + "\n" in text
    assert not text.endswith("\n")


def test_container_row_lists_refs(tmp_path):
    docs = [
        container("api", "Facade", "REST gateway", targets=["db"]),
        container("db", "Repository", "Store"),
    ]
    generate_container_csv(tmp_path, docs)
    rows = data_rows(tmp_path / "c4-container.csv")
    assert rows[0] == "api,Api,container,Facade,REST gateway,db"
    assert rows[1].endswith(",")
    assert rows[1].startswith("db,")


def test_container_csv_skips_components(tmp_path):
    docs = [container("bus"), component("bus.calc", "bus"), container("api")]
    generate_container_csv(tmp_path, docs)
    rows = data_rows(tmp_path / "c4-container.csv")
    assert [r.split(",")[0] for r in rows] == ["bus", "api"]


def test_container_name_title_cases_last_segment(tmp_path):
    generate_container_csv(tmp_path, [container("core.agents_internal")])
    rows = data_rows(tmp_path / "c4-container.csv")
    assert rows[0].split(",")[1] == "Agents Internal"


def test_multiple_refs_joined_by_comma(tmp_path):
    generate_container_csv(tmp_path, [container("bus", targets=["a", "b"])])
    rows = data_rows(tmp_path / "c4-container.csv")
    assert rows[0].split(",")[-2:] == ["a", "b"]


def test_component_csv_has_parent_stub_first(tmp_path):
    docs = [component("bus.calc", "bus", "Strategy", "Calc")]
    generate_component_csv(tmp_path, docs)
    rows = data_rows(tmp_path / "c4-component.csv")
    assert rows[0] == "bus,Bus,container,,,"
    assert rows[1].split(",") == ["bus.calc", "calc", "component", "Strategy", "Calc", "bus"]


def test_component_refs_replace_parent(tmp_path):
    docs = [component("bus.calc", "bus", targets=["bus.lanes", "bus.store"])]
    generate_component_csv(tmp_path, docs)
    rows = data_rows(tmp_path / "c4-component.csv")
    assert rows[1].split(",")[-2:] == ["bus.lanes", "bus.store"]
    assert len(rows) == 2


def test_component_without_parent_grouped_under_other(tmp_path):
    generate_component_csv(tmp_path, [component("loose")])
    rows = data_rows(tmp_path / "c4-component.csv")
    assert rows[0].startswith("other,")
    assert rows[1].split(",")[0] == "loose"
    assert rows[1].split(",")[-1] == ""


def test_component_stubs_sorted_and_unique(tmp_path):
    docs = [
        component("zeta.a", "zeta"),
        component("alpha.b", "alpha"),
        component("zeta.c", "zeta"),
        container("zeta"),
    ]
    generate_component_csv(tmp_path, docs)
    rows = data_rows(tmp_path / "c4-component.csv")
    stubs = [r.split(",")[0] for r in rows if r.split(",")[2] == "container"]
    assert stubs == ["alpha", "zeta"]
    comps = [r.split(",")[0] for r in rows if r.split(",")[2] == "component"]
    assert comps == ["zeta.a", "alpha.b", "zeta.c"]