import pytest

from archidoc.models import (
    C4Level,
    DriftedFile,
    DriftReport,
    FileEntry,
    GhostEntry,
    HealthStatus,
    ModuleDoc,
    OrphanEntry,
    PatternStatus,
    Relationship,
    ValidationReport,
)


def _full_doc():
    return ModuleDoc(
        module_path="bus",
        content="some content",
        source_file="bus/mod.rs",
        c4_level=C4Level.CONTAINER,
        pattern="Mediator",
        pattern_status=PatternStatus.VERIFIED,
        description="Central messaging backbone",
        parent_container=None,
        relationships=[Relationship("agents", "Routes processed data", "crossbeam")],
        files=[
            FileEntry(
                name="lanes.rs",
                pattern="Observer",
                pattern_status=PatternStatus.PLANNED,
                purpose="Event routing",
                health=HealthStatus.ACTIVE,
            )
        ],
    )


@pytest.mark.parametrize(
    "text, expected",
    [
        ("verified", PatternStatus.VERIFIED),
        ("  VERIFIED ", PatternStatus.VERIFIED),
        ("planned", PatternStatus.PLANNED),
        ("confirmed", PatternStatus.PLANNED),
    ],
)
def test_pattern_status_parse(text, expected):
    assert PatternStatus.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("active", HealthStatus.ACTIVE),
        ("Stable", HealthStatus.STABLE),
        ("planned", HealthStatus.PLANNED),
        ("deprecated", HealthStatus.PLANNED),
    ],
)
def test_health_status_parse(text, expected):
    assert HealthStatus.parse(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("container", C4Level.CONTAINER),
        (" Component ", C4Level.COMPONENT),
        ("system", C4Level.UNKNOWN),
    ],
)
def test_c4_level_parse(text, expected):
    assert C4Level.parse(text) is expected


def test_enum_text_forms():
    assert str(C4Level.parse("CONTAINER")) == "container"
    assert str(C4Level.parse("component")) == "component"
    assert str(C4Level.parse("anything else")) == "unknown"
    assert str(PatternStatus.parse("Verified")) == "verified"
    assert str(HealthStatus.parse("stable")) == "stable"
    assert f"{HealthStatus.parse('active')}" == "active"


def test_parse_round_trips_text_form():
    for level in C4Level:
        assert C4Level.parse(str(level)) is level
    for status in HealthStatus:
        assert HealthStatus.parse(str(status)) is status
    for status in PatternStatus:
        assert PatternStatus.parse(str(status)) is status


def test_module_doc_dict_round_trip():
    doc = _full_doc()
    assert ModuleDoc.from_dict(doc.to_dict()) == doc


def test_module_doc_dict_uses_wire_values():
    data = _full_doc().to_dict()
    assert data["c4_level"] == "container"
    assert data["pattern_status"] == "verified"
    assert data["files"][0]["health"] == "active"
    assert data["parent_container"] is None
    assert list(data) == [
        "module_path",
        "content",
        "source_file",
        "c4_level",
        "pattern",
        "pattern_status",
        "description",
        "parent_container",
        "relationships",
        "files",
    ]


def test_missing_parent_container_reads_as_none():
    data = _full_doc().to_dict()
    del data["parent_container"]
    assert ModuleDoc.from_dict(data).parent_container is None


def test_from_dict_rejects_missing_field():
    data = _full_doc().to_dict()
    del data["module_path"]
    with pytest.raises(ValueError, match="module_path"):
        ModuleDoc.from_dict(data)


def test_from_dict_rejects_bad_enum():
    data = _full_doc().to_dict()
    data["c4_level"] = "system"
    with pytest.raises(ValueError, match="system"):
        ModuleDoc.from_dict(data)


def test_from_dict_rejects_non_mapping():
    with pytest.raises(ValueError):
        Relationship.from_dict(["agents"])


def test_relationship_round_trip():
    rel = Relationship("database", "Persists data", "sqlx")
    assert Relationship.from_dict(rel.to_dict()) == rel


def test_validation_report_is_clean():
    assert ValidationReport().is_clean()
    assert not ValidationReport(ghosts=[GhostEntry("bus", "lanes.rs", "src/bus")]).is_clean()
    assert not ValidationReport(orphans=[OrphanEntry("bus", "extra.rs", "src/bus")]).is_clean()


def test_drift_report_has_drift():
    assert not DriftReport().has_drift()
    assert DriftReport(missing_files=["ARCHITECTURE.md"]).has_drift()
    assert DriftReport(extra_files=["old.md"]).has_drift()
    assert DriftReport(drifted_files=[DriftedFile("ARCHITECTURE.md", 10, 12)]).has_drift()