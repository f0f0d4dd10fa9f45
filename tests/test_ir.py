import json

import pytest

from archidoc.ir import IRError, deserialize, serialize, validate
from archidoc.models import (
    C4Level,
    FileEntry,
    HealthStatus,
    ModuleDoc,
    PatternStatus,
    Relationship,
)


def _bus():
    return ModuleDoc(
        module_path="bus",
        content="@c4 container\n# Bus",
        source_file="src/bus/mod.rs",
        c4_level=C4Level.CONTAINER,
        pattern="Mediator",
        description="Central messaging backbone",
    )


def _complex():
    bus = _bus()
    bus.relationships = [Relationship("agents", "Routes processed data", "crossbeam")]
    bus.files = [
        FileEntry("lanes.rs", "Observer", PatternStatus.PLANNED, "Event routing", HealthStatus.ACTIVE)
    ]
    calc = ModuleDoc(
        module_path="bus.calc",
        source_file="src/bus/calc/mod.rs",
        c4_level=C4Level.COMPONENT,
        pattern="Strategy",
        description="Indicator calculations",
        parent_container="bus",
        files=[
            FileEntry(
                "indicators.rs",
                "Strategy",
                PatternStatus.PLANNED,
                "Technical indicators",
                HealthStatus.STABLE,
            )
        ],
    )
    agents = ModuleDoc(
        module_path="agents",
        source_file="src/agents/mod.rs",
        c4_level=C4Level.CONTAINER,
        pattern="Observer",
        description="Agent execution framework",
    )
    return [bus, calc, agents]


def _minimal():
    return [
        ModuleDoc(
            module_path="core",
            source_file="src/core/mod.rs",
            c4_level=C4Level.CONTAINER,
            description="Core domain logic",
        )
    ]


@pytest.mark.parametrize("docs", [[_bus()], _complex(), _minimal()])
def test_ir_is_idempotent(docs):
    first = serialize(docs)
    second = serialize(deserialize(first))
    assert first == second


def test_round_trip_preserves_fidelity():
    docs = _complex()
    assert deserialize(serialize(docs)) == docs


def test_serialized_ir_contains_element():
    parsed = json.loads(serialize([_bus()]))
    assert parsed[0]["module_path"] == "bus"
    assert parsed[0]["c4_level"] == "container"


def test_well_formed_ir_validates():
    assert validate(serialize(_complex())) is None


def test_empty_list_is_valid():
    assert deserialize("[]") == []


def test_non_ascii_text_kept_verbatim():
    doc = _bus()
    doc.description = "Gateway — fast"
    assert "Gateway — fast" in serialize([doc])


def _module(**overrides):
    data = {
        "module_path": "bus",
        "content": "some content",
        "source_file": "bus/mod.rs",
        "c4_level": "container",
        "pattern": "Mediator",
        "pattern_status": "planned",
        "description": "Central messaging backbone",
        "parent_container": None,
        "relationships": [],
        "files": [],
    }
    for key, value in overrides.items():
        if value is _DROP:
            del data[key]
        else:
            data[key] = value
    return json.dumps([data])


_DROP = object()

_REJECTED = [
    "this is not json at all",
    "",
    '{"module_path": "bus"}',
    '"just a string"',
    _module(module_path=_DROP),
    _module(c4_level=_DROP),
    _module(relationships=_DROP),
    _module(files=_DROP),
    _module(c4_level="system"),
    _module(pattern_status="confirmed"),
    _module(
        files=[
            {
                "name": "lanes.rs",
                "pattern": "Observer",
                "pattern_status": "planned",
                "purpose": "Event routing",
                "health": "deprecated",
            }
        ]
    ),
    _module(c4_level=1),
    _module(relationships="not an array"),
]


@pytest.mark.parametrize("text", _REJECTED)
def test_validate_rejects(text):
    with pytest.raises(IRError, match="IR validation failed"):
        validate(text)


@pytest.mark.parametrize("text", _REJECTED)
def test_deserialize_rejects(text):
    with pytest.raises(IRError, match="invalid IR"):
        deserialize(text)


def test_baseline_module_is_accepted():
    docs = deserialize(_module())
    assert docs[0].module_path == "bus"
    assert docs[0].c4_level is C4Level.CONTAINER