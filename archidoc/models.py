"""Core data model: module documentation units, annotation enums and reports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class _LowercaseEnum(str, Enum):
    """String enum whose text form is its lowercase wire value."""

    def __str__(self) -> str:
        return self.value


class PatternStatus(_LowercaseEnum):
    """Two-tier confidence for GoF pattern assignments."""

    PLANNED = "planned"
    VERIFIED = "verified"

    @classmethod
    def parse(cls, s: str) -> PatternStatus:
        """Lenient parse; anything but "verified" means planned."""
        return cls.VERIFIED if s.strip().lower() == "verified" else cls.PLANNED


class HealthStatus(_LowercaseEnum):
    """Implementation maturity of a file: planned -> active -> stable."""

    PLANNED = "planned"
    ACTIVE = "active"
    STABLE = "stable"

    @classmethod
    def parse(cls, s: str) -> HealthStatus:
        """Lenient parse; unknown text means planned."""
        text = s.strip().lower()
        if text == "active":
            return cls.ACTIVE
        if text == "stable":
            return cls.STABLE
        return cls.PLANNED


class C4Level(_LowercaseEnum):
    """C4 architecture level of a module."""

    CONTAINER = "container"
    COMPONENT = "component"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, s: str) -> C4Level:
        """Lenient parse; unknown text means UNKNOWN."""
        text = s.strip().lower()
        if text == "container":
            return cls.CONTAINER
        if text == "component":
            return cls.COMPONENT
        return cls.UNKNOWN


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"invalid type: expected {what} object, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, kind):
        raise ValueError(
            f"invalid type for `{key}`: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _enum_field(data: Mapping[str, Any], key: str, enum_cls: type[Enum]) -> Any:
    value = _field(data, key, str)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(f"`{member.value}`" for member in enum_cls)
        raise ValueError(
            f"unknown variant `{value}` for `{key}`, expected one of {allowed}"
        ) from None


@dataclass
class Relationship:
    """A runtime dependency between modules."""

    target: str
    label: str
    protocol: str

    def to_dict(self) -> dict[str, Any]:
        return {"target": self.target, "label": self.label, "protocol": self.protocol}

    @classmethod
    def from_dict(cls, data: Any) -> Relationship:
        data = _require_mapping(data, "Relationship")
        return cls(
            target=_field(data, "target", str),
            label=_field(data, "label", str),
            protocol=_field(data, "protocol", str),
        )


@dataclass
class FileEntry:
    """A file entry from a module's file table."""

    name: str
    pattern: str = "--"
    pattern_status: PatternStatus = PatternStatus.PLANNED
    purpose: str = ""
    health: HealthStatus = HealthStatus.PLANNED

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "pattern": self.pattern,
            "pattern_status": self.pattern_status.value,
            "purpose": self.purpose,
            "health": self.health.value,
        }

    @classmethod
    def from_dict(cls, data: Any) -> FileEntry:
        data = _require_mapping(data, "FileEntry")
        return cls(
            name=_field(data, "name", str),
            pattern=_field(data, "pattern", str),
            pattern_status=_enum_field(data, "pattern_status", PatternStatus),
            purpose=_field(data, "purpose", str),
            health=_enum_field(data, "health", HealthStatus),
        )


@dataclass
class ModuleDoc:
    """A parsed module documentation unit; the JSON IR contract."""

    module_path: str
    content: str = ""
    source_file: str = ""
    c4_level: C4Level = C4Level.UNKNOWN
    pattern: str = "--"
    pattern_status: PatternStatus = PatternStatus.PLANNED
    description: str = ""
    parent_container: str | None = None
    relationships: list[Relationship] = field(default_factory=list)
    files: list[FileEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "module_path": self.module_path,
            "content": self.content,
            "source_file": self.source_file,
            "c4_level": self.c4_level.value,
            "pattern": self.pattern,
            "pattern_status": self.pattern_status.value,
            "description": self.description,
            "parent_container": self.parent_container,
            "relationships": [r.to_dict() for r in self.relationships],
            "files": [f.to_dict() for f in self.files],
        }

    @classmethod
    def from_dict(cls, data: Any) -> ModuleDoc:
        data = _require_mapping(data, "ModuleDoc")
        parent = data.get("parent_container")
        if parent is not None and not isinstance(parent, str):
            raise ValueError(
                f"invalid type for `parent_container`: expected str or null, "
                f"got {type(parent).__name__}"
            )
        return cls(
            module_path=_field(data, "module_path", str),
            content=_field(data, "content", str),
            source_file=_field(data, "source_file", str),
            c4_level=_enum_field(data, "c4_level", C4Level),
            pattern=_field(data, "pattern", str),
            pattern_status=_enum_field(data, "pattern_status", PatternStatus),
            description=_field(data, "description", str),
            parent_container=parent,
            relationships=[
                Relationship.from_dict(r) for r in _field(data, "relationships", list)
            ],
            files=[FileEntry.from_dict(f) for f in _field(data, "files", list)],
        )


@dataclass
class ElementHealth:
    """Health summary for a single architectural element."""

    name: str
    c4_level: str
    file_count: int = 0
    files_planned: int = 0
    files_active: int = 0
    files_stable: int = 0
    pattern: str = "--"
    pattern_confidence: str = "planned"


@dataclass
class HealthReport:
    """Aggregated health report across all architectural elements."""

    total_elements: int = 0
    container_count: int = 0
    component_count: int = 0
    total_files: int = 0
    files_planned: int = 0
    files_active: int = 0
    files_stable: int = 0
    patterns_total: int = 0
    patterns_planned: int = 0
    patterns_verified: int = 0
    per_element: list[ElementHealth] = field(default_factory=list)


@dataclass
class GhostEntry:
    """A file listed in a catalog but not present on disk."""

    element: str
    filename: str
    source_dir: str


@dataclass
class OrphanEntry:
    """A file present on disk but not listed in any catalog."""

    element: str
    filename: str
    source_dir: str


@dataclass
class ValidationReport:
    """Validation report for file table integrity."""

    ghosts: list[GhostEntry] = field(default_factory=list)
    orphans: list[OrphanEntry] = field(default_factory=list)

    def is_clean(self) -> bool:
        return not self.ghosts and not self.orphans


@dataclass
class DriftedFile:
    """A single file that differs between generated and existing."""

    path: str
    expected_lines: int
    actual_lines: int


@dataclass
class DriftReport:
    """Comparison of generated versus existing documentation."""

    drifted_files: list[DriftedFile] = field(default_factory=list)
    missing_files: list[str] = field(default_factory=list)
    extra_files: list[str] = field(default_factory=list)

    def has_drift(self) -> bool:
        return bool(self.drifted_files or self.missing_files or self.extra_files)