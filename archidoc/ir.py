"""JSON intermediate representation of module documentation."""

from __future__ import annotations

import json
from collections.abc import Iterable

from archidoc.models import ModuleDoc


class IRError(ValueError):
    """Raised when text is not a valid ModuleDoc[] JSON document."""


def serialize(docs: Iterable[ModuleDoc]) -> str:
    """Serialize module docs to pretty-printed JSON IR."""
    return json.dumps([doc.to_dict() for doc in docs], indent=2, ensure_ascii=False)


def _parse(text: str) -> list[ModuleDoc]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(
            f"invalid type: expected a sequence of ModuleDoc, got {type(data).__name__}"
        )
    return [ModuleDoc.from_dict(item) for item in data]


def deserialize(text: str) -> list[ModuleDoc]:
    """Parse JSON IR into module docs; raises IRError when it is malformed."""
    try:
        return _parse(text)
    except ValueError as exc:
        raise IRError(f"invalid IR: {exc}") from exc


def validate(text: str) -> None:
    """Check that text conforms to the ModuleDoc[] schema; raises IRError if not."""
    try:
        _parse(text)
    except ValueError as exc:
        raise IRError(f"IR validation failed: {exc}") from exc