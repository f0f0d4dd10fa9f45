"""Merging of module documentation gathered from several IR sets."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from archidoc.models import ModuleDoc

_log = logging.getLogger(__name__)


class MergeError(Exception):
    """Raised when two sources define the same module at different C4 levels."""

    def __init__(self, module_path: str, message: str) -> None:
        super().__init__(f"merge conflict at '{module_path}': {message}")
        self.module_path = module_path
        self.message = message


def merge_ir(sources: Iterable[Iterable[ModuleDoc]]) -> list[ModuleDoc]:
    """Merge IR sets into one list sorted by module path.

    Duplicates at the same C4 level are resolved in favour of the later
    source; duplicates at different levels raise MergeError.
    """
    merged: dict[str, ModuleDoc] = {}

    for source_set in sources:
        for doc in source_set:
            existing = merged.get(doc.module_path)
            if existing is not None:
                if existing.c4_level != doc.c4_level:
                    raise MergeError(
                        doc.module_path,
                        f"conflicting C4 levels: existing '{existing.c4_level}' "
                        f"vs new '{doc.c4_level}'",
                    )
                _log.warning(
                    "duplicate module '%s' at C4 level '%s', overwriting with later source",
                    doc.module_path,
                    doc.c4_level,
                )
            merged[doc.module_path] = doc

    return sorted(merged.values(), key=lambda d: d.module_path)