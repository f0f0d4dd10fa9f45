"""Helpers for turning dotted module paths into diagram names and ids."""


def leaf_name(path: str) -> str:
    """Return the last dot-separated segment of a module path."""
    return path.rsplit(".", 1)[-1]


def diagram_id(path: str) -> str:
    """Return an identifier usable in diagram sources (dots become underscores)."""
    return path.replace(".", "_")


def title_case(path: str) -> str:
    """Title-case the last segment of a module path, splitting on underscores."""
    return " ".join(word[:1].upper() + word[1:] for word in leaf_name(path).split("_"))