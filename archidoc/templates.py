"""Root-level annotation templates for a project's entry file."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

_TEMPLATE_LINES: tuple[str, ...] = (
    "@c4 container",
    "# [Project Name]",
    "",
    "[TODO: One-line description — what this system does and why it exists.]",
    "",
    "## C4 Context",
    "",
    "```mermaid",
    "C4Context",
    "    title System Context Diagram",
    "",
    '    Person(user, "TODO: User", "TODO: Primary user/actor")',
    '    System(system, "TODO: System Name", "TODO: System purpose")',
    '    System_Ext(ext1, "TODO: External System", "TODO: External dependency")',
    "",
    '    Rel(user, system, "Uses")',
    '    Rel(system, ext1, "TODO: relationship", "TODO: protocol")',
    "",
    '    UpdateLayoutConfig($c4ShapeInRow="3", $c4BoundaryInRow="1")',
    "```",
    "",
    "## Data Flow",
    "",
    "1. TODO: Primary command/request flow (e.g., Frontend -> API -> Service -> DB)",
    "2. TODO: Primary data/response flow (e.g., DB -> Service -> Frontend)",
    "3. TODO: Secondary flows (settings, config, async jobs, etc.)",
    "",
    "## Concurrency & Data Patterns",
    "",
    "- TODO: Key concurrency primitives (locks, channels, atomics, async, etc.)",
    "- TODO: Data access patterns (caching, buffering, connection pooling, etc.)",
    "",
    "## Deployment",
    "",
    "- TODO: Where does this run? (local, cloud, hybrid, embedded)",
    "- TODO: Key infrastructure (Docker, K8s, serverless, etc.)",
    "",
    "## External Dependencies",
    "",
    "- TODO: Third-party APIs and services",
    "- TODO: Databases and storage systems",
)


class CommentStyle(Enum):
    """Doc-comment style used when rendering a template."""

    RUST = "rust"
    TYPESCRIPT = "typescript"

    @classmethod
    def detect(cls, root: str | Path) -> CommentStyle | None:
        """Guess the style from Cargo.toml or package.json in the project root."""
        base = Path(root)
        if (base / "Cargo.toml").exists():
            return cls.RUST
        if (base / "package.json").exists():
            return cls.TYPESCRIPT
        return None

    @classmethod
    def from_lang(cls, lang: str) -> CommentStyle | None:
        """Map a language name or extension to a style; None if unknown."""
        name = lang.lower()
        if name in ("rust", "rs"):
            return cls.RUST
        if name in ("typescript", "ts", "javascript", "js"):
            return cls.TYPESCRIPT
        return None

    def comment(self, text: str) -> str:
        """Render one line of text as a doc-comment line."""
        marker = "//!" if self is CommentStyle.RUST else " *"
        return f"{marker} {text}" if text else marker


def generate_template(style: CommentStyle) -> str:
    """Return the root annotation template with TODO placeholders."""
    return "".join(style.comment(line) + "\n" for line in _TEMPLATE_LINES)


def wrap_jsdoc(content: str) -> str:
    """Wrap TypeScript template output in JSDoc delimiters."""
    return f"/**\n{content} */\n"