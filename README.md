# archidoc

archidoc turns structured module documentation into architecture documents. It produces
a C4-style `ARCHITECTURE.md`, Mermaid, PlantUML and draw.io diagrams, and a compact
context file for AI assistants. It also reports on project health, detects a stale
`ARCHITECTURE.md`, and finds file catalogs that do not match the files on disk.

The central data structure is `archidoc.models.ModuleDoc`. Each one describes a module
with these fields: its dotted `module_path`, `content`, `source_file`, `c4_level`
(`C4Level.CONTAINER`, `COMPONENT` or `UNKNOWN`), `pattern`, `pattern_status`,
`description`, `parent_container`, a list of `Relationship` objects and a list of
`FileEntry` rows. A module whose path is `_lib` holds the project's narrative prose.
Lists of `ModuleDoc` are exchanged as a JSON intermediate representation (IR).

## Installation

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Working with the IR

```python
from pathlib import Path
from archidoc import ir

text = Path("archidoc.json").read_text(encoding="utf-8")
ir.validate(text)              # schema check only; raises ir.IRError if invalid
docs = ir.deserialize(text)    # list[ModuleDoc]; raises ir.IRError on bad input
text = ir.serialize(docs)      # pretty-printed JSON array
```

The IR format is strict. Every field must be present and have the right type. The enum
fields accept only their lowercase values: `container`/`component`/`unknown`,
`planned`/`verified`, and `planned`/`active`/`stable`. `IRError` is a subclass of
`ValueError`.

You can combine IR sets from several sources:

```python
from archidoc.merge import merge_ir, MergeError

merged = merge_ir([first_docs, second_docs])
```

A module path may appear more than once at the same C4 level. In that case the later
source wins and a warning is logged. If the same path appears at different levels,
`merge_ir` raises `MergeError`, which carries `module_path` and `message`. The result
is sorted by module path.

## Generating documentation

```python
from pathlib import Path
from archidoc import architecture, ai_context, mermaid, plantuml, drawio

Path("ARCHITECTURE.md").write_text(architecture.generate(docs, Path(".")), encoding="utf-8")
Path("AI_CONTEXT.md").write_text(ai_context.generate(docs), encoding="utf-8")

out = Path("docs/diagrams")
out.mkdir(parents=True, exist_ok=True)
mermaid.generate_container(out, docs)      # c4-container.md
mermaid.generate_component(out, docs)      # c4-component.md
plantuml.generate_container(out, docs)     # c4-container.puml
plantuml.generate_component(out, docs)     # c4-component.puml
drawio.generate_container_csv(out, docs)   # c4-container.csv
drawio.generate_component_csv(out, docs)   # c4-component.csv
```

### ARCHITECTURE.md

`architecture.generate(docs, root)` writes the following sections in order:

1. The narrative from the `_lib` module. `@c4` markers, `GoF:` lines and file tables
   are removed.
2. A system (container) diagram.
3. A component diagram, if there are any components.
4. A component index. It links each module to its source file, with the path made
   relative to `root`.
5. A relationship map.

`mermaid.container_diagram(docs)` and `mermaid.component_diagram(docs)` return the
fenced Mermaid blocks on their own.

### AI context

The AI context file drops code blocks, tables and empty headings from the narrative.
It then lists each module once in an indented tree, with the common path prefix
removed, followed by a flat list of relationships.

The PlantUML files include the C4 library through `!include <C4/C4_Container>` and
`!include <C4/C4_Component>`. The draw.io CSV files carry the import header used by
Arrange > Insert > Advanced > CSV.

## Checks and reports

```python
from archidoc.check import check_drift, format_drift_report
from archidoc.health import aggregate_health, format_health_report
from archidoc.validate import validate_file_tables, format_validation_report

print(format_drift_report(check_drift(docs, Path("ARCHITECTURE.md"), Path("."))))
print(format_health_report(aggregate_health(docs)))
print(format_validation_report(validate_file_tables(docs)))
```

- **Drift.** This check compares a freshly generated `ARCHITECTURE.md` with the file on
  disk. A missing file or differing content is reported in a `DriftReport`.
- **Health.** This report counts files by maturity (planned, active, stable) and
  assigned patterns by confidence (planned, verified). It gives the counts both project
  wide and for each element.
- **Validation.** This check reports *ghosts* and *orphans*. A ghost is a file listed in
  a module's catalog that is missing from the module's source directory. An orphan is a
  `.rs` file in that directory that the catalog does not list; `mod.rs`, `lib.rs` and
  `main.rs` are never counted as orphans.

## Annotation templates

```python
from pathlib import Path
from archidoc.templates import CommentStyle, generate_template, wrap_jsdoc
from archidoc.suggest import suggest_annotation, infer_c4_level, scan_source_files

style = CommentStyle.detect(Path(".")) or CommentStyle.from_lang("rust")
print(generate_template(style))
print(wrap_jsdoc(generate_template(CommentStyle.TYPESCRIPT)))
print(suggest_annotation(Path("src/api")))
```

`CommentStyle.detect` looks for `Cargo.toml` and then for `package.json`.
`CommentStyle.from_lang` accepts `rust`/`rs` and `typescript`/`ts`/`javascript`/`js`.

`infer_c4_level` places a directory one level below `src` at the container level.
Deeper directories are components. A directory with no `src` ancestor counts as a
container. `scan_source_files` lists the `.rs`, `.ts`, `.js` and `.py` files in a
directory, leaving out entry files such as `mod.rs` and `index.ts`.
`suggest_annotation` combines the two into a `//!` annotation block with TODO
placeholders.

## What is not included

- There is no command-line program. Everything is used as a library from Python.
- Nothing reads annotated source code. The `ModuleDoc` objects must be built in Python
  or loaded from JSON IR with `ir.deserialize`.
- Pattern confidence is taken as given. No check examines the code to verify the
  declared design patterns.