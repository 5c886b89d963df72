"""Generate JSON Schema and docs for the settings YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from fluent_assert.config import AssertionSettings


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return AssertionSettings.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def _describe_type(prop: dict) -> str:
    if "anyOf" in prop:
        return " | ".join(_describe_type(p) for p in prop["anyOf"])
    if prop.get("type") == "array":
        return f"array of {_describe_type(prop.get('items', {}))}"
    return prop.get("type", "any")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    props = schema.get("properties", {})

    lines: list[str] = []
    lines.append("# fluent-assert settings")
    lines.append("")
    lines.append("This doc is generated from the Pydantic model.")
    lines.append("")
    lines.append("Point `FLUENT_ASSERT_CONFIG` at a YAML file with any of these keys.")
    lines.append("String values may use `${VAR}` / `${VAR:-default}`.")
    lines.append("")
    lines.append("## Keys")
    for name, prop in props.items():
        default = json.dumps(prop.get("default"))
        lines.append(f"- `{name}`: {_describe_type(prop)} (default: `{default}`)")

    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
