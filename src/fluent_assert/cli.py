from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="fluent-assert", help="Try property paths and assertions against data files")
schema_app = typer.Typer(name="schema", help="Generate settings schema tooling")
app.add_typer(schema_app, name="schema")


@app.command()
def extract(
    data: str = typer.Argument(help="Path to a YAML or JSON file holding a list of records"),
    path: str = typer.Argument(help="Dotted property path, e.g. father.age"),
    contains_only: list[str] | None = typer.Option(
        None,
        "--contains-only",
        help="Expected value (YAML scalar); repeat to require exactly this set of values",
    ),
    config: str | None = typer.Option(None, help="Settings YAML file"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output to terminal"
    ),
):
    """Extract a property from every record and print the values as YAML."""
    import yaml

    from fluent_assert.assertions import assert_that
    from fluent_assert.config import configure, load_settings
    from fluent_assert.errors import Failure, InvalidPathError, PropertyNotFoundError
    from fluent_assert.verbose import setup_logger

    if verbose:
        setup_logger(verbose=True)

    if config is not None:
        try:
            configure(load_settings(Path(config)))
        except (OSError, ValueError) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    data_path = Path(data)
    if not data_path.exists():
        typer.echo(f"Error: data file not found: {data}", err=True)
        raise typer.Exit(1)

    records = yaml.safe_load(data_path.read_text())
    if not isinstance(records, list):
        typer.echo(f"Error: {data} must contain a list of records", err=True)
        raise typer.Exit(1)

    try:
        extracted = assert_that(records).on_property(path)
    except (InvalidPathError, PropertyNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(yaml.safe_dump(extracted.actual, sort_keys=False, default_flow_style=False).rstrip())

    if contains_only:
        expected = [yaml.safe_load(v) for v in contains_only]
        try:
            extracted.as_(path).contains_only(*expected)
        except Failure as e:
            typer.echo(f"FAILED: {e.message}", err=True)
            raise typer.Exit(1)
        typer.echo("OK")


@app.command("check-path")
def check_path(path: str = typer.Argument(help="Dotted property path to validate")):
    """Show how a property path is split into segments."""
    from fluent_assert.errors import InvalidPathError
    from fluent_assert.properties.path import PropertyPath

    try:
        parsed = PropertyPath.parse(path)
    except InvalidPathError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"segments: {', '.join(parsed.segments)}")
    typer.echo(f"nested: {str(parsed.is_nested).lower()}")


@schema_app.command("generate")
def schema_generate(
    out: str = typer.Option(
        "schemas/fluent-assert.schema.json", help="Output path for JSON Schema"
    ),
    doc: str | None = typer.Option(None, help="Optional output path for settings docs"),
):
    """Generate JSON Schema (and optionally docs) for the settings YAML format."""
    from fluent_assert.schema import write_json_schema, write_schema_doc

    out_path = Path(out)
    write_json_schema(out_path)
    typer.echo(f"Wrote schema: {out_path}")
    if doc is not None:
        doc_path = Path(doc)
        write_schema_doc(doc_path)
        typer.echo(f"Wrote docs: {doc_path}")
