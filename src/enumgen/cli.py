import sys
from dataclasses import asdict
from pathlib import Path

import orjson
import typer
import yaml
from rich.console import Console
from rich.markup import escape

from enumgen.codegen.java import JavaEnumConfig, synthesize
from enumgen.javadoc.parser import parse_entries
from enumgen.logging import configure_logging
from enumgen.manifest import run_manifest, sample_manifest
from enumgen.naming import DEFAULT_ENUM_SUFFIX
from enumgen.pipeline import NoEntriesError, generate_file, request_for_comment, request_for_field

app = typer.Typer(help="Generate Java enums from code/description lists in documentation.")
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log skipped segments and writes."),
) -> None:
    configure_logging(verbose=verbose)


def _read_text(path: Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8")


def _print_data(text: str) -> None:
    # data (JSON, Java) may contain [brackets] that rich would read as markup
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _warn_and_exit(message: str) -> None:
    console.print(f"[bold yellow]{escape(message)}[/]")
    raise typer.Exit(code=1)


@app.command()
def parse(
    comment: Path = typer.Argument(..., help="File holding the raw comment text ('-' for stdin)."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write the entries as JSON."
    ),
) -> None:
    """Print the code/name/description entries recognized in a comment."""
    entries = parse_entries(_read_text(comment))
    payload = [asdict(entry) for entry in entries]
    if output:
        output.write_bytes(orjson.dumps(payload, option=orjson.OPT_INDENT_2))
        console.print(f"[bold green]Wrote {len(entries)} entries[/] to {output}")
    else:
        _print_data(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    if not entries:
        _warn_and_exit("No valid enum entries found in the comment.")


@app.command()
def generate(
    comment: Path = typer.Argument(..., help="File holding the raw comment text ('-' for stdin)."),
    type_name: str = typer.Option(..., "--type-name", "-t", help="Name of the generated enum."),
    namespace: str = typer.Option("", "--namespace", "-n", help="Java package of the enum."),
    output_dir: Path = typer.Option(Path("."), "--output-dir", "-d", help="Directory to write to."),
    lombok: bool = typer.Option(True, "--lombok/--no-lombok", help="Use Lombok annotations."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing enum file."),
    stdout: bool = typer.Option(False, "--stdout", help="Print the source instead of writing."),
) -> None:
    """Generate an enum from a comment file and an explicit type name."""
    request = request_for_comment(_read_text(comment), type_name, namespace)
    if not request.entries:
        _warn_and_exit("No valid enum entries found in the comment.")
    config = JavaEnumConfig(lombok=lombok)
    try:
        if stdout:
            _print_data(synthesize(request, config).source)
            return
        path = generate_file(request, output_dir, config=config, overwrite=force)
    except FileExistsError as exc:
        _warn_and_exit(str(exc))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    else:
        console.print(f"[bold green]Generated enum[/] {path} ({len(request.entries)} constants)")


@app.command()
def field(
    source: Path = typer.Argument(..., help="Java source file declaring the field."),
    field_name: str = typer.Argument(..., help="Documented field to turn into an enum."),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-d", help="Defaults to the source file's directory."
    ),
    suffix: str = typer.Option(DEFAULT_ENUM_SUFFIX, "--suffix", help="Suffix of the enum name."),
    lombok: bool = typer.Option(True, "--lombok/--no-lombok", help="Use Lombok annotations."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing enum file."),
) -> None:
    """Generate an enum from the Javadoc of a field, named after its class."""
    if not source.is_file():
        raise typer.BadParameter(f"Input file not found: {source}")
    try:
        request = request_for_field(source, field_name, suffix=suffix)
        path = generate_file(
            request,
            output_dir or source.parent,
            config=JavaEnumConfig(lombok=lombok),
            overwrite=force,
        )
    except LookupError as exc:
        _warn_and_exit(str(exc))
    except NoEntriesError:
        _warn_and_exit("No valid enum entries found in the Javadoc.")
    except FileExistsError as exc:
        _warn_and_exit(str(exc))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    else:
        console.print(f"[bold green]Generated enum[/] {path} ({len(request.entries)} constants)")


@app.command()
def batch(
    manifest: Path = typer.Argument(..., help="YAML/JSON manifest listing enum jobs."),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Optional path to write the JSON summary."
    ),
) -> None:
    """Run every job of a manifest and report what was written."""
    if not manifest.is_file():
        raise typer.BadParameter(f"Manifest not found: {manifest}")
    try:
        summary = run_manifest(manifest)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if output:
        output.write_bytes(orjson.dumps(summary, option=orjson.OPT_INDENT_2))
        console.print(f"[bold green]Wrote batch summary[/] to {output}")
    else:
        _print_data(orjson.dumps(summary, option=orjson.OPT_INDENT_2).decode())
    console.print(f"[bold green]Generated[/] {summary['written']} of {summary['jobs']} enums.")


@app.command("sample-manifest")
def sample_manifest_cmd(
    fmt: str = typer.Option("yaml", "--format", "-f", help="Output format: yaml | json."),
) -> None:
    """Print a starter manifest to edit."""
    payload = sample_manifest()
    if fmt.lower() == "json":
        _print_data(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())
    elif fmt.lower() in {"yaml", "yml"}:
        _print_data(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True))
    else:
        raise typer.BadParameter(f"Unsupported format '{fmt}'. Choose yaml or json.")


if __name__ == "__main__":
    app()
