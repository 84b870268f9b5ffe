"""CLI entry point: generate, languages, inspect."""

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from typhoon_bindgen import __version__, output
from typhoon_bindgen.binding import lower
from typhoon_bindgen.errors import BindgenError, NoInputError
from typhoon_bindgen.generator import generate
from typhoon_bindgen.idl import Document, load_idl
from typhoon_bindgen.languages import Language, get_config, parse_language, parse_language_list
from typhoon_bindgen.workspace import IDL_DIR, SDK_DIR, find_workspace_root

app = typer.Typer(
    name="typhoon-bindgen",
    help="Generate client SDKs for Typhoon programs from their JSON IDL.",
)


def _load_document(path: Path) -> Document:
    if not path.exists():
        output.error(f"file not found: {path}")
        raise typer.Exit(1)
    try:
        return load_idl(path)
    except BindgenError as e:
        output.error(str(e))
        raise typer.Exit(1)


def _resolve_dirs(idl_dir: Optional[Path], out_dir: Optional[Path]) -> tuple[Path, Path]:
    if idl_dir is not None and out_dir is not None:
        return idl_dir, out_dir
    root = find_workspace_root()
    if root is None:
        if idl_dir is None:
            output.error("Not in a Typhoon workspace (no typhoon.toml found). Use --idl-dir.")
            raise typer.Exit(1)
        root = Path.cwd()
    return idl_dir or root / IDL_DIR, out_dir or root / SDK_DIR


@app.command("generate")
def generate_cmd(
    languages: str = typer.Option(..., "--languages", "-l", help="Comma-separated languages, e.g. ts,rust"),
    out_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="SDK output directory"),
    idl_dir: Optional[Path] = typer.Option(None, "--idl-dir", help="Directory holding <program>.json IDLs"),
):
    """Generate client bindings for every IDL in the workspace."""
    names = parse_language_list(languages)
    if not names:
        output.error("No languages given.")
        raise typer.Exit(1)
    idl_dir, out_dir = _resolve_dirs(idl_dir, out_dir)

    def progress(program: str, language: Language) -> None:
        output.step(f"Generating {language.value} bindings for {program}...")

    try:
        summary = generate(names, idl_dir, out_dir, on_progress=progress)
    except NoInputError as e:
        output.error(str(e))
        raise typer.Exit(1)

    for name in summary.skipped_languages:
        output.warning(f"Unsupported language: {name}")
    for failure in summary.failures:
        output.error(f"{failure.program} ({failure.language}): {failure.reason}")

    typer.echo(
        f"Generated bindings for {len(summary.programs)} programs "
        f"in {len(summary.languages)} languages"
    )
    if summary.exit_code != 0:
        output.error("No bindings were generated.")
        raise typer.Exit(summary.exit_code)
    output.success(f"Generated {len(summary.packages)} packages in {out_dir}")


@app.command("languages")
def languages_cmd():
    """List supported target languages."""
    for language, cfg in get_config().languages.items():
        aliases = f" (aliases: {', '.join(cfg.aliases)})" if cfg.aliases else ""
        typer.echo(f"{language.value}{aliases}")


@app.command("inspect")
def inspect_cmd(
    file: Path = typer.Argument(..., help="IDL .json file"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Show the binding model for this language"),
):
    """Summarize an IDL document (debug)."""
    document = _load_document(file)
    if language:
        try:
            target = parse_language(language)
        except BindgenError as e:
            output.error(str(e))
            raise typer.Exit(1)
        module = lower(document, file.stem, target)
        typer.echo(json.dumps(module.to_dict(), indent=2))
        return
    typer.echo(f"Program {document.name} at {document.address}")
    typer.echo(f"Instructions: {len(document.instructions)}")
    for ix in document.instructions:
        typer.echo(f"  - {ix.name} ({len(ix.accounts)} accounts, {len(ix.args)} args)")
    typer.echo(f"Accounts: {len(document.accounts)}")
    for account in document.accounts:
        typer.echo(f"  - {account.name} ({len(account.fields)} fields)")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"typhoon-bindgen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Typhoon binding generator: JSON IDL in, client SDK packages out."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    app()
