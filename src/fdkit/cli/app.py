"""Typer CLI application."""

from pathlib import Path
from typing import Optional

import typer

from fdkit.analysis import resolve_candidate_keys
from fdkit.config.logging import setup_logging
from fdkit.config.settings import get_settings
from fdkit.core.attrs import AttrSet
from fdkit.core.errors import FDKitError
from fdkit.core.relation import Relation
from fdkit.inference.data2fd import infer_relation
from fdkit.ir.relation import RelationIR
from fdkit.parsing.parser import split_attrs
from fdkit.utils.ir_io import load_relation_text, save_ir_to_json

app = typer.Typer(help="fdkit: functional dependency analysis for relational schemas")

SepOption = typer.Option(None, "--sep", "-d", help="Separator between attribute names")
NoSepOption = typer.Option(
    False, "--no-sep", "-n", help="Use single-character attribute names (no separator)"
)


def _separator(sep: Optional[str], no_sep: bool) -> str:
    if no_sep:
        return ""
    if sep is not None:
        return sep
    return get_settings().attr_sep


def _load(path: Path, sep: str) -> Relation:
    try:
        return load_relation_text(path, sep=sep)
    except (FDKitError, FileNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _print_keys(keys, sep: str) -> None:
    for key in keys:
        typer.echo(f"    {key.to_string(sep)}")


@app.command()
def info(
    relation_file: Path,
    sep: Optional[str] = SepOption,
    no_sep: bool = NoSepOption,
):
    """
    Print a relation and the candidate keys found without a brute-force search.

    Args:
        relation_file: Path to the relation description
    """
    setup_logging()
    sep = _separator(sep, no_sep)
    rel = _load(relation_file, sep)

    typer.echo(rel.to_string(sep))
    typer.echo("Candidate Keys:")
    keys = rel.candidate_keys() or rel.candidate_keys_alt()
    if not keys:
        typer.echo("No straightforward Candidate Keys -- Need a brute-force search!")
    _print_keys(keys, sep)


@app.command()
def keys(
    relation_file: Path,
    brute_force: bool = typer.Option(
        False, "--brute-force", "-b", help="Always run the exhaustive search"
    ),
    max_checks: Optional[int] = typer.Option(
        None, "--max-checks", help="Closure budget for the exhaustive search"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON key report"),
    sep: Optional[str] = SepOption,
    no_sep: bool = NoSepOption,
):
    """
    Resolve candidate keys, escalating to a brute-force search when needed.

    Args:
        relation_file: Path to the relation description
    """
    setup_logging()
    settings = get_settings()
    sep = _separator(sep, no_sep)
    rel = _load(relation_file, sep)
    budget = max_checks if max_checks is not None else settings.max_search_checks

    try:
        report = resolve_candidate_keys(
            rel, max_checks=budget, exhaustive_only=brute_force
        )
    except FDKitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return
    typer.echo(f"Candidate Keys ({report.strategy}):")
    for key in report.keys:
        typer.echo(f"    {sep.join(key)}")


@app.command()
def closure(
    relation_file: Path,
    attributes: str,
    sep: Optional[str] = SepOption,
    no_sep: bool = NoSepOption,
):
    """
    Print the closure of an attribute set.

    Args:
        relation_file: Path to the relation description
        attributes: Attribute list, joined by the separator
    """
    setup_logging()
    sep = _separator(sep, no_sep)
    rel = _load(relation_file, sep)

    attrs = AttrSet(split_attrs(attributes, sep))
    unknown = attrs.difference(rel.attrs)
    if len(unknown) > 0:
        typer.echo(f"Error: unknown attributes ({unknown.to_string(sep)})", err=True)
        raise typer.Exit(1)
    closed = rel.attribute_closure(attrs)
    typer.echo(f"{attrs.to_string(sep)} --> {closed.to_string(sep)}")


@app.command()
def data2fd(
    data_file: Path,
    exclude: str = typer.Option(
        "", "--exclude", "-x", help="Comma-separated list of attributes to exclude"
    ),
):
    """
    Infer functional dependencies from a CSV or tab-delimited data file.

    Args:
        data_file: Path to the data file (header on the first line)
    """
    setup_logging()
    excluded = [p.strip() for p in exclude.split(",") if p.strip()]
    try:
        rel = infer_relation(data_file, exclude=excluded)
    except (FDKitError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(rel.to_string())
    typer.echo("---")
    typer.echo("Candidate Keys:")
    keys = rel.candidate_keys() or rel.candidate_keys_alt()
    if not keys:
        typer.echo("No straightforward Candidate Keys -- Need a brute-force search!")
    _print_keys(keys, ",")

    best = min((len(k) for k in keys), default=len(rel.attrs))
    if best > 2:
        typer.echo("Candidate Keys (Brute-Force):")
        try:
            _print_keys(rel.candidate_keys_bf(get_settings().max_search_checks), ",")
        except FDKitError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)


@app.command()
def export(
    relation_file: Path,
    out_json: Path,
    sep: Optional[str] = SepOption,
    no_sep: bool = NoSepOption,
):
    """
    Write a relation and its candidate keys as JSON.

    Args:
        relation_file: Path to the relation description
        out_json: Output path for the RelationIR JSON
    """
    setup_logging()
    settings = get_settings()
    sep = _separator(sep, no_sep)
    rel = _load(relation_file, sep)

    try:
        keys = rel.candidate_keys_bf(max_checks=settings.max_search_checks)
    except FDKitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    save_ir_to_json(RelationIR.from_relation(rel, keys), out_json)
    typer.echo(f"✓ Relation {rel.name} written to {out_json}")


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
