"""Catalog commands for course-catalog.

Commands:
    build     Run the ingestion pipeline and write the course table
    validate  Re-check a persisted course table against the invariants
"""

from pathlib import Path
from typing import Optional

import typer

from course_catalog_common import CatalogError, configure_logging, get_settings
from course_catalog_pipeline import (
    load_catalog,
    load_datasets,
    run_pipeline,
    validate_catalog,
)
from course_catalog_pipeline.writer import FORMATS

app = typer.Typer(help="Build and check the canonical course table")


@app.command()
def build(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Catalog text file (default: settings.input_path)"
    ),
    output_path: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination file (default: settings.output_path with the format's suffix)",
    ),
    output_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="json or csv (default: settings.output_format)"
    ),
    datasets_dir: Optional[Path] = typer.Option(
        None, "--datasets-dir", help="Directory with curated YAML datasets"
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on keeper-less cross-listings and shared titles (default: settings.strict)",
    ),
    min_expected: Optional[int] = typer.Option(
        None, "--min-expected", help="Warn when fewer courses are extracted"
    ),
):
    """Parse the catalog text and write the canonical course table.

    Examples:

        course-catalog catalog build -i data-raw/catalog_text.txt -o data/course_catalog.json

        course-catalog catalog build --format csv --strict
    """
    settings = get_settings()
    configure_logging()

    fmt = (output_format or settings.output_format).lower()
    if fmt not in FORMATS:
        typer.echo(
            f"Error: unknown format '{fmt}' (expected one of {', '.join(FORMATS)})", err=True
        )
        raise typer.Exit(1)

    if output_path is None:
        output_path = Path(settings.output_path).with_suffix(f".{fmt}")
    datasets_dir = datasets_dir or (Path(settings.datasets_dir) if settings.datasets_dir else None)

    try:
        datasets = load_datasets(datasets_dir)
        result = run_pipeline(
            input_path=input_path or Path(settings.input_path),
            output_path=output_path,
            datasets=datasets,
            output_format=fmt,
            strict=settings.strict if strict is None else strict,
            min_expected_courses=(
                min_expected if min_expected is not None else settings.min_expected_courses
            ),
        )
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result.stats.summary())
    typer.echo(f"Catalog written to {result.output_path} ({result.stats.final} courses)")


@app.command()
def validate(
    path: Path = typer.Argument(..., help="Persisted course table (.json or .csv)"),
    datasets_dir: Optional[Path] = typer.Option(
        None, "--datasets-dir", help="Directory with curated YAML datasets"
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--no-strict",
        help="Treat shared titles as errors (default: settings.strict)",
    ),
):
    """Check a persisted course table before handing it downstream.

    Examples:

        course-catalog catalog validate data/course_catalog.json
    """
    settings = get_settings()
    configure_logging()

    datasets_dir = datasets_dir or (Path(settings.datasets_dir) if settings.datasets_dir else None)

    try:
        records = load_catalog(path)
        validate_catalog(
            records,
            load_datasets(datasets_dir),
            strict=settings.strict if strict is None else strict,
        )
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"OK: {path} has {len(records)} valid courses")
