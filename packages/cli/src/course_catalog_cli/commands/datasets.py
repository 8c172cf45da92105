"""Dataset commands for course-catalog.

Commands:
    show  Show the size of each curated dataset
"""

from pathlib import Path
from typing import Optional

import typer

from course_catalog_common import CatalogError, get_settings
from course_catalog_pipeline import DEFAULT_DATASETS_DIR, load_datasets

app = typer.Typer(help="Inspect the curated static datasets")


@app.command()
def show(
    datasets_dir: Optional[Path] = typer.Option(
        None, "--datasets-dir", help="Directory with curated YAML datasets"
    ),
):
    """Show how many entries each dataset holds.

    Examples:

        course-catalog datasets show
    """
    settings = get_settings()
    directory = datasets_dir or (Path(settings.datasets_dir) if settings.datasets_dir else None)

    try:
        datasets = load_datasets(directory)
    except CatalogError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Datasets in {directory or DEFAULT_DATASETS_DIR}:\n")
    for name, size in datasets.sizes().items():
        typer.echo(f"  {name:24} {size:>5}")
