"""Course Catalog CLI - Main entry point.

Provides the ``course-catalog`` command-line interface.
Sub-commands are grouped by concern: catalog and datasets.

Usage:
    course-catalog catalog build --input data-raw/catalog_text.txt
    course-catalog catalog validate data/course_catalog.json
    course-catalog datasets show
"""

import typer

from course_catalog_cli.commands.catalog import app as catalog_app
from course_catalog_cli.commands.datasets import app as datasets_app

# ---------------------------------------------------------------------------
# Root Typer app
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="course-catalog",
    help="Build the canonical course table from the plain-text academic catalog.",
    add_completion=False,
)

# Register sub-apps
app.add_typer(catalog_app, name="catalog")
app.add_typer(datasets_app, name="datasets")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
