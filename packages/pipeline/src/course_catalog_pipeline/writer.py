"""Persist and reload the canonical course table.

The artifact has exactly the contract columns (CourseCode, CourseTitle,
Department, CourseLevel), one row per course, in pipeline order, so the
same input always produces a byte-identical file.
"""

import csv
import io
import json
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from course_catalog_common import CatalogFormatError, CatalogIOError, get_logger
from course_catalog_contracts import CATALOG_COLUMNS, CourseRecord

logger = get_logger(__name__)

FORMATS = ("json", "csv")


def render_catalog(records: list[CourseRecord], fmt: str = "json") -> str:
    """Serialize records to the artifact text for ``fmt``."""
    rows = [record.to_row() for record in records]
    if fmt == "json":
        return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
    if fmt == "csv":
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=CATALOG_COLUMNS, lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
        return buffer.getvalue()
    raise ValueError(f"Unknown catalog format: {fmt!r} (expected one of {FORMATS})")


def write_catalog(records: list[CourseRecord], path: Path, fmt: str = "json") -> Path:
    """Write the catalog atomically to ``path``.

    The content goes to a temporary file in the destination directory,
    which is then renamed over ``path``.

    Raises:
        CatalogIOError: If the destination cannot be written
    """
    path = Path(path)
    content = render_catalog(records, fmt)

    tmp_name = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CatalogIOError(f"Cannot write catalog to {path}: {e}") from e

    logger.info("catalog_written", path=str(path), format=fmt, rows=len(records))
    return path


def load_catalog(path: Path) -> list[CourseRecord]:
    """Load a persisted catalog (CSV if the suffix is .csv, JSON otherwise).

    Raises:
        CatalogIOError: If the file cannot be read
        CatalogFormatError: If the content does not match the contract
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogIOError(f"Cannot read catalog {path}: {e}") from e

    if path.suffix.lower() == ".csv":
        reader = csv.DictReader(io.StringIO(text))
        if tuple(reader.fieldnames or ()) != CATALOG_COLUMNS:
            raise CatalogFormatError(
                f"{path} has columns {reader.fieldnames}, expected {list(CATALOG_COLUMNS)}"
            )
        rows = list(reader)
    else:
        try:
            rows = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogFormatError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(rows, list):
            raise CatalogFormatError(f"{path} must contain a JSON array of rows")

    try:
        return [CourseRecord.model_validate(row) for row in rows]
    except ValidationError as e:
        raise CatalogFormatError(f"{path} contains an invalid row: {e}") from e
