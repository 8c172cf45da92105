"""Catalog ingestion pipeline.

Stages run strictly in sequence, each consuming the complete output of
the previous one:

    normalize -> locate listings -> extract -> derive fields -> correct
    -> deduplicate -> augment -> validate -> write

``build_catalog`` runs everything up to validation in memory;
``run_pipeline`` adds file input and output around it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from course_catalog_common import ConfigurationError, get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.augmenter import augment
from course_catalog_pipeline.corrector import apply_corrections
from course_catalog_pipeline.datasets import CatalogDatasets, load_datasets
from course_catalog_pipeline.deduplicator import Deduplicator
from course_catalog_pipeline.extractor import extract_courses
from course_catalog_pipeline.fields import derive_fields
from course_catalog_pipeline.normalizer import (
    LISTINGS_SENTINEL,
    locate_listings,
    normalize_text,
    read_catalog_lines,
)
from course_catalog_pipeline.stats import PipelineStats
from course_catalog_pipeline.validator import validate_catalog
from course_catalog_pipeline.writer import FORMATS, write_catalog

logger = get_logger(__name__)


@dataclass
class CatalogBuild:
    """Validated catalog rows plus the statistics of the run that built them."""

    records: list[CourseRecord]
    stats: PipelineStats = field(default_factory=PipelineStats)
    output_path: Optional[Path] = None


def build_catalog(
    lines: Iterable[str],
    datasets: CatalogDatasets,
    strict: bool = False,
    min_expected_courses: int = 0,
    listings_sentinel: str = LISTINGS_SENTINEL,
) -> CatalogBuild:
    """Turn catalog text lines into the validated canonical table.

    Raises:
        CatalogFormatError: If the listings sentinel is missing
        KeeperResolutionError: In strict mode, for keeper-less cross-listings
        CatalogValidationError: If the final table breaks an invariant
    """
    stats = PipelineStats(min_expected_courses=min_expected_courses)

    listings = locate_listings(normalize_text(lines), listings_sentinel)
    raw = extract_courses(
        listings,
        datasets.departments,
        min_expected=min_expected_courses,
        stats=stats,
    )
    records = derive_fields(raw, stats=stats)
    records = apply_corrections(records, datasets, stats=stats)
    records = Deduplicator.from_datasets(datasets, strict=strict).deduplicate(
        records, stats=stats
    )
    records = augment(records, datasets.manual_courses, stats=stats)

    validate_catalog(records, datasets, strict=strict)
    stats.final = len(records)

    for alert in stats.check_alerts():
        logger.warning("pipeline_alert", alert=alert)

    return CatalogBuild(records=records, stats=stats)


def run_pipeline(
    input_path: Path,
    output_path: Path,
    datasets: Optional[CatalogDatasets] = None,
    output_format: str = "json",
    strict: bool = False,
    min_expected_courses: int = 0,
) -> CatalogBuild:
    """Read the catalog file, build the table and write the artifact.

    Nothing is written unless the table passes validation.

    Raises:
        ConfigurationError: If ``output_format`` is not a known format
        CatalogIOError: If the input cannot be read or the output written
        CatalogFormatError: If the listings sentinel is missing
        CatalogValidationError: If the final table breaks an invariant
    """
    if output_format not in FORMATS:
        raise ConfigurationError(
            f"Unknown catalog format: {output_format!r} (expected one of {FORMATS})"
        )
    if datasets is None:
        datasets = load_datasets()

    logger.info("pipeline_started", input=str(input_path), output=str(output_path))
    lines = read_catalog_lines(Path(input_path))
    build = build_catalog(
        lines,
        datasets,
        strict=strict,
        min_expected_courses=min_expected_courses,
    )
    build.output_path = write_catalog(build.records, Path(output_path), output_format)
    logger.info("pipeline_finished", rows=build.stats.final)
    return build
