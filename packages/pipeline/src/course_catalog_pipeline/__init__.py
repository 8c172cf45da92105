"""Course Catalog Pipeline - text catalog to canonical course table.

Main exports:
- build_catalog / run_pipeline: end-to-end ingestion
- load_datasets: curated static tables
- load_catalog / write_catalog: the persisted artifact
"""

from course_catalog_pipeline.augmenter import augment
from course_catalog_pipeline.corrector import (
    apply_corrections,
    correct_departments,
    correct_titles,
)
from course_catalog_pipeline.datasets import (
    DEFAULT_DATASETS_DIR,
    CatalogDatasets,
    load_datasets,
)
from course_catalog_pipeline.deduplicator import Deduplicator, KeeperResolution
from course_catalog_pipeline.extractor import (
    RawCourse,
    build_header_pattern,
    extract_courses,
    split_blocks,
)
from course_catalog_pipeline.fields import (
    derive_department,
    derive_fields,
    derive_level,
    first_occurrence_wins,
)
from course_catalog_pipeline.normalizer import (
    LISTINGS_SENTINEL,
    locate_listings,
    normalize_text,
    read_catalog_lines,
)
from course_catalog_pipeline.pipeline import CatalogBuild, build_catalog, run_pipeline
from course_catalog_pipeline.stats import PipelineStats
from course_catalog_pipeline.validator import validate_catalog
from course_catalog_pipeline.writer import load_catalog, render_catalog, write_catalog

__all__ = [
    # Orchestration
    "CatalogBuild",
    "build_catalog",
    "run_pipeline",
    "PipelineStats",
    # Datasets
    "DEFAULT_DATASETS_DIR",
    "CatalogDatasets",
    "load_datasets",
    # Stages
    "LISTINGS_SENTINEL",
    "read_catalog_lines",
    "normalize_text",
    "locate_listings",
    "RawCourse",
    "split_blocks",
    "build_header_pattern",
    "extract_courses",
    "derive_department",
    "derive_level",
    "derive_fields",
    "first_occurrence_wins",
    "correct_titles",
    "correct_departments",
    "apply_corrections",
    "Deduplicator",
    "KeeperResolution",
    "augment",
    "validate_catalog",
    # Artifact
    "render_catalog",
    "write_catalog",
    "load_catalog",
]
