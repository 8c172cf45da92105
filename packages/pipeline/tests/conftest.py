"""Shared fixtures for pipeline tests.

Provides a small synthetic dataset bundle and catalog text so every stage
can be tested without the full curated tables.
"""

import pytest

from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.datasets import CatalogDatasets
from course_catalog_pipeline.fields import derive_department, derive_level


@pytest.fixture
def make_record():
    """Build a consistent CourseRecord from a code and title."""

    def _make(code: str, title: str) -> CourseRecord:
        return CourseRecord(
            course_code=code,
            course_title=title,
            department=derive_department(code),
            course_level=derive_level(code),
        )

    return _make


@pytest.fixture
def small_datasets(make_record):
    """Minimal static tables covering every rule."""
    return CatalogDatasets(
        departments=("HIST", "AFR", "ECON", "ENG", "ENGS", "PHYS", "FYS", "AVC", "BIO"),
        title_corrections={"PHYS 107": "Introductory Physics of Living Systems I/Lab"},
        department_corrections={"ENGS 121G": "ENG"},
        deleted_codes=frozenset({"FYS 445", "AVC 212A"}),
        excluded_levels=frozenset({458}),
        independent_levels=frozenset({360, 457}),
        keeper_codes=frozenset({"HIST 264"}),
        manual_courses=(
            make_record("ECON 101", "Principles of Microeconomics: Prices and Markets"),
        ),
    )


@pytest.fixture
def catalog_lines():
    """Catalog text with front matter, cross-listings and known bad rows."""
    return [
        "Academic Catalog 2025-2026",
        "General Information\\ Policies apply to all students.",
        "Course Offerings\\",
        "HIST 264 Topics in World History \\ Global themes.",
        "  Instructor Permission Required: No\\",
        "AFR 227 Topics in World History \\ Cross-listed with HIST 264.",
        "Instructor Permission Required: No\\",
        "PHYS 107 Introductory Physics of Living \\ Lab science.",
        "Instructor Permission Required: Yes\\",
        "ENGS 121G Writing About Place \\ Seminar.",
        "Instructor Permission Required: No\\",
        "FYS 445 First-Year Seminar \\ Retired.",
        "Instructor Permission Required: No\\",
        "HIST 458 Administrative Placeholder \\ Not a course.",
        "Instructor Permission Required: Yes\\",
        "HIST 360 Independent Study \\ Thesis work.",
        "Instructor Permission Required: Yes\\",
        "BIO 360 Independent Study \\ Thesis work.",
        "Instructor Permission Required: Yes\\",
        "AVC 301 Film Theory \\ Cinema.",
        "Instructor Permission Required: No\\",
        "BIO 301 Film Theory \\ Cross-listed, no keeper registered.",
        "Instructor Permission Required: No\\",
        "Trailing appendix text without a terminator.",
    ]
