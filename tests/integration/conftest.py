"""Shared fixtures for integration tests.

Builds a realistic catalog document (front matter, several pages of
listings, cross-listings, known bad rows) and runs the pipeline against
the packaged datasets.
"""

import pytest

from course_catalog_pipeline import load_datasets

YES = "Instructor Permission Required: Yes\\"
NO = "Instructor Permission Required: No\\"


def course_block(code: str, title: str, body: str, permission: str = NO) -> list[str]:
    """One listing as it appears in the catalog: header, wrapped body, terminator."""
    return [
        f"{code} {title} \\",
        f"   {body}",
        "",
        f"Credits: 1.0   {permission}",
    ]


@pytest.fixture(scope="session")
def datasets():
    return load_datasets()


@pytest.fixture
def catalog_text():
    lines = [
        "ACADEMIC CATALOG 2025-2026",
        "",
        "Table of Contents\\ Mission\\ Academic Policies\\",
        "Students may enroll in HIST 101 only once.",
        "",
        "Course Offerings\\",
    ]
    lines += course_block("HIST 264", "Topics in World History", "Themes across regions.")
    lines += course_block("AFR 227", "Race and Empire", "The Atlantic world.")
    lines += course_block("HISP 390", "Latin American Cinema", "Film and society.")
    lines += course_block("LALS 390", "Latin American Cinema", "Cross-listed with HISP 390.")
    lines += course_block("PHYS 107", "Introductory Physics of Living", "Lab course.", YES)
    lines += course_block("PHYS 108", "Introductory Physics of Living", "Second term.", YES)
    lines += course_block("GSS 363", "Women and the Women", "Truncated apostrophe.")
    lines += course_block("ENGS 121G", "Writing About Place", "Seminar.")
    lines += course_block("ENGS 395D", "Senior Seminar: Drama", "Capstone.")
    lines += course_block("AVC 212A", "Digital Media Studio", "Retired course.")
    lines += course_block("BIO 195", "Biology Orientation", "Retired course.")
    lines += course_block("BIO 458", "Honors Continuation", "Administrative.", YES)
    lines += course_block("BIO 360", "Independent Study", "Faculty supervised.", YES)
    lines += course_block("CHEM 360", "Independent Study", "Faculty supervised.", YES)
    lines += course_block("BIO 457", "Senior Thesis", "Two semesters.", YES)
    lines += course_block("NRSC 457", "Senior Thesis", "Two semesters.", YES)
    lines += course_block("ANTH 301", "Ritual and Performance", "No keeper for this pair.")
    lines += course_block("THEA 301", "Ritual and Performance", "Cross-listed with ANTH 301.")
    lines += course_block("ECON 101", "Principles of Microeconomics", "Extracted version.")
    # Repeated header from a reprinted page
    lines += course_block("HIST 264", "Topics in World History (reprint)", "Duplicate page.")
    lines += ["Index", "A-Z listing of departments"]
    return "\n".join(lines) + "\n"


@pytest.fixture
def catalog_path(tmp_path, catalog_text):
    path = tmp_path / "data-raw" / "catalog_text.txt"
    path.parent.mkdir(parents=True)
    path.write_text(catalog_text, encoding="utf-8")
    return path
