"""Final invariant checks run before the catalog is written.

This is the only hard gate between the pipeline and downstream stages,
so every violation is collected and reported together.
"""

from collections import Counter
from typing import Optional

from course_catalog_common import CatalogValidationError, get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.datasets import CatalogDatasets
from course_catalog_pipeline.fields import derive_department, derive_level

logger = get_logger(__name__)


def find_duplicate_codes(records: list[CourseRecord]) -> list[str]:
    counts = Counter(r.course_code for r in records)
    return sorted(code for code, count in counts.items() if count > 1)


def find_inconsistent_fields(records: list[CourseRecord]) -> list[str]:
    """Describe rows whose department or level disagrees with the code."""
    problems = []
    for record in records:
        department = derive_department(record.course_code)
        if record.department != department:
            problems.append(
                f"{record.course_code}: Department {record.department!r} "
                f"does not match code prefix {department!r}"
            )
        level = derive_level(record.course_code)
        if record.course_level != level:
            problems.append(
                f"{record.course_code}: CourseLevel {record.course_level} "
                f"does not match code level {level}"
            )
    return problems


def find_duplicate_titles(
    records: list[CourseRecord],
    independent_levels: frozenset[int],
) -> list[str]:
    """Titles shared by more than one non-independent-work row."""
    counts = Counter(
        r.course_title for r in records if r.course_level not in independent_levels
    )
    return sorted(title for title, count in counts.items() if count > 1)


def validate_catalog(
    records: list[CourseRecord],
    datasets: Optional[CatalogDatasets] = None,
    strict: bool = False,
) -> None:
    """Check the final table and raise if any invariant is broken.

    Args:
        records: Final catalog rows
        datasets: Static tables for blacklist and exemption checks
            (skipped when None)
        strict: Treat shared titles as fatal instead of a warning

    Raises:
        CatalogValidationError: Listing every violation found
    """
    problems: list[str] = []

    for code in find_duplicate_codes(records):
        problems.append(f"duplicate CourseCode {code}")

    problems.extend(find_inconsistent_fields(records))

    duplicate_titles: list[str] = []
    if datasets is not None:
        for record in records:
            if record.course_code in datasets.deleted_codes:
                problems.append(f"{record.course_code}: code is on the deletion list")
            if record.course_level in datasets.excluded_levels:
                problems.append(
                    f"{record.course_code}: level {record.course_level} is excluded"
                )
        duplicate_titles = find_duplicate_titles(records, datasets.independent_levels)

    if duplicate_titles:
        if strict:
            problems.extend(f"duplicate CourseTitle {title!r}" for title in duplicate_titles)
        else:
            logger.warning(
                "duplicate_titles",
                count=len(duplicate_titles),
                titles=duplicate_titles,
            )

    if problems:
        logger.error("catalog_invalid", problems=len(problems))
        raise CatalogValidationError(
            f"Catalog failed validation with {len(problems)} problem(s)",
            problems,
        )

    logger.info("catalog_validated", rows=len(records))
