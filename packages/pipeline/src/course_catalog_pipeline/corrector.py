"""Apply curated fixes to known bad extractions.

Both passes are pure field updates keyed on the course code: no rows are
added or removed.
"""

from typing import Mapping, Optional

from course_catalog_common import get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.datasets import CatalogDatasets
from course_catalog_pipeline.stats import PipelineStats

logger = get_logger(__name__)


def correct_titles(
    records: list[CourseRecord],
    title_corrections: Mapping[str, str],
) -> tuple[list[CourseRecord], int]:
    """Replace titles for codes in the override table.

    Returns:
        Tuple of (records, number of titles replaced)
    """
    corrected: list[CourseRecord] = []
    changed = 0
    for record in records:
        title = title_corrections.get(record.course_code)
        if title is None:
            corrected.append(record)
            continue
        corrected.append(record.model_copy(update={"course_title": title}))
        changed += 1
    logger.info("titles_corrected", corrected=changed, table_size=len(title_corrections))
    return corrected, changed


def rewrite_department(record: CourseRecord, department: str) -> CourseRecord:
    """Move a record to ``department``, rewriting the code's prefix to match.

    The level and any letter suffix are unchanged.
    """
    suffix = record.course_code[len(record.department) :]
    return record.model_copy(
        update={"department": department, "course_code": f"{department}{suffix}"}
    )


def correct_departments(
    records: list[CourseRecord],
    department_corrections: Mapping[str, str],
) -> tuple[list[CourseRecord], int]:
    """Rewrite department and code together for codes with a wrong prefix.

    Returns:
        Tuple of (records, number of codes rewritten)
    """
    corrected: list[CourseRecord] = []
    changed = 0
    for record in records:
        department = department_corrections.get(record.course_code)
        if department is None:
            corrected.append(record)
            continue
        fixed = rewrite_department(record, department)
        logger.debug(
            "department_corrected",
            old_code=record.course_code,
            new_code=fixed.course_code,
        )
        corrected.append(fixed)
        changed += 1
    logger.info(
        "departments_corrected",
        corrected=changed,
        table_size=len(department_corrections),
    )
    return corrected, changed


def apply_corrections(
    records: list[CourseRecord],
    datasets: CatalogDatasets,
    stats: Optional[PipelineStats] = None,
) -> list[CourseRecord]:
    """Run title corrections, then department corrections."""
    records, titles = correct_titles(records, datasets.title_corrections)
    records, departments = correct_departments(records, datasets.department_corrections)
    if stats is not None:
        stats.titles_corrected = titles
        stats.departments_corrected = departments
    return records
