"""Derive structured fields from course codes.

Also home of the "first occurrence wins" tie-break shared by field
derivation and the manual-course merge.
"""

import re
from typing import Iterable, Optional, TypeVar

from course_catalog_common import get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.extractor import RawCourse
from course_catalog_pipeline.stats import PipelineStats

logger = get_logger(__name__)

DEPARTMENT_RE = re.compile(r"^[A-Z]+")
LEVEL_RE = re.compile(r"\d{3}")

T = TypeVar("T", RawCourse, CourseRecord)


def derive_department(course_code: str) -> Optional[str]:
    """Leading alphabetic run of the code, or None if there is none."""
    match = DEPARTMENT_RE.match(course_code)
    return match.group(0) if match else None


def derive_level(course_code: str) -> Optional[int]:
    """First 3-digit run of the code as an int, or None if there is none."""
    match = LEVEL_RE.search(course_code)
    return int(match.group(0)) if match else None


def first_occurrence_wins(records: Iterable[T]) -> tuple[list[T], list[T]]:
    """Keep the first record for each course code.

    Whichever sequence the caller puts first has precedence on a code
    collision, so call sites decide precedence by ordering.

    Returns:
        Tuple of (kept, discarded), both in input order
    """
    seen: set[str] = set()
    kept: list[T] = []
    discarded: list[T] = []
    for record in records:
        if record.course_code in seen:
            discarded.append(record)
            continue
        seen.add(record.course_code)
        kept.append(record)
    return kept, discarded


def derive_fields(
    raw_courses: Iterable[RawCourse],
    stats: Optional[PipelineStats] = None,
) -> list[CourseRecord]:
    """Turn raw (code, title) pairs into full course records.

    Rows whose department or level cannot be derived are corrupted matches
    and are dropped. Repeated codes keep their first (document-order)
    occurrence.
    """
    # Document order is "first": an earlier block beats a later repeat.
    unique_raw, repeats = first_occurrence_wins(raw_courses)

    records: list[CourseRecord] = []
    underivable = 0
    for raw in unique_raw:
        department = derive_department(raw.course_code)
        level = derive_level(raw.course_code)
        if department is None or level is None:
            underivable += 1
            logger.debug("underivable_course_code", course_code=raw.course_code)
            continue
        records.append(
            CourseRecord(
                course_code=raw.course_code,
                course_title=raw.course_title,
                department=department,
                course_level=level,
            )
        )

    logger.info(
        "fields_derived",
        courses=len(records),
        underivable=underivable,
        duplicate_codes=len(repeats),
    )
    if stats is not None:
        stats.underivable = underivable
        stats.duplicate_codes = len(repeats)
        stats.derived = len(records)

    return records
