"""Merge manually known courses into the catalog."""

from typing import Iterable, Optional

from course_catalog_common import get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.fields import first_occurrence_wins
from course_catalog_pipeline.stats import PipelineStats

logger = get_logger(__name__)


def augment(
    records: list[CourseRecord],
    manual_courses: Iterable[CourseRecord],
    stats: Optional[PipelineStats] = None,
) -> list[CourseRecord]:
    """Append manual courses whose codes were not extracted.

    Manual courses are a safety net for omissions, never an override:
    on a code collision the extracted record is kept.
    """
    manual = list(manual_courses)
    extracted_codes = {r.course_code for r in records}
    # Extracted rows are "first", so they win every collision.
    merged, discarded = first_occurrence_wins(records + manual)

    added = sum(1 for r in merged if r.course_code not in extracted_codes)
    skipped = len(manual) - added
    if discarded:
        logger.debug(
            "manual_courses_shadowed",
            codes=[r.course_code for r in discarded],
        )
    logger.info("manual_courses_merged", added=added, skipped=skipped, total=len(merged))

    if stats is not None:
        stats.manual_added = added
        stats.manual_skipped = skipped

    return merged
