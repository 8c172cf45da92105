"""Extract raw course records from the normalized listings text.

The listings are a run of course blocks, each ending with the phrase
``Instructor Permission Required: Yes\\`` (or ``No\\``). Extraction works
in two steps:

1. Split the text into blocks at every terminator occurrence. Text after
   the last terminator is not a block.
2. Inside each block, find the first course header
   ``<DEPT> <ddd>[A-Z]?`` (DEPT from the department vocabulary) and take
   the title as everything up to the next literal backslash.

Splitting first keeps the cost linear in text length: each header search
is confined to one block and the title capture cannot run past it. The
search also stops at the block's last backslash, so a block full of
code-like text and no backslash is rejected in one pass.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from course_catalog_common import get_logger
from course_catalog_pipeline.stats import PipelineStats

logger = get_logger(__name__)

BLOCK_TERMINATOR_RE = re.compile(r"Instructor Permission Required: (?:Yes|No)\\")


@dataclass(frozen=True)
class RawCourse:
    """One (code, title) pair as captured from a block."""

    course_code: str
    course_title: str
    block_index: int


def split_blocks(text: str) -> list[str]:
    """Split listings text into terminator-delimited course blocks."""
    blocks = []
    start = 0
    for match in BLOCK_TERMINATOR_RE.finditer(text):
        blocks.append(text[start : match.start()])
        start = match.end()
    return blocks


def build_header_pattern(departments: Iterable[str]) -> re.Pattern:
    """Compile the course-header pattern for a department vocabulary.

    Longer tokens are tried first so ``ENGS`` is preferred over ``ENG``
    at the same position.
    """
    tokens = sorted(set(departments), key=lambda token: (-len(token), token))
    if not tokens:
        raise ValueError("Department vocabulary is empty")
    alternation = "|".join(re.escape(token) for token in tokens)
    return re.compile(rf"((?:{alternation})\s\d{{3}}[A-Z]?)\s([^\\]*)\\")


def extract_courses(
    text: str,
    departments: Iterable[str],
    min_expected: int = 0,
    stats: Optional[PipelineStats] = None,
) -> list[RawCourse]:
    """Extract one raw course per block that contains a course header.

    Args:
        text: Normalized listings text (after the start sentinel)
        departments: Department-code vocabulary
        min_expected: Fewer matches than this is logged as an extraction gap
        stats: Optional run statistics to update

    Returns:
        Raw courses in document order, not deduplicated
    """
    pattern = build_header_pattern(departments)
    blocks = split_blocks(text)
    logger.info("blocks_split", blocks=len(blocks))

    courses: list[RawCourse] = []
    unmatched = 0
    for index, block in enumerate(blocks):
        # A title must end at a backslash, so nothing past the last one can match
        end = block.rfind("\\")
        match = pattern.search(block, 0, end + 1) if end >= 0 else None
        if match is None:
            unmatched += 1
            logger.debug("block_without_header", block_index=index, preview=block[:80])
            continue
        courses.append(
            RawCourse(
                course_code=match.group(1).strip(),
                course_title=match.group(2).strip(),
                block_index=index,
            )
        )

    logger.info(
        "courses_extracted",
        blocks=len(blocks),
        matched=len(courses),
        unmatched_blocks=unmatched,
    )
    if not courses or len(courses) < min_expected:
        logger.warning(
            "extraction_gap",
            matched=len(courses),
            min_expected=min_expected,
        )

    if stats is not None:
        stats.blocks = len(blocks)
        stats.unmatched_blocks = unmatched
        stats.extracted = len(courses)

    return courses
