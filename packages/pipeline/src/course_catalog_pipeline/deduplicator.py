"""Cross-listing resolution.

A cross-listed course appears once per department that offers it, each
copy with the same title. Resolution runs four filters in order:

1. Drop blacklisted codes and the excluded (administrative) level(s).
2. Set aside independent-work levels; their shared titles are expected.
3. Split the rest by title count: unique titles pass through untouched.
4. From titles that occur more than once, keep only registered keeper codes.

Any cross-listed code that is not a keeper is dropped, including every
member of a title group that has no keeper at all. The keeper list is the
single source of truth for canonical codes; ``strict=True`` turns a
keeper-less group into a ``KeeperResolutionError`` instead.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional

from course_catalog_common import KeeperResolutionError, get_logger
from course_catalog_contracts import CourseRecord
from course_catalog_pipeline.datasets import CatalogDatasets
from course_catalog_pipeline.stats import PipelineStats

logger = get_logger(__name__)


@dataclass
class KeeperResolution:
    """Outcome of resolving the cross-listed pool."""

    kept: list[CourseRecord]
    dropped: list[CourseRecord]
    orphan_titles: list[str]


class Deduplicator:
    """Resolve blacklisted, administrative and cross-listed course rows.

    Example:
        >>> dedup = Deduplicator.from_datasets(load_datasets())
        >>> catalog = dedup.deduplicate(records)
    """

    def __init__(
        self,
        deleted_codes: Iterable[str] = (),
        excluded_levels: Iterable[int] = (),
        independent_levels: Iterable[int] = (),
        keeper_codes: Iterable[str] = (),
        strict: bool = False,
    ):
        self.deleted_codes = frozenset(deleted_codes)
        self.excluded_levels = frozenset(excluded_levels)
        self.independent_levels = frozenset(independent_levels)
        self.keeper_codes = frozenset(keeper_codes)
        self.strict = strict

    @classmethod
    def from_datasets(cls, datasets: CatalogDatasets, strict: bool = False) -> "Deduplicator":
        return cls(
            deleted_codes=datasets.deleted_codes,
            excluded_levels=datasets.excluded_levels,
            independent_levels=datasets.independent_levels,
            keeper_codes=datasets.keeper_codes,
            strict=strict,
        )

    def remove_blacklisted(
        self, records: list[CourseRecord]
    ) -> tuple[list[CourseRecord], int, int]:
        """Drop deleted codes and excluded levels.

        Returns:
            Tuple of (remaining, blacklisted count, excluded-level count)
        """
        remaining: list[CourseRecord] = []
        blacklisted = 0
        excluded = 0
        for record in records:
            if record.course_code in self.deleted_codes:
                blacklisted += 1
            elif record.course_level in self.excluded_levels:
                excluded += 1
            else:
                remaining.append(record)
        logger.info(
            "blacklist_removed",
            blacklisted=blacklisted,
            excluded_level=excluded,
            remaining=len(remaining),
        )
        return remaining, blacklisted, excluded

    def partition_independent(
        self, records: list[CourseRecord]
    ) -> tuple[list[CourseRecord], list[CourseRecord]]:
        """Split into (independent-work, deduplication candidates)."""
        independent = [r for r in records if r.course_level in self.independent_levels]
        candidates = [r for r in records if r.course_level not in self.independent_levels]
        return independent, candidates

    def split_by_title_count(
        self, candidates: list[CourseRecord]
    ) -> tuple[list[CourseRecord], list[CourseRecord]]:
        """Split into (unique-title records, cross-listed records)."""
        counts = Counter(r.course_title for r in candidates)
        unique = [r for r in candidates if counts[r.course_title] == 1]
        cross_listed = [r for r in candidates if counts[r.course_title] > 1]
        logger.info(
            "title_collisions",
            unique_titles=len(unique),
            cross_listed=len(cross_listed),
            title_groups=sum(1 for count in counts.values() if count > 1),
        )
        return unique, cross_listed

    def resolve_keepers(self, cross_listed: list[CourseRecord]) -> KeeperResolution:
        """Keep only keeper codes from the cross-listed pool.

        Raises:
            KeeperResolutionError: In strict mode, if a title group has no keeper
        """
        kept = [r for r in cross_listed if r.course_code in self.keeper_codes]
        dropped = [r for r in cross_listed if r.course_code not in self.keeper_codes]

        kept_titles = {r.course_title for r in kept}
        orphan_titles: list[str] = []
        for record in dropped:
            if record.course_title not in kept_titles and record.course_title not in orphan_titles:
                orphan_titles.append(record.course_title)

        if orphan_titles:
            if self.strict:
                raise KeeperResolutionError(orphan_titles)
            logger.warning(
                "cross_listings_without_keeper",
                groups=len(orphan_titles),
                titles=orphan_titles,
            )

        logger.info(
            "cross_listings_resolved",
            kept=len(kept),
            dropped=len(dropped),
        )
        return KeeperResolution(kept=kept, dropped=dropped, orphan_titles=orphan_titles)

    def deduplicate(
        self,
        records: list[CourseRecord],
        stats: Optional[PipelineStats] = None,
    ) -> list[CourseRecord]:
        """Run all four steps.

        Returns:
            Unique-title rows, then keeper rows, then independent-work rows
        """
        remaining, blacklisted, excluded = self.remove_blacklisted(records)
        independent, candidates = self.partition_independent(remaining)
        unique, cross_listed = self.split_by_title_count(candidates)
        resolution = self.resolve_keepers(cross_listed)

        if stats is not None:
            stats.blacklisted = blacklisted
            stats.excluded_level = excluded
            stats.independent_work = len(independent)
            stats.unique_titles = len(unique)
            stats.cross_listed = len(cross_listed)
            stats.keepers_kept = len(resolution.kept)
            stats.cross_listed_dropped = len(resolution.dropped)
            stats.orphan_titles = list(resolution.orphan_titles)

        return unique + resolution.kept + independent
