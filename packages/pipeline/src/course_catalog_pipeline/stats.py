"""Per-run pipeline statistics.

Each stage records what it kept, changed and dropped so a run can be
audited from its summary alone. Counts never halt the run; alerts are
reported alongside the summary.
"""

from dataclasses import dataclass, field


@dataclass
class PipelineStats:
    """Stage-by-stage counters for one catalog build.

    Example:
        >>> stats = PipelineStats(min_expected_courses=100)
        >>> stats.extracted = 42
        >>> stats.check_alerts()
        ['EXTRACTION GAP: 42 courses extracted (expected at least 100)']
    """

    min_expected_courses: int = 0

    # Extraction
    blocks: int = 0
    unmatched_blocks: int = 0
    extracted: int = 0

    # Field derivation
    underivable: int = 0
    duplicate_codes: int = 0
    derived: int = 0

    # Corrections
    titles_corrected: int = 0
    departments_corrected: int = 0

    # Deduplication
    blacklisted: int = 0
    excluded_level: int = 0
    independent_work: int = 0
    unique_titles: int = 0
    cross_listed: int = 0
    keepers_kept: int = 0
    cross_listed_dropped: int = 0
    orphan_titles: list[str] = field(default_factory=list)

    # Augmentation
    manual_added: int = 0
    manual_skipped: int = 0

    final: int = 0

    @property
    def extraction_gap(self) -> bool:
        """True if extraction found nothing or fewer courses than expected."""
        return self.extracted == 0 or self.extracted < self.min_expected_courses

    def check_alerts(self) -> list[str]:
        """Return alert messages for counts that suggest format drift."""
        alerts = []
        if self.extraction_gap:
            alerts.append(
                f"EXTRACTION GAP: {self.extracted} courses extracted "
                f"(expected at least {self.min_expected_courses})"
            )
        if self.unmatched_blocks:
            alerts.append(
                f"UNMATCHED BLOCKS: {self.unmatched_blocks}/{self.blocks} "
                f"blocks had no course header"
            )
        if self.orphan_titles:
            alerts.append(
                f"KEEPERLESS CROSS-LISTINGS: {len(self.orphan_titles)} title group(s) "
                f"dropped entirely"
            )
        return alerts

    def summary(self) -> str:
        """Human-readable summary for CLI output."""
        lines = [
            "",
            "Catalog Build Summary",
            "=" * 50,
            f"Blocks split:              {self.blocks}",
            f"  Without course header:   {self.unmatched_blocks}",
            f"Courses extracted:         {self.extracted}",
            f"  Underivable (dropped):   {self.underivable}",
            f"  Duplicate codes:         {self.duplicate_codes}",
            f"Unique courses parsed:     {self.derived}",
            "",
            f"Titles corrected:          {self.titles_corrected}",
            f"Departments corrected:     {self.departments_corrected}",
            "",
            f"Blacklisted codes removed: {self.blacklisted}",
            f"Excluded-level removed:    {self.excluded_level}",
            f"Independent-work kept:     {self.independent_work}",
            f"Unique titles:             {self.unique_titles}",
            f"Cross-listed instances:    {self.cross_listed}",
            f"  Keepers kept:            {self.keepers_kept}",
            f"  Dropped:                 {self.cross_listed_dropped}",
            "",
            f"Manual courses added:      {self.manual_added}",
            f"  Already extracted:       {self.manual_skipped}",
            "",
            f"Final catalog rows:        {self.final}",
        ]

        alerts = self.check_alerts()
        if alerts:
            lines.append("")
            lines.append("ALERTS:")
            lines.extend(f"  - {alert}" for alert in alerts)

        return "\n".join(lines) + "\n"
