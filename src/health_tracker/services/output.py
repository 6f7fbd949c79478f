"""
Output service for exporting entries to CSV.

Handles the flat entry listing and the per-category summary.
"""

import logging
from pathlib import Path

from health_tracker.domain.records import HealthRecord
from health_tracker.services.summary import SummaryService, records_to_frame
from health_tracker.utils.exceptions import ExportError

logger = logging.getLogger(__name__)


class OutputService:
    """Service for writing entries and summaries to CSV files."""

    def __init__(self, summary_service: SummaryService | None = None) -> None:
        """
        Initialize output service.

        Args:
            summary_service: Service used to compute summaries.
        """
        self.summary_service = summary_service or SummaryService()

    def write_entries_csv(
        self, records: list[HealthRecord] | tuple[HealthRecord, ...], path: Path
    ) -> bool:
        """
        Write entries to a CSV file in insertion order.

        Args:
            records: Records to write.
            path: Output file path.

        Returns:
            True if a file was written, False when there was nothing to write.

        Raises:
            ExportError: If the file cannot be written.
        """
        if not records:
            logger.warning("No entries to write")
            return False

        df = records_to_frame(records)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(path, index=False, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Failed to write entries to {path}: {e}") from e

        logger.info(f"Wrote {len(df)} entries to {path}")
        return True

    def write_summary_csv(
        self, records: list[HealthRecord] | tuple[HealthRecord, ...], path: Path
    ) -> bool:
        """
        Write the per-category summary to a CSV file.

        Args:
            records: Records to summarize.
            path: Output file path.

        Returns:
            True if a file was written, False when there was nothing to write.

        Raises:
            ExportError: If the file cannot be written.
        """
        if not records:
            logger.warning("No entries to summarize")
            return False

        summary = self.summary_service.category_summary(records)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            summary.to_csv(path, index=False, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Failed to write summary to {path}: {e}") from e

        logger.info(f"Wrote summary of {len(summary)} categories to {path}")
        return True
