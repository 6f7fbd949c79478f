"""
Summary service for per-category statistics.

Aggregates entries by test name, the way the daily consolidation of weight
data aggregated measurements by day.
"""

import logging

import pandas as pd

from health_tracker.domain.records import HealthRecord

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = [
    "category",
    "count",
    "mean",
    "min",
    "max",
    "unit",
    "first_date",
    "last_date",
]


def records_to_frame(records: list[HealthRecord] | tuple[HealthRecord, ...]) -> pd.DataFrame:
    """
    Convert records to a DataFrame using the persisted field names.

    Args:
        records: Records in insertion order.

    Returns:
        DataFrame with one row per record.
    """
    columns = ["id", "date", "testName", "value", "unit", "notes"]
    if not records:
        return pd.DataFrame(columns=columns)

    data = [r.model_dump(mode="json", by_alias=True) for r in records]
    return pd.DataFrame(data, columns=columns)


class SummaryService:
    """Service computing per-category statistics over entries."""

    def category_summary(
        self, records: list[HealthRecord] | tuple[HealthRecord, ...]
    ) -> pd.DataFrame:
        """
        Summarize entries per category.

        The reported unit is the one of the most recently entered record of
        each category. Categories appear in order of first entry.

        Args:
            records: Records in insertion order.

        Returns:
            DataFrame with the columns in ``SUMMARY_COLUMNS``.
        """
        if not records:
            return pd.DataFrame(columns=SUMMARY_COLUMNS)

        df = records_to_frame(records)
        df["date"] = pd.to_datetime(df["date"]).dt.date

        grouped = df.groupby("testName", sort=False)

        summary = grouped["value"].agg(["count", "mean", "min", "max"])
        summary["unit"] = grouped["unit"].last()
        summary["first_date"] = grouped["date"].min()
        summary["last_date"] = grouped["date"].max()

        summary = summary.reset_index().rename(columns={"testName": "category"})
        summary["mean"] = summary["mean"].round(2)

        logger.debug(f"Summarized {len(df)} entries into {len(summary)} categories")
        return summary[SUMMARY_COLUMNS]
