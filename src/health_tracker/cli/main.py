"""
Command-line interface for Health Tracker.

Provides commands for logging bloodwork entries, reviewing averages and
trends, exporting data, and tracking water intake.
"""

from pathlib import Path

import typer

from health_tracker.infrastructure.storage.base import KeyValueStorage
from health_tracker.infrastructure.storage.file_storage import FileStorage
from health_tracker.infrastructure.storage.memory_storage import InMemoryStorage
from health_tracker.services.entry_store import EntryStore
from health_tracker.services.input_boundary import parse_record_input
from health_tracker.services.output import OutputService
from health_tracker.services.summary import SummaryService
from health_tracker.services.water_counter import WaterCounter
from health_tracker.utils.exceptions import ConfigurationError, HealthTrackerError
from health_tracker.utils.logging_config import get_logger, setup_logging
from health_tracker.utils.parameters import ParameterLoader, StorageConfig

app = typer.Typer(help="Health Tracker - Manual logging of bloodwork and water intake")
entries_app = typer.Typer(help="Bloodwork entries")
water_app = typer.Typer(help="Water intake counter")
app.add_typer(entries_app, name="entries")
app.add_typer(water_app, name="water")

logger = get_logger(__name__)


def init_config(config_path: str = "config/config.yaml") -> ParameterLoader:
    """
    Initialize configuration and logging.

    Args:
        config_path: Path to configuration file.

    Returns:
        Parameter loader instance.
    """
    param_loader = ParameterLoader(config_path)
    setup_logging(param_loader.get_logging_config(), "health_tracker")
    return param_loader


def create_storage(config: StorageConfig) -> KeyValueStorage:
    """
    Build the storage backend named in configuration.

    Args:
        config: Storage configuration.

    Returns:
        Storage backend instance.

    Raises:
        ConfigurationError: If the backend name is unknown.
    """
    if config.backend == "file":
        return FileStorage(config.dir)
    if config.backend == "memory":
        return InMemoryStorage()

    raise ConfigurationError(f"Unknown storage backend: {config.backend}")


def open_entry_store(param_loader: ParameterLoader) -> EntryStore:
    """Build the entry store on the configured storage backend."""
    storage_config = param_loader.get_storage_config()
    return EntryStore(create_storage(storage_config), storage_config.entries_key)


def open_water_counter(param_loader: ParameterLoader) -> WaterCounter:
    """Build the water counter and load its persisted total."""
    storage_config = param_loader.get_storage_config()
    counter = WaterCounter(
        create_storage(storage_config),
        storage_config.water_key,
        param_loader.get_water_config(),
    )
    counter.load()
    return counter


def fail(action: str, error: HealthTrackerError) -> typer.Exit:
    """Log and report a failed command, returning the exit to raise."""
    logger.error(f"{action} failed: {error}")
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=1)


@entries_app.command("add")
def add_entry(
    test_name: str = typer.Option(..., help="Test name, e.g. Cholesterol"),
    value: str = typer.Option(..., help="Measured value"),
    unit: str = typer.Option(..., help="Measurement unit, e.g. mg/dL"),
    date: str | None = typer.Option(None, help="Date of the test (defaults to today)"),
    notes: str | None = typer.Option(None, help="Optional notes"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Record a bloodwork test result."""
    try:
        param_loader = init_config(config_path)
        record = parse_record_input(
            date,
            test_name,
            value,
            unit,
            notes,
            param_loader.get_processing_config().timezone,
        )

        store = open_entry_store(param_loader)
        store.append(record)

        typer.echo(f"Added {record.describe()}")

    except HealthTrackerError as e:
        raise fail("Add entry", e) from e


@entries_app.command("list")
def list_entries(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """List all entries in the order they were added."""
    try:
        store = open_entry_store(init_config(config_path))

        if not store.entries:
            typer.echo("No entries recorded")
            return

        for record in store.entries:
            typer.echo(record.describe())

    except HealthTrackerError as e:
        raise fail("List entries", e) from e


@entries_app.command("average")
def average(
    category: str = typer.Argument(..., help="Test name to average (exact match)"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Show the average value for a test name."""
    try:
        store = open_entry_store(init_config(config_path))
        mean = store.average_value(category)

        if mean is None:
            typer.echo(f"No entries for {category}")
            return

        typer.echo(f"Average {category}: {mean:g}")

    except HealthTrackerError as e:
        raise fail("Average", e) from e


@entries_app.command("trend")
def trend(
    category: str = typer.Argument(..., help="Test name to list (exact match)"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """List the values of a test name by date."""
    try:
        store = open_entry_store(init_config(config_path))
        records = store.trend(category)

        if not records:
            typer.echo(f"No entries for {category}")
            return

        for record in records:
            typer.echo(f"{record.date.isoformat()}  {record.value:g} {record.unit}")

    except HealthTrackerError as e:
        raise fail("Trend", e) from e


@entries_app.command("summary")
def summary(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Show count, mean, min and max per test name."""
    try:
        store = open_entry_store(init_config(config_path))

        if not store.entries:
            typer.echo("No entries recorded")
            return

        df = SummaryService().category_summary(store.entries)
        typer.echo(df.to_string(index=False))

    except HealthTrackerError as e:
        raise fail("Summary", e) from e


@entries_app.command("export")
def export(
    output: str = typer.Option("output/entries.csv", help="Entries CSV output path"),
    summary_output: str | None = typer.Option(None, help="Optional summary CSV output path"),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Export entries (and optionally the summary) to CSV."""
    try:
        store = open_entry_store(init_config(config_path))
        output_service = OutputService()

        if not output_service.write_entries_csv(store.entries, Path(output)):
            typer.echo("No entries to export")
            return

        typer.echo(f"Exported {len(store)} entries to {output}")

        if summary_output:
            output_service.write_summary_csv(store.entries, Path(summary_output))
            typer.echo(f"Summary written to {summary_output}")

    except HealthTrackerError as e:
        raise fail("Export", e) from e


@water_app.command("show")
def water_show(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Show the total water intake."""
    try:
        counter = open_water_counter(init_config(config_path))
        typer.echo(f"Total Water Intake: {counter.format_total()}")

    except HealthTrackerError as e:
        raise fail("Water show", e) from e


@water_app.command("add")
def water_add(
    amount: float | None = typer.Option(
        None, help="Amount to log (defaults to configured increment)"
    ),
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Log water intake."""
    try:
        param_loader = init_config(config_path)
        counter = open_water_counter(param_loader)

        increment = amount if amount is not None else param_loader.get_water_config().increment
        counter.add(increment)

        typer.echo(f"Total Water Intake: {counter.format_total()}")

    except HealthTrackerError as e:
        raise fail("Water add", e) from e


@water_app.command("reset")
def water_reset(
    config_path: str = typer.Option("config/config.yaml", help="Path to configuration file"),
) -> None:
    """Reset the water intake total to zero."""
    try:
        counter = open_water_counter(init_config(config_path))
        notice = counter.reset()

        typer.echo(f"{notice.title}: {notice.message}")

    except HealthTrackerError as e:
        raise fail("Water reset", e) from e


if __name__ == "__main__":
    app()
