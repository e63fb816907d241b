# src/jamfusage/cli.py
# Two refresh jobs, each replacing one table in the output directory:
# "objects" (catalog of every configuration object) and "report" (which object uses which).
import logging
from typing import Annotated, Callable, Optional

import typer

from jamfusage.app import event_bus, orchestrator
from jamfusage.config.loader import ConfigurationError
from jamfusage.core.auth import AuthError
from jamfusage.http.errors import FetchError
from jamfusage.sheets.writer import TableWriter

app = typer.Typer(
    name="jamfusage",
    help="Jamf Pro object catalog and usage report.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

OutputOption = Annotated[
    Optional[str],
    typer.Option("--output", "-o", help="Output directory (overrides appsettings)."),
]

# Failures a run is expected to end with; anything else is a bug and keeps its traceback
RUN_ERRORS = (ConfigurationError, AuthError, FetchError, OSError)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    """jamfusage - inventory Jamf Pro objects and where they are used."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def describe_error(ex: BaseException) -> str:
    if isinstance(ex, ConfigurationError):
        return f"Configuration error: {ex}"
    if isinstance(ex, AuthError):
        return f"Authentication failed: {ex} ({ex.hint})"
    if isinstance(ex, FetchError):
        return f"Fetch failed: {ex}"
    if isinstance(ex, OSError):
        return f"Could not write table: {ex}"
    return f"Unexpected error: {ex!r}"

def on_ready(payload) -> None:
    typer.echo(f"{payload['sheet']}: {payload['rows']} rows")

def on_failed(payload) -> None:
    typer.echo(f"{payload['sheet']} not updated. {describe_error(payload['error'])}", err=True)


def _run(job: Callable[..., int], topic: str, output: Optional[str]) -> None:
    writer = TableWriter(output) if output else None
    with (
        event_bus.subscription(event_bus.ready_topic(topic), on_ready),
        event_bus.subscription(event_bus.failed_topic(topic), on_failed),
    ):
        try:
            job(writer=writer)
        except RUN_ERRORS:
            raise typer.Exit(code=1)


@app.command()
def objects(output: OutputOption = None) -> None:
    """Refresh the Objects table."""
    _run(orchestrator.refresh_objects, "objects", output)


@app.command()
def report(output: OutputOption = None) -> None:
    """Refresh the usage Report table."""
    _run(orchestrator.refresh_report, "report", output)


@app.command(name="all")
def refresh_all(output: OutputOption = None) -> None:
    """Refresh Objects, then Report."""
    objects(output)
    report(output)


if __name__ == "__main__":
    app()
