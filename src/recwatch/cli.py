"""CLI entry point for recwatch."""

import sys
from pathlib import Path

import typer
from rich.console import Console

from recwatch.config.logging import setup_logging
from recwatch.config.manager import ConfigManager
from recwatch.config.properties import PropertyStore
from recwatch.config.schema import GlobalConfig
from recwatch.guide.client import GuideClient
from recwatch.guide.fetcher import EpisodeFetcher
from recwatch.notify.dispatcher import NotificationDispatcher
from recwatch.notify.mail import EmailNotifier
from recwatch.notify.slack import SlackNotifier
from recwatch.pipeline import Pipeline
from recwatch.table.store import EpisodeTable
from recwatch.table.view import EpisodeView
from recwatch.utils.errors import RecwatchError
from recwatch.utils.lock import RunLock

app = typer.Typer(
    name="recwatch",
    help="Watch a TV guide and nag about unrecorded episodes",
    no_args_is_help=True,
)
console = Console()


def build_table(config: GlobalConfig) -> EpisodeTable:
    """Create the episode table adapter from configuration."""
    return EpisodeTable(
        ConfigManager.table_path(config),
        name=config.table.name,
        public_url=config.table.public_url,
    )


def build_pipeline(
    config: GlobalConfig,
    properties: PropertyStore,
    client: GuideClient,
) -> Pipeline:
    """Wire a pipeline from configuration and an open guide client."""
    fetcher = EpisodeFetcher(
        client,
        detail_base_url=config.guide.detail_base_url,
        page_delay_seconds=config.guide.page_delay_seconds,
    )
    dispatcher = NotificationDispatcher(
        properties,
        email=EmailNotifier(config.notification),
        slack=SlackNotifier(config.notification),
    )
    return Pipeline(
        config=config,
        table=build_table(config),
        fetcher=fetcher,
        dispatcher=dispatcher,
        lock=RunLock(ConfigManager.lock_path(config)),
    )


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """recwatch - Get told before an episode you have not recorded airs."""
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    setup_logging(verbose=verbose, log_file=log_file)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from recwatch import __version__

    console.print(f"[bold cyan]recwatch[/bold cyan] v{__version__}")


@app.command("run")
def run(ctx: typer.Context) -> None:
    """Fetch listings, update the episode table and notify.

    Intended to be triggered by a scheduler (cron, systemd timer).
    """
    try:
        manager = ConfigManager()
        config = manager.load_config()
        options = ctx.obj or {}
        setup_logging(
            verbose=options.get("verbose", False),
            log_file=options.get("log_file"),
            level=config.log_level,
        )
        properties = manager.load_properties()

        with GuideClient(
            search_url=config.guide.search_url,
            timeout=config.guide.timeout_seconds,
        ) as client:
            result = build_pipeline(config, properties, client).execute()

        if result.skipped:
            return

        EpisodeView(date_format=config.table.date_format).render(
            result.episodes, console=console, title=config.table.name
        )
        console.print(
            f"[dim]Fetched {result.fetched_count}, stored {result.stored_count}, "
            f"unrecorded soon {len(result.unrecorded)}[/dim]"
        )
        if result.report is not None:
            channels = [
                name
                for name, sent in (
                    ("email", result.report.email_sent),
                    ("slack", result.report.slack_sent),
                )
                if sent
            ]
            console.print(
                f"[green]✓[/green] Notified via {', '.join(channels) or 'no channel'}"
            )

    except RecwatchError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


@app.command("show")
def show_table() -> None:
    """Show upcoming episodes from the stored table."""
    try:
        config = ConfigManager().load_config()
        table = build_table(config)
        episodes = table.load()

        if not episodes:
            console.print("[yellow]No episodes stored yet.[/yellow]")
            console.print("\nFetch listings: [cyan]recwatch run[/cyan]")
            return

        EpisodeView(date_format=config.table.date_format).render(
            episodes, console=console, title=config.table.name
        )
        console.print(f"\n[dim]Total: {len(episodes)} episode(s)[/dim]")

    except RecwatchError as e:
        console.print(f"[red]✗[/red] Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
