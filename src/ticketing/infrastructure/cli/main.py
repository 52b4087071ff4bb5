import click

from ticketing.infrastructure import settings
from ticketing.infrastructure.cli.purchase_commands import prices, purchase
from ticketing.infrastructure.logging_config import LOG_LEVELS, configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override TICKETING_LOG_LEVEL.",
)
@click.option("--json-logs/--no-json-logs", default=None, help="Render logs as JSON.")
def cli(log_level: str | None, json_logs: bool | None) -> None:
    """Ticketing — purchase admission tickets"""
    try:
        configure_logging(
            level=log_level or settings.LOG_LEVEL,
            json_logs=settings.LOG_JSON if json_logs is None else json_logs,
        )
    except ValueError as exc:
        raise click.ClickException(f"TICKETING_LOG_LEVEL: {exc}")


# Register subcommands
cli.add_command(purchase)
cli.add_command(prices)
