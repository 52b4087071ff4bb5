"""CLI commands for buying tickets."""

from __future__ import annotations

import click

from ticketing.application.show_prices import ShowPricesHandler
from ticketing.domain.exceptions import DomainException
from ticketing.domain.model.ticket_request import TicketTypeRequest
from ticketing.domain.model.ticket_type import TicketType
from ticketing.infrastructure.bootstrap import purchase_tickets_handler


def _parse_tickets(raw: str) -> list[TicketTypeRequest]:
    """Parse 'ADULT:2,CHILD:1' into TicketTypeRequest list."""
    requests: list[TicketTypeRequest] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'TYPE:Count'."
            )
        name, count_str = pair.rsplit(":", 1)
        try:
            count = int(count_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid count '{count_str}' for ticket type '{name}'."
            )
        try:
            requests.append(TicketTypeRequest(TicketType.parse(name), count))
        except DomainException as exc:
            raise click.BadParameter(str(exc))
    return requests


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option(
    "--tickets",
    required=True,
    help="Tickets as 'TYPE:Count,TYPE:Count', e.g. 'ADULT:2,CHILD:1'.",
)
def purchase(account_id: int, tickets: str) -> None:
    """Purchase tickets for an account."""
    requests = _parse_tickets(tickets)
    handler = purchase_tickets_handler()

    try:
        dto = handler.handle(account_id=account_id, ticket_requests=requests)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase confirmed for account {dto.account_id}")
    click.echo()
    click.echo(f"  {'Type':<10} {'Qty':>5} {'Price':>8} {'Total':>8}")
    click.echo(f"  {'-'*34}")
    for line in dto.lines:
        click.echo(
            f"  {line.ticket_type:<10} {line.quantity:>5} {line.unit_price:>8} {line.line_total:>8}"
        )
    click.echo(f"  {'-'*34}")
    click.echo(f"  {'Amount charged':<25} {dto.total_amount:>8}")
    click.echo(f"  {'Seats reserved':<25} {dto.total_seats:>8}")


@click.command("prices")
def prices() -> None:
    """Show the ticket price list."""
    lines = ShowPricesHandler().handle()

    click.echo(f"{'Type':<10} {'Price':>8} {'Seat':>6}")
    click.echo("-" * 26)
    for line in lines:
        seat = "yes" if line.occupies_seat else "no"
        click.echo(f"{line.ticket_type:<10} {line.unit_price:>8} {seat:>6}")
