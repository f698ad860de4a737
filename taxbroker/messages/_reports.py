import datetime
import discord
from typing import List, Sequence

from taxbroker import models, date_utils

from ._formatting import format_server_name, format_rate_line
from ._locations import retainer_location


REPORT_COLOR = discord.Color.dark_blue()

NO_DATA = "No tax rate data available."


def report_tax_rates(rates: models.TaxRates, reset_at: datetime.datetime) -> str:
    """
    Build the body of a tax rate report for a single server.

    :param rates: the server's current tax rates.
    :param reset_at: when these rates expire.

    :returns: formatted report.

    :raises ValueError: if ``rates`` is empty. Check ``rates.is_empty`` first.
    """
    lowest_locations = rates.lowest_locations

    lines: List[str] = [
        f"Current Tax Rates until <t:{date_utils.unix_timestamp(reset_at)}:F> are:"
    ]
    for location, rate in rates:
        lines.append(format_rate_line(location, rate))

    plural = ""
    if len(lowest_locations) > 1:
        plural = "s"

    lines.append("")
    lines.append(f"Best location{plural} to place retainers:")

    # Locations we don't have a retainer spot for are left out.
    for location in lowest_locations:
        retainer = retainer_location(location)
        if retainer is not None:
            lines.append(f"- {retainer}")

    return "\n".join(lines)


def report_server_section(rates: models.TaxRates) -> str:
    """The short per-server block used in the all-servers listing."""
    server_name = format_server_name(rates.server)
    if rates.is_empty:
        return f"**{server_name}**: {NO_DATA}"

    lines = [f"**{server_name}**:"]
    lines.extend(format_rate_line(location, rate) for location, rate in rates)
    return "\n".join(lines)


def embed_tax_rates(
    rates: models.TaxRates, reset_at: datetime.datetime
) -> discord.Embed:
    """
    Build the embed we post (and later edit) for a single server.

    :param rates: the server's current tax rates. May be empty.
    :param reset_at: when these rates expire.
    """
    if rates.is_empty:
        description = NO_DATA
    else:
        description = report_tax_rates(rates, reset_at)

    return discord.Embed(
        title=f"FFXIV Market Tax Rates - {format_server_name(rates.server)}",
        description=description,
        color=REPORT_COLOR,
    )


def embed_all_servers_page(
    reports: Sequence[models.TaxRates], page: int, total_pages: int
) -> discord.Embed:
    """
    Build one page of the all-servers listing.

    :param reports: the rates for each server on this page, in display order.
    :param page: one-based page number.
    :param total_pages: total number of pages in the listing.
    """
    sections = "\n\n".join(report_server_section(rates) for rates in reports)
    description = (
        f"Current Tax Rates for all servers (Page {page}/{total_pages}):\n\n{sections}"
    )
    return discord.Embed(
        title="FFXIV Market Tax Rates - All Servers",
        description=description,
        color=REPORT_COLOR,
    )
