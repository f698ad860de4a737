import asyncio
import datetime
import discord
from typing import AsyncIterator, List, Optional, Sequence, TypeVar

from taxbroker import constants, date_utils, errors, messages, models
from taxbroker.universalis import TaxRateClient


_T = TypeVar("_T")

# Users sometimes wrap server names in quotes, ie: $taxrate 'exodus'
_QUOTE_CHARS = "'\""


def normalize_server_arg(server_arg: Optional[str]) -> str:
    """Turn a user-supplied server argument into the lower-case form we store."""
    if server_arg is None:
        return ""

    for char in _QUOTE_CHARS:
        server_arg = server_arg.replace(char, "")

    return server_arg.strip().lower()


def validate_server(server_arg: Optional[str], worlds: models.WorldRegistry) -> str:
    """
    Normalize a server argument and check it against the known servers.

    :param server_arg: the server argument passed in by the user.
    :param worlds: the registry of valid servers.

    :returns: the normalized server name.

    :raises NoServerGivenError: if no server was supplied.
    :raises UnknownServerError: if the server is not a known server.
    """
    server = normalize_server_arg(server_arg)
    if not server:
        raise errors.NoServerGivenError()

    if not worlds.is_valid(server):
        raise errors.UnknownServerError(server)

    return server


def paginate(items: Sequence[_T], page_size: int) -> List[List[_T]]:
    """Split ``items`` into pages of ``page_size``. The last page may be short."""
    if page_size < 1:
        raise ValueError("page size must be at least 1")

    return [
        list(items[start : start + page_size])
        for start in range(0, len(items), page_size)
    ]


async def single_server_report(
    rates_client: TaxRateClient,
    worlds: models.WorldRegistry,
    server_arg: Optional[str],
    now: datetime.datetime,
) -> discord.Embed:
    """
    Build a report for one server on request.

    :param rates_client: client to fetch tax rates with.
    :param worlds: the registry of valid servers.
    :param server_arg: the server argument passed in by the user.
    :param now: the current time.

    Bad server arguments are rejected before anything is fetched.

    :raises NoServerGivenError: if no server was supplied.
    :raises UnknownServerError: if the server is not a known server.
    """
    server = validate_server(server_arg, worlds)
    rates = await rates_client.fetch_tax_rates(server)
    return messages.embed_tax_rates(rates, date_utils.next_reset(now))


async def all_servers_pages(
    rates_client: TaxRateClient, page_size: int = constants.SERVER_PAGE_SIZE,
) -> AsyncIterator[discord.Embed]:
    """
    Yields the pages of the all-servers listing, one embed at a time.

    :param rates_client: client to fetch tax rates with.
    :param page_size: number of servers per page.

    The server list is fetched fresh rather than taken from the registry, and servers
    are listed in the order universalis returns them. Each page's
    rates are fetched concurrently, and a page is yielded as soon as it is ready so the
    caller can send it before the next page is fetched.

    :raises NoServersFoundError: if the server list could not be fetched.
    """
    servers = await rates_client.fetch_worlds()
    if not servers:
        raise errors.NoServersFoundError()

    pages = paginate(servers, page_size)
    for page_number, page in enumerate(pages, start=1):
        # gather returns results in the order the coroutines were passed in, no matter
        # which request finishes first.
        reports: List[models.TaxRates] = await asyncio.gather(
            *(rates_client.fetch_tax_rates(server) for server in page)
        )
        yield messages.embed_all_servers_page(reports, page_number, len(pages))
