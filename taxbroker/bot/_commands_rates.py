import discord.ext.commands
from typing import Optional

from taxbroker import constants, date_utils, engine, errors

from ._bot import TAXBROKER


_IMPORT_HELPER = None


@TAXBROKER.command(
    name="taxrate",
    help=(
        "<server> Shows FFXIV market board tax rates and the best place for your"
        f" retainers. Use '{constants.ALL_SERVERS_ARG}' to list every server."
    ),
)
async def tax_rate(
    ctx: discord.ext.commands.Context, *, server_arg: Optional[str] = None
) -> None:
    """
    Handles responses to the ``'$taxrate'`` command.

    :param ctx: message context passed in by discord.py.
    :param server_arg: the server to report on, or 'all'.

    :raises NoServerGivenError: if no server was supplied.
    :raises UnknownServerError: if the server is not a known server.
    """
    if engine.normalize_server_arg(server_arg) == constants.ALL_SERVERS_ARG:
        await _send_all_servers(ctx)
        return

    embed = await engine.single_server_report(
        TAXBROKER.rates, TAXBROKER.worlds, server_arg, date_utils.utc_now()
    )
    await ctx.send(embed=embed)


async def _send_all_servers(ctx: discord.ext.commands.Context) -> None:
    """
    Sends the all-servers listing one page at a time.

    :raises AllServersError: if the listing fails part way. Any pages already sent are
        left in place.
    """
    try:
        async for page in engine.all_servers_pages(TAXBROKER.rates):
            await ctx.send(embed=page)
    except errors.AbstractResponseError:
        raise
    except Exception as error:
        raise errors.AllServersError(error) from error
