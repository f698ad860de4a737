import logging
import discord.ext.commands

from taxbroker import errors

from ._bot import TAXBROKER


_IMPORT_HELPER = None


@TAXBROKER.event
async def on_command_error(
    ctx: discord.ext.commands.Context, error: BaseException
) -> None:
    """Invoked by the discord.py when an error occurs while processing a command."""
    await errors.handle_command_error(ctx, error)


@TAXBROKER.event
async def on_ready() -> None:
    """Called whenever the bot finishes connecting, including after reconnects."""
    logging.info(
        f"{TAXBROKER.user} has connected to Discord! ({len(TAXBROKER.guilds)} guilds,"
        f" {len(TAXBROKER.worlds)} servers)"
    )
