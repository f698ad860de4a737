import logging
import re
import discord.ext.commands
from typing import Optional

from taxbroker import date_utils, engine, errors, messages

from ._bot import TAXBROKER


_IMPORT_HELPER = None


# Channels can be passed as a raw id or a mention, ie: 1234 or <#1234>
REGEX_ARG_CHANNEL = re.compile(r"^(?:<#)?(\d+)>?$")


def _resolve_channel(
    ctx: discord.ext.commands.Context, channel_arg: Optional[str]
) -> discord.TextChannel:
    """
    Work out which channel the tax rate report should live in.

    :param ctx: message context passed in by discord.py.
    :param channel_arg: channel id or mention passed by the user. ``None`` means the
        channel the command was sent in.

    :raises InvalidChannelError: if the channel is not a text channel in this guild.
    """
    if channel_arg is None:
        channel = ctx.channel
    else:
        match = REGEX_ARG_CHANNEL.match(channel_arg.strip())
        if match is None:
            raise errors.InvalidChannelError(channel_arg)

        guild: discord.Guild = ctx.guild
        channel = guild.get_channel(int(match.group(1)))

    if not isinstance(channel, discord.TextChannel):
        raise errors.InvalidChannelError(channel_arg or ctx.channel.id)

    return channel


async def _make_read_only(channel: discord.TextChannel) -> None:
    """Stop everyone but the bot from posting in the tax rate channel."""
    try:
        await channel.set_permissions(
            channel.guild.default_role,
            send_messages=False,
            reason="taxbroker tax rate channel",
        )
    except discord.Forbidden:
        logging.warning(
            f"missing permissions to make channel {channel.id} read-only in guild"
            f" {channel.guild.id}"
        )


@TAXBROKER.command(
    name="taxrate-channel",
    help=(
        "<server> [channel] Posts tax rates for a server in a channel and updates them"
        " every week. Admins only."
    ),
)
@discord.ext.commands.guild_only()
@discord.ext.commands.has_permissions(administrator=True)
async def setup_tax_rate_channel(
    ctx: discord.ext.commands.Context,
    server_arg: Optional[str] = None,
    channel_arg: Optional[str] = None,
) -> None:
    """
    Sets the server and channel a guild wants weekly tax rate updates for.

    :param ctx: message context passed in by discord.py.
    :param server_arg: the server to report on. If missing, the guild's current
        settings are sent back instead.
    :param channel_arg: the channel to post in. Defaults to the current channel.

    :raises UnknownServerError: if the server is not a known server.
    :raises InvalidChannelError: if the channel can't be found in this guild.
    """
    guild: discord.Guild = ctx.guild

    if not engine.normalize_server_arg(server_arg):
        current = await TAXBROKER.db.fetch_subscription(guild.id)
        await ctx.send(messages.info_subscription_usage(current))
        return

    # Check the server before the channel so a typo in either gets the right error.
    server = engine.validate_server(server_arg, TAXBROKER.worlds)
    channel = _resolve_channel(ctx, channel_arg)

    _, message = await engine.configure_subscription(
        store=TAXBROKER.db,
        rates_client=TAXBROKER.rates,
        worlds=TAXBROKER.worlds,
        guild_id=guild.id,
        server_arg=server_arg,
        channel=channel,
        now=date_utils.utc_now(),
    )
    await ctx.send(
        messages.confirmation_subscription(server, message.channel.id, message.id)
    )
    await _make_read_only(channel)
