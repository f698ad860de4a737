import datetime
import discord
from typing import Optional, Tuple

from taxbroker import date_utils, messages, models
from taxbroker.db import DBConnection
from taxbroker.universalis import TaxRateClient

from ._queries import validate_server


async def configure_subscription(
    store: DBConnection,
    rates_client: TaxRateClient,
    worlds: models.WorldRegistry,
    guild_id: int,
    server_arg: Optional[str],
    channel: discord.abc.Messageable,
    now: datetime.datetime,
) -> Tuple[models.Subscription, discord.Message]:
    """
    Post a fresh tax rate report to a channel and remember it for weekly updates.

    :param store: where subscriptions are saved.
    :param rates_client: client to fetch tax rates with.
    :param worlds: the registry of valid servers.
    :param guild_id: the guild setting up the subscription.
    :param server_arg: the server argument passed in by the user.
    :param channel: the channel to post the report in.
    :param now: the current time.

    A guild only ever has one subscription. Running setup again posts a new message
    and points the subscription at it instead of the old one.

    :returns: the stored subscription and the posted message.

    :raises NoServerGivenError: if no server was supplied.
    :raises UnknownServerError: if the server is not a known server.
    """
    server = validate_server(server_arg, worlds)

    rates = await rates_client.fetch_tax_rates(server)
    embed = messages.embed_tax_rates(rates, date_utils.next_reset(now))
    message: discord.Message = await channel.send(embed=embed)

    subscription = models.Subscription(
        guild_id=guild_id,
        server=server,
        channel_id=message.channel.id,
        message_id=message.id,
    )
    subscription = await store.upsert_subscription(subscription)

    return subscription, message
