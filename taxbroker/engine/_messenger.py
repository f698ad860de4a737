import discord
from typing import Optional


class DiscordMessenger:
    """Finds previously posted report messages so they can be edited."""

    def __init__(self, client: discord.Client) -> None:
        self.client: discord.Client = client

    async def fetch_channel(
        self, channel_id: int
    ) -> Optional[discord.abc.Messageable]:
        """
        Resolve a channel we can read messages from.

        :returns: the channel, or ``None`` if it is gone or we can't see it.
        """
        channel = self.client.get_channel(channel_id)
        if channel is None:
            # Not in the cache, so ask discord directly.
            try:
                channel = await self.client.fetch_channel(channel_id)
            except (discord.NotFound, discord.Forbidden, discord.InvalidData):
                return None

        if not isinstance(channel, discord.abc.Messageable):
            return None

        return channel

    async def fetch_message(
        self, channel_id: int, message_id: int
    ) -> Optional[discord.Message]:
        """
        Resolve a previously posted message.

        :param channel_id: discord id of the channel the message was posted in.
        :param message_id: discord id of the message.

        :returns: the message, or ``None`` if the channel or message is gone.
        """
        channel = await self.fetch_channel(channel_id)
        if channel is None:
            return None

        try:
            return await channel.fetch_message(message_id)
        except (discord.NotFound, discord.Forbidden):
            return None
