import discord
from unittest.mock import AsyncMock, MagicMock

from taxbroker import engine

from zdevelop.tests.fakes import mark_test, not_found


def text_channel() -> MagicMock:
    channel = MagicMock(spec=discord.TextChannel)
    channel.fetch_message = AsyncMock()
    return channel


def make_client(cached=None, fetched=None, fetch_error=None) -> MagicMock:
    client = MagicMock()
    client.get_channel.return_value = cached
    client.fetch_channel = AsyncMock(return_value=fetched, side_effect=fetch_error)
    return client


class TestFetchMessage:
    @mark_test
    async def test_cached_channel(self):
        channel = text_channel()
        client = make_client(cached=channel)

        messenger = engine.DiscordMessenger(client)
        message = await messenger.fetch_message(10, 100)

        assert message is channel.fetch_message.return_value
        channel.fetch_message.assert_awaited_once_with(100)
        client.fetch_channel.assert_not_awaited()

    @mark_test
    async def test_uncached_channel(self):
        channel = text_channel()
        client = make_client(fetched=channel)

        messenger = engine.DiscordMessenger(client)
        message = await messenger.fetch_message(10, 100)

        assert message is channel.fetch_message.return_value
        client.fetch_channel.assert_awaited_once_with(10)

    @mark_test
    async def test_channel_gone(self):
        client = make_client(fetch_error=not_found("Unknown Channel"))

        messenger = engine.DiscordMessenger(client)

        assert await messenger.fetch_message(10, 100) is None

    @mark_test
    async def test_message_gone(self):
        channel = text_channel()
        channel.fetch_message.side_effect = not_found()
        client = make_client(cached=channel)

        messenger = engine.DiscordMessenger(client)

        assert await messenger.fetch_message(10, 100) is None

    @mark_test
    async def test_channel_without_messages(self):
        client = make_client(cached=MagicMock(spec=discord.CategoryChannel))

        messenger = engine.DiscordMessenger(client)

        assert await messenger.fetch_channel(10) is None
        assert await messenger.fetch_message(10, 100) is None
