import datetime
import logging
import discord.utils
from typing import Awaitable, Callable

from taxbroker import date_utils, messages, models
from taxbroker.db import DBConnection
from taxbroker.universalis import TaxRateClient

from ._messenger import DiscordMessenger


_Clock = Callable[[], datetime.datetime]
_SleepUntil = Callable[[datetime.datetime], Awaitable[object]]


class RefreshScheduler:
    """
    Keeps every guild's tax rate message current.

    Once a week, a few minutes after the tax rates reset, the scheduler refreshes the
    list of valid servers, then walks every stored subscription and edits its message
    with the new rates. It runs until its task is cancelled.

    Nothing here is allowed to take the loop down. A subscription whose channel or
    message has been deleted is skipped quietly, an error while refreshing one
    subscription is logged and the rest carry on, and an error that sinks a whole
    cycle is logged and we wait for the next reset.
    """

    def __init__(
        self,
        rates_client: TaxRateClient,
        worlds: models.WorldRegistry,
        store: DBConnection,
        messenger: DiscordMessenger,
        clock: _Clock = date_utils.utc_now,
        sleep_until: _SleepUntil = discord.utils.sleep_until,
    ) -> None:
        """
        :param rates_client: client to fetch tax rates and servers with.
        :param worlds: the shared registry of valid servers. Refreshed each cycle.
        :param store: where subscriptions are read from.
        :param messenger: resolves subscription targets to discord messages.
        :param clock: returns the current UTC time.
        :param sleep_until: suspends until the given aware datetime.
        """
        self.rates_client: TaxRateClient = rates_client
        self.worlds: models.WorldRegistry = worlds
        self.store: DBConnection = store
        self.messenger: DiscordMessenger = messenger
        self.clock: _Clock = clock
        self.sleep_until: _SleepUntil = sleep_until

    async def run_forever(self) -> None:
        """Wait for each publish time and refresh everything, forever."""
        while True:
            await self.wait_for_publish()
            try:
                await self.run_cycle()
            except Exception:
                logging.exception("tax rate refresh cycle failed")

    async def wait_for_publish(self) -> None:
        """Sleep until the next publish time."""
        target = date_utils.publish_time(self.clock())
        logging.info(f"next tax rate refresh at {target.isoformat()}")
        await self.sleep_until(target)

    async def refresh_worlds(self) -> None:
        """
        Refresh the registry of valid servers.

        A failed fetch leaves the previous servers in place until the next refresh,
        rather than emptying the registry and rejecting every server in the meantime.
        """
        names = await self.rates_client.fetch_worlds()
        if not names:
            logging.warning("world list unavailable, keeping the previous servers")
            return

        self.worlds.replace(names)
        logging.info(f"loaded {len(self.worlds)} servers")

    async def run_cycle(self) -> int:
        """
        Run a single refresh of every subscription.

        :returns: the number of messages that were updated.
        """
        await self.refresh_worlds()

        subscriptions = await self.store.fetch_subscriptions()
        updated = 0

        for subscription in subscriptions:
            try:
                if await self.refresh_subscription(subscription):
                    updated += 1
            except Exception:
                logging.exception(
                    f"could not refresh tax rates for guild {subscription.guild_id}"
                )

        logging.info(f"updated {updated} of {len(subscriptions)} tax rate messages")
        return updated

    async def refresh_subscription(self, subscription: models.Subscription) -> bool:
        """
        Edit one subscription's message with the current rates.

        :param subscription: the subscription to refresh.

        :returns: ``True`` if the message was edited, ``False`` if it was skipped.
        """
        if not subscription.is_complete:
            return False

        # is_complete guarantees these, this is for mypy
        assert subscription.server is not None
        assert subscription.channel_id is not None
        assert subscription.message_id is not None

        rates = await self.rates_client.fetch_tax_rates(subscription.server)

        message = await self.messenger.fetch_message(
            subscription.channel_id, subscription.message_id
        )
        if message is None:
            logging.info(
                f"tax rate message for guild {subscription.guild_id} is gone, skipping"
            )
            return False

        reset_at = date_utils.next_reset(self.clock())
        await message.edit(embed=messages.embed_tax_rates(rates, reset_at))
        return True
