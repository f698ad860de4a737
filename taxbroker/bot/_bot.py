import asyncio
import contextlib
import aiohttp
import discord.ext.commands
from typing import Optional

from taxbroker import config, constants, db, engine, models, universalis


class _TaxBrokerBot(discord.ext.commands.Bot):
    """Subclass of ``discord.ext.commands.Bot`` which we can attach custom fields to."""

    def __init__(self) -> None:
        intents = discord.Intents.default()
        # Needed to read prefix commands.
        intents.message_content = True

        super().__init__(
            command_prefix=constants.COMMAND_PREFIX,
            intents=intents,
            case_insensitive=True,
        )

        self.config: config.Config = None  # type: ignore
        """Set by ``run_taxbroker`` before the bot starts."""
        self.db = db.DBConnection()
        """The database connection to be used by our bot."""
        self.worlds = models.WorldRegistry()
        """Servers we currently know to be valid. Shared with the scheduler."""

        # These are created once we are logged in and have a running event loop.
        self.session: aiohttp.ClientSession = None  # type: ignore
        self.rates: universalis.TaxRateClient = None  # type: ignore
        self.scheduler: engine.RefreshScheduler = None  # type: ignore
        self.scheduler_task: Optional[asyncio.Task] = None

    async def setup_hook(self) -> None:
        """Called by discord.py once, after login and before connecting."""
        await self.start_resources()

    async def start_resources(self) -> None:
        # Connect to db
        await self.db.connect(self.config)

        self.session = aiohttp.ClientSession()
        self.rates = universalis.TaxRateClient(self.session)

        self.scheduler = engine.RefreshScheduler(
            rates_client=self.rates,
            worlds=self.worlds,
            store=self.db,
            messenger=engine.DiscordMessenger(self),
        )

        # Load the servers now rather than leaving every lookup to fail until the
        # first weekly refresh.
        await self.scheduler.refresh_worlds()

        self.scheduler_task = asyncio.create_task(self._run_scheduler())

    async def _run_scheduler(self) -> None:
        # We need the channel cache to find messages.
        await self.wait_until_ready()
        await self.scheduler.run_forever()

    async def close(self) -> None:
        """Stop the scheduler and release our resources before logging out."""
        if self.scheduler_task is not None:
            self.scheduler_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self.scheduler_task
            self.scheduler_task = None

        if self.session is not None:
            await self.session.close()

        self.db.close()
        await super().close()


# Set up the bot
TAXBROKER: _TaxBrokerBot = _TaxBrokerBot()
"""Global variable containing the bot instance."""


def _add_events_and_commands() -> None:
    """
    We're storing our event and command handlers in other files for better organization,
    but we need to make sure they actually get invoked so that the method decorators are
    called and the events are added to the bot. We only need to import a single item
    from each file for it to be evaluated, so we are going to import a designated null
    object from each file to jump-start that process. We're putting it in a function so
    the auto-formatter doesn't try to put these imports at the top of the file,
    otherwise TAXBROKER will not be initialized when the imports happen.
    """
    from ._events import _IMPORT_HELPER as _helper1
    from ._commands_rates import _IMPORT_HELPER as _helper2
    from ._commands_settings import _IMPORT_HELPER as _helper3

    (_helper1, _helper2, _helper3)


_add_events_and_commands()


# The main logic to run our bot.
def run_taxbroker() -> None:
    """
    Main run function for the bot.

    :raises ConfigurationError: if the configuration is missing or malformed. The bot
        never connects in that case.
    """
    TAXBROKER.config = config.load_config()
    # log_handler=None leaves logging to the root handler set up in __main__
    TAXBROKER.run(TAXBROKER.config.discord_token, log_handler=None)
