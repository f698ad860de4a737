import traceback
import discord.ext.commands
import logging
import asyncio

from taxbroker import errors, messages


# Check failures that mean the user isn't allowed to configure the bot here.
_PERMISSION_ERRORS = (
    discord.ext.commands.MissingPermissions,
    discord.ext.commands.NoPrivateMessage,
)


async def _handle_response_error(
    ctx: discord.ext.commands.Context, error: errors.AbstractResponseError,
) -> None:
    """
    Handles errors defined by this package, which contain information on how to respond
    to users trying to execute commands.
    """
    await ctx.send(error.response())


async def _handle_generic_error(
    ctx: discord.ext.commands.Context, error: BaseException,
) -> None:
    """
    Handles errors that do not inherit from our package's :error:`ResponseError`.

    We are going to send a generic "oops!" response to the channel that the command was
    invoked in, then DM them a traceback that can be sent to the devs for debugging.
    """

    traceback_str = "\n".join(
        traceback.format_exception(type(error), error, error.__traceback__)
    )
    logging.error(traceback_str)

    # Set up the coroutines for sending these two messages then execute them
    channel_coro = ctx.send(messages.error_general(ctx.author))
    dm_coro = ctx.author.send(messages.error_general_details(traceback_str))

    await asyncio.gather(channel_coro, dm_coro)


async def handle_command_error(
    ctx: discord.ext.commands.Context, error: BaseException
) -> None:
    """
    Used to handle errors that occur during the execution of commands.

    :param ctx: command context this error occurred during.
    :param error: The error to handle.

    This method is registered as a global command error handler, so it does not have to
    be invoked whenever you encounter an error that should halt the execution of a
    command. Such errors can be raised and will be automatically caught and handled.
    """

    # If this is a CommandInvokeError, then it was caused by an error raised by OUR
    # code. We'll want to fetch the original error and inspect it instead.
    if isinstance(error, discord.ext.commands.CommandInvokeError):
        error = error.original

    if isinstance(error, errors.AbstractResponseError):
        await _handle_response_error(ctx, error)
    elif isinstance(error, _PERMISSION_ERRORS):
        await ctx.send(messages.error_admin_only(ctx.author))
    elif isinstance(error, discord.ext.commands.CommandNotFound):
        # Other bots may share our prefix.
        return
    else:
        await _handle_generic_error(ctx, error)
