import discord
from typing import Any

from taxbroker import constants


def error_no_server() -> str:
    """Returned when '$taxrate' is called without a server."""
    return (
        f"Please specify a server. Usage: `{constants.COMMAND_PREFIX}taxrate <server>`,"
        f" or `{constants.COMMAND_PREFIX}taxrate {constants.ALL_SERVERS_ARG}` for every"
        " server."
    )


def error_unknown_server(server: str) -> str:
    """
    Returned when a user asks about a server universalis doesn't know.

    :param server: the server name as we understood it.
    """
    return f"Invalid server '{server}'. Please specify a valid server."


def error_invalid_channel(channel_arg: Any) -> str:
    """
    Returned when the channel for tax rate updates can't be found.

    :param channel_arg: the channel argument the user supplied.
    """
    return f"Invalid channel ID: '{channel_arg}'."


def error_no_servers_found() -> str:
    """Returned when universalis gives us an empty (or no) server list."""
    return "No servers found. Universalis may be having trouble, try again later."


def error_all_servers(error: BaseException) -> str:
    """
    Returned when the all-servers listing fails part way through.

    :param error: the error that stopped the listing.
    """
    return f"An error occurred while fetching tax rates for all servers: {error}"


def error_admin_only(user: discord.abc.User) -> str:
    """
    Returned when someone without admin rights tries to configure the bot.

    :param user: The user who's command resulted in this error.
    """
    return (
        f"Sorry, {user.mention}, only server administrators can set up a tax rate"
        " channel."
    )


def error_general(user: discord.abc.User) -> str:
    """
    Error message returned when a general python error occurs during the execution of
    a command.

    :param user: The user who's command resulted in this error.

    :returns: the formatted message.
    """
    return (
        f"Well, that didn't work. I had some trouble processing your request,"
        f" {user.mention}. I'll DM you the details."
    )


def error_general_details(traceback_str: str) -> str:
    """
    Error message DM'ed to the user after a general error with the traceback associated
    with it.

    :param traceback_str: The formatted traceback.

    :returns: the formatted message.
    """
    return f"Here is some more info on the error I encountered:\n```{traceback_str}```"
