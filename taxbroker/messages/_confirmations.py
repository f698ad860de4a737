from typing import Optional

from taxbroker import constants, models

from ._formatting import format_server_name


NOT_SET = "Not set"


def confirmation_subscription(server: str, channel_id: int, message_id: int) -> str:
    """
    Confirmation message for setting up a tax rate channel.

    :param server: the server the guild will get updates for.
    :param channel_id: discord id of the channel the report was posted in.
    :param message_id: discord id of the posted report.

    :returns: the formatted message.
    """
    return (
        f"Tax rate updates set for **{format_server_name(server)}** in"
        f" <#{channel_id}> for message: {message_id}"
    )


def info_subscription_usage(subscription: Optional[models.Subscription]) -> str:
    """
    Usage help for '$taxrate-channel', along with the guild's current settings.

    :param subscription: the guild's current subscription, if it has one.
    """
    server = NOT_SET
    channel = NOT_SET
    if subscription is not None:
        if subscription.server:
            server = format_server_name(subscription.server)
        if subscription.channel_id:
            channel = f"<#{subscription.channel_id}>"

    return (
        "To set the tax rate channel:"
        f" `{constants.COMMAND_PREFIX}taxrate-channel <server> [channel]`\n"
        f"Current settings:\nServer: {server}\nChannel: {channel}"
    )
