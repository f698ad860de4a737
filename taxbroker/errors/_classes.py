from typing import Any


from taxbroker import messages


class AbstractResponseError(Exception):
    """
    Implementing this class (through subclassing) results in an error type that can
    be raised during the processing of a command to communicate the error to the user
    who invoked the command.

    These errors are about bad requests, not bad code, so they are answered but never
    logged.
    """

    def response(self) -> str:
        """
        The response string to send back to the user.
        """
        raise NotImplementedError


class NoServerGivenError(AbstractResponseError):
    """Raised when a command needs a server name and didn't get one."""

    def response(self) -> str:
        return messages.error_no_server()


class UnknownServerError(AbstractResponseError):
    """Raised when a server name is not in our list of valid servers."""

    def __init__(self, server: str) -> None:
        """
        :param server: the normalized server name the user asked for.
        """
        self.server: str = server
        """The unrecognized server name."""

        super().__init__(server)

    def response(self) -> str:
        return messages.error_unknown_server(self.server)


class InvalidChannelError(AbstractResponseError):
    """Raised when the channel for tax rate updates can't be resolved."""

    def __init__(self, channel_arg: Any) -> None:
        """
        :param channel_arg: the channel argument supplied by the user.
        """
        self.channel_arg: Any = channel_arg
        super().__init__(channel_arg)

    def response(self) -> str:
        return messages.error_invalid_channel(self.channel_arg)


class NoServersFoundError(AbstractResponseError):
    """Raised when we can't get a list of servers for the all-servers listing."""

    def response(self) -> str:
        return messages.error_no_servers_found()


class AllServersError(AbstractResponseError):
    """
    Wraps any error that interrupts the all-servers listing. Pages that were already
    sent stay up, and the user gets one message telling them the rest failed.
    """

    def __init__(self, error: BaseException) -> None:
        """
        :param error: the error that interrupted the listing.
        """
        self.error: BaseException = error
        super().__init__(error)

    def response(self) -> str:
        return messages.error_all_servers(self.error)


class ConfigurationError(Exception):
    """
    Raised at startup when required configuration is missing or malformed. The bot
    will not start if this is raised.
    """
