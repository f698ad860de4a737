from ._classes import (
    AbstractResponseError,
    NoServerGivenError,
    UnknownServerError,
    InvalidChannelError,
    NoServersFoundError,
    AllServersError,
    ConfigurationError,
)
from ._handle import handle_command_error

(
    AbstractResponseError,
    NoServerGivenError,
    UnknownServerError,
    InvalidChannelError,
    NoServersFoundError,
    AllServersError,
    ConfigurationError,
    handle_command_error,
)
